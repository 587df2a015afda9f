# jsoncall/api/__init__.py
"""
User-facing API for jsoncall.
"""

from .invoker import Invoker

__all__ = ["Invoker"]
