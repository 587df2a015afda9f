# jsoncall/config/__init__.py
"""
Configuration for jsoncall.

Code defaults are the truth; a YAML file is optional input.
"""

from .loader import JsonCallConfig, DEFAULT_CONFIG_PATH

__all__ = ["JsonCallConfig", "DEFAULT_CONFIG_PATH"]
