# jsoncall/core/__init__.py
"""
Core components of jsoncall.

- types: type descriptors and JSON type naming
- signature: signature resolution for functions and methods
- binding: JSON argument binding and normalization
- dispatch: invocation and result classification
- errors: error taxonomy

No side effects on import.
"""
