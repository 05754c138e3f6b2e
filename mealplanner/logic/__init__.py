"""Core business logic layer.

Subpackages:
- shopping: building and rendering shopping lists from the weekly plan
"""
__all__ = ["shopping"]
