"""
Core app - Shared abstractions and utilities.

Holds pieces used by every API app rather than by one resource:
- Response rendering (PrettyJSONRenderer)
"""
