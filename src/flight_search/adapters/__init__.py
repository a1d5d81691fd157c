"""
Adapters for Flight Search.

Concrete implementations of the port interfaces.
"""
