"""
Dependency Injection
====================

Container wiring domain contracts to their implementations.
"""
