"""
Infrastructure Layer
====================

Concrete implementations of domain contracts.

Contains:
- db: MongoDB connection and repositories
- cryptography: bcrypt password hashing
- validation: email syntax checks
- tmdb: TMDB movie catalog client
"""
