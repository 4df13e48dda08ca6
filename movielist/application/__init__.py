"""
Application Layer
=================

Use case implementations.
This layer orchestrates domain entities, repositories and catalogs.

Contains:
- Use Cases: Business operations (add account, find movie, add movie)
- DTOs: Pydantic models describing the HTTP API
"""
