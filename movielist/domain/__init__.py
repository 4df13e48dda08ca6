"""
Domain Layer
============

Core business models and contracts.
This layer has no dependencies on web frameworks or infrastructure.

Contains:
- Models: Account and Movie
- Protocols: Encrypter and EmailValidator capabilities
- Use Cases: Abstract business operations invoked by controllers
- Repository Interfaces: Abstract contracts for data access
"""
