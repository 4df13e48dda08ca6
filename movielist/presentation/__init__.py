"""
Presentation Layer
==================

Controllers that sit behind the HTTP routes.
A controller turns an HttpRequest into calls against use cases and
returns exactly one HttpResponse; it never lets an exception escape.

Contains:
- Protocols: HttpRequest, HttpResponse and the Controller contract
- Errors: Error descriptors placed in response bodies
- Helpers: Functions that build HttpResponse values
- Controllers: Sign-up and add-movie controllers
"""
