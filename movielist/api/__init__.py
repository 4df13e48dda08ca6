"""
API Package
===========

FastAPI routers and the glue between HTTP and presentation controllers.
"""
