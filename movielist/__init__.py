"""
movielist
=========

Sign-up and movie list backend.
"""
