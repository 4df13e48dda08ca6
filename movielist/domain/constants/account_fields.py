"""Constants for Account model field names"""


class AccountFields:
    """Field name constants for Account model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    CREATED_AT = "created_at"
