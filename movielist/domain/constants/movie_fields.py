"""Constants for Movie model field names"""


class MovieFields:
    """Field name constants for stored movies"""
    ID = "id"
    USER_ID = "user_id"
    ADDED_AT = "added_at"
