"""
Account DTO
===========

Pydantic models for account API requests and responses.
"""
from pydantic import BaseModel, ConfigDict

SIGN_UP_EXAMPLE = {
    "name": "Ana Lopez",
    "email": "ana.lopez@gmail.com",
    "password": "s3cret-pass",
}


class AccountResponse(BaseModel):
    """DTO for a created account. The password hash is never returned."""
    id: str
    name: str
    email: str
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0f3b0c1e9d6a4f5c8e2b7a1d3c4e5f60",
                "name": "Ana Lopez",
                "email": "ana.lopez@gmail.com",
            }
        }
    )
