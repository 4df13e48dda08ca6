"""
Error DTO
=========

Pydantic model for error bodies.
"""
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """DTO for error descriptors."""
    error: str = Field(..., description="Error kind, e.g. MissingParamError")
    message: str = Field(..., description="Human-readable description")
