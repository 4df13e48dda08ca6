"""
Presentation Errors
===================

Error descriptors returned in response bodies.
They are exception types so they carry a message the usual way, but
controllers return them as values and never raise them.
"""
from typing import Any, Dict, Optional


class PresentationError(Exception):
    """Base error descriptor. Two descriptors are equal when kind and message match."""
    
    name = "PresentationError"
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresentationError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message
    
    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"
    
    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used for JSON response bodies."""
        return {"error": self.name, "message": self.message}


class MissingParamError(PresentationError):
    """A required request field is absent or empty."""
    
    name = "MissingParamError"
    
    def __init__(self, param_name: str):
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(PresentationError):
    """A request field is present but malformed."""
    
    name = "InvalidParamError"
    
    def __init__(self, param_name: str):
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class NotFoundError(PresentationError):
    """The requested resource does not exist."""
    
    name = "NotFoundError"
    
    def __init__(self, resource_id: Any):
        super().__init__(f"Resource not found: {resource_id}")
        self.resource_id = resource_id


class ServerError(PresentationError):
    """
    Unexpected failure in a collaborator.
    
    Holds the formatted traceback of the original error instead of the
    error object itself. The traceback stays server-side: `to_dict` only
    exposes the generic message.
    """
    
    name = "ServerError"
    
    def __init__(self, stack: Optional[str] = None):
        super().__init__("Internal server error")
        self.stack = stack
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServerError):
            return NotImplemented
        return self.stack == other.stack
    
    def __hash__(self) -> int:
        return hash((type(self).__name__, self.stack))
