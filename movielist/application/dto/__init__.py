from .account_dto import AccountResponse
from .error_dto import ErrorResponse

__all__ = ["AccountResponse", "ErrorResponse"]
