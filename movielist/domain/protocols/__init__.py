from .encrypter import Encrypter
from .email_validator import EmailValidator

__all__ = ["Encrypter", "EmailValidator"]
