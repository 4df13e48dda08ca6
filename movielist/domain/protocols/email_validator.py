"""
Email Validator Protocol
========================

Abstract capability for syntactic email checks.
"""
from abc import ABC, abstractmethod


class EmailValidator(ABC):
    """Syntactic check of an email address."""
    
    @abstractmethod
    def is_valid(self, email: str) -> bool:
        """Return True if `email` is a well-formed address."""
        pass
