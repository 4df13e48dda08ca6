"""
Email Validator Adapter
=======================

EmailValidator implementation backed by the email-validator library.
"""
from email_validator import EmailNotValidError, validate_email

from movielist.domain.protocols.email_validator import EmailValidator


class EmailValidatorAdapter(EmailValidator):
    """Syntax-only email check; no DNS lookups are made."""
    
    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
