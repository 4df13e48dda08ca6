"""
Account Model
=============

Domain models representing a user account.
These are pure domain objects with no infrastructure dependencies.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountModel:
    """
    Data needed to create an account.
    
    By the time this model is built the password is already hashed;
    the plaintext never travels past the sign-up controller.
    """
    name: str
    email: str
    password: str


@dataclass
class Account:
    """Account domain model. `password` always holds the hash."""
    id: str
    name: str
    email: str
    password: str
    
    def to_public_dict(self) -> dict:
        """Account fields safe to return to a client (no password hash)."""
        return {"id": self.id, "name": self.name, "email": self.email}
