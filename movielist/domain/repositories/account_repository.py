"""
Account Repository Interface
============================

Abstract interface for account data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from movielist.domain.models.account import Account


class AccountRepository(ABC):
    """
    Abstract repository for account persistence operations.
    
    This interface defines the contract for account data access.
    Concrete implementations should be in the infrastructure layer.
    """
    
    @abstractmethod
    def add(self, account: Account) -> Account:
        """
        Store a new account.
        
        Args:
            account: Account entity to store
            
        Returns:
            Stored account entity
            
        Raises:
            ValueError: If an account with the same email already exists
        """
        pass
    
    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email.
        
        Args:
            email: Account email address
            
        Returns:
            Account entity if found, None otherwise
        """
        pass
