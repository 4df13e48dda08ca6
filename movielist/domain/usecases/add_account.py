"""
Add Account Use Case Interface
==============================

Contract for persisting a new account.
"""
from abc import ABC, abstractmethod

from movielist.domain.models.account import Account, AddAccountModel


class AddAccount(ABC):
    """Business operation that stores a new account."""
    
    @abstractmethod
    async def execute(self, account: AddAccountModel) -> Account:
        """
        Create an account.
        
        Args:
            account: Account data with the password already hashed
            
        Returns:
            Created account entity
        """
        pass
