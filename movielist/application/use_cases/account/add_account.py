"""
Add Account Use Case
====================

Business use case for storing a new account.
"""
import asyncio
import logging
import uuid

from movielist.domain.models.account import Account, AddAccountModel
from movielist.domain.repositories.account_repository import AccountRepository
from movielist.domain.usecases.add_account import AddAccount

logger = logging.getLogger(__name__)


class DbAddAccount(AddAccount):
    """
    Use case for creating an account in the account repository.
    
    Emails are unique: a second account with the same email is rejected.
    """
    
    def __init__(self, account_repository: AccountRepository):
        """
        Initialize use case with repository.
        
        Args:
            account_repository: Repository for account persistence
        """
        self._repository = account_repository
    
    async def execute(self, account: AddAccountModel) -> Account:
        """
        Execute the add account use case.
        
        Args:
            account: Account data with hashed password
            
        Returns:
            Created account entity
            
        Raises:
            ValueError: If the email is already registered
        """
        existing_account = await asyncio.to_thread(self._repository.find_by_email, account.email)
        if existing_account:
            raise ValueError(f"Email '{account.email}' is already registered")
        
        new_account = Account(
            id=uuid.uuid4().hex,
            name=account.name,
            email=account.email,
            password=account.password,
        )
        created = await asyncio.to_thread(self._repository.add, new_account)
        logger.info("Account %s created", created.id)
        return created
