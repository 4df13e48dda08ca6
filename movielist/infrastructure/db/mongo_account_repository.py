"""
MongoDB Account Repository
==========================

Concrete implementation of AccountRepository using MongoDB.
"""
from typing import Optional

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from movielist.core.config import get_settings
from movielist.domain.constants.account_fields import AccountFields
from movielist.domain.models.account import Account
from movielist.domain.repositories.account_repository import AccountRepository
from movielist.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from movielist.utils.datetime_utils import now


class MongoAccountRepository(AccountRepository):
    """
    MongoDB implementation of AccountRepository.
    
    Handles all account persistence operations using MongoDB.
    """
    
    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().accounts_collection
        )
        # One account per email
        self._collection.create_index(AccountFields.EMAIL, unique=True)
    
    def _to_entity(self, doc: dict) -> Account:
        """Convert MongoDB document to Account entity."""
        return Account(
            id=doc[AccountFields.ID],
            name=doc[AccountFields.NAME],
            email=doc[AccountFields.EMAIL],
            password=doc[AccountFields.PASSWORD],
        )
    
    def _to_document(self, account: Account) -> dict:
        """Convert Account entity to MongoDB document."""
        return {
            AccountFields.ID: account.id,
            AccountFields.NAME: account.name,
            AccountFields.EMAIL: account.email,
            AccountFields.PASSWORD: account.password,
            AccountFields.CREATED_AT: now(),
        }
    
    def add(self, account: Account) -> Account:
        """Store a new account. Raises ValueError if the email is taken."""
        try:
            self._collection.insert_one(self._to_document(account))
        except DuplicateKeyError as e:
            raise ValueError(f"Email '{account.email}' is already registered") from e
        return account
    
    def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        doc = self._collection.find_one({AccountFields.EMAIL: email})
        if not doc:
            return None
        return self._to_entity(doc)
