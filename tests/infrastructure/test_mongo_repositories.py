"""
Unit tests for the MongoDB repositories with a mocked pymongo collection.
"""
from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from movielist.infrastructure.db.mongo_account_repository import MongoAccountRepository
from movielist.infrastructure.db.mongo_movie_repository import MongoMovieRepository
from tests.stubs import make_account, make_movie


@pytest.fixture
def mongo_client():
    return MagicMock()


@pytest.fixture
def collection(mongo_client):
    return mongo_client.get_collection.return_value


def test_account_repository_uses_named_collection(mongo_client):
    MongoAccountRepository(mongo_client, "accounts")
    
    mongo_client.get_collection.assert_called_once_with("accounts")


def test_account_repository_enforces_unique_email(mongo_client, collection):
    MongoAccountRepository(mongo_client, "accounts")
    
    collection.create_index.assert_called_once_with("email", unique=True)


def test_account_add_duplicate_email_raises_value_error(mongo_client, collection):
    collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
    sut = MongoAccountRepository(mongo_client, "accounts")
    
    with pytest.raises(ValueError, match="already registered"):
        sut.add(make_account())


def test_account_add_inserts_document(mongo_client, collection):
    sut = MongoAccountRepository(mongo_client, "accounts")
    account = make_account()
    
    result = sut.add(account)
    
    assert result is account
    doc = collection.insert_one.call_args.args[0]
    assert doc["id"] == "valid_id"
    assert doc["email"] == "valid_email@gmail.com"
    assert doc["password"] == "hashed_password"
    assert "created_at" in doc


def test_account_find_by_email(mongo_client, collection):
    collection.find_one.return_value = {
        "_id": "mongo-id",
        "id": "valid_id",
        "name": "valid_name",
        "email": "valid_email@gmail.com",
        "password": "hashed_password",
    }
    sut = MongoAccountRepository(mongo_client, "accounts")
    
    account = sut.find_by_email("valid_email@gmail.com")
    
    collection.find_one.assert_called_once_with({"email": "valid_email@gmail.com"})
    assert account == make_account()


def test_account_find_by_email_missing(mongo_client, collection):
    collection.find_one.return_value = None
    sut = MongoAccountRepository(mongo_client, "accounts")
    
    assert sut.find_by_email("nobody@gmail.com") is None


def test_movie_add_upserts_by_id_and_owner(mongo_client, collection):
    sut = MongoMovieRepository(mongo_client, "movies")
    movie = make_movie()
    
    assert sut.add(movie) is movie
    
    args, kwargs = collection.replace_one.call_args
    assert args[0] == {"id": 123, "user_id": "user-1234"}
    assert args[1]["title"] == "Mock Movie"
    assert "added_at" in args[1]
    assert kwargs == {"upsert": True}


def test_movie_without_owner_is_keyed_under_none(mongo_client, collection):
    sut = MongoMovieRepository(mongo_client, "movies")
    
    sut.add(make_movie(user_id=None))
    
    assert collection.replace_one.call_args.args[0] == {"id": 123, "user_id": None}
