"""
Sign-Up Controller
==================

Validates sign-up fields, hashes the password and creates the account.
"""
import logging

from movielist.domain.models.account import AddAccountModel
from movielist.domain.protocols.email_validator import EmailValidator
from movielist.domain.protocols.encrypter import Encrypter
from movielist.domain.usecases.add_account import AddAccount
from movielist.presentation.errors import InvalidParamError, MissingParamError
from movielist.presentation.helpers.http_helper import bad_request, created, server_error
from movielist.presentation.protocols.controller import Controller
from movielist.presentation.protocols.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class SignUpController(Controller):
    """
    Controller for account sign-up.
    
    Flow: required fields -> email shape -> hash password -> add account.
    """
    
    REQUIRED_FIELDS = ("name", "email", "password")
    
    def __init__(
        self,
        add_account: AddAccount,
        email_validator: EmailValidator,
        encrypter: Encrypter,
    ):
        """
        Initialize controller with its collaborators.
        
        Args:
            add_account: Use case that stores the account
            email_validator: Syntactic email checker
            encrypter: Password hasher
        """
        self._add_account = add_account
        self._email_validator = email_validator
        self._encrypter = encrypter
    
    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body or {}
            
            # First missing field wins
            for field_name in self.REQUIRED_FIELDS:
                if not body.get(field_name):
                    return bad_request(MissingParamError(field_name))
            
            name = body["name"]
            email = body["email"]
            password = body["password"]
            
            if not self._email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))
            
            hashed_password = await self._encrypter.encrypt(password)
            
            account = await self._add_account.execute(
                AddAccountModel(name=name, email=email, password=hashed_password)
            )
            return created(account)
        except Exception as e:
            logger.exception("Sign-up failed: %s", e)
            return server_error(e)
