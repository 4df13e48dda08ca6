from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.protocols.email_validator import EmailValidator
from ...domain.protocols.encrypter import Encrypter
from ...domain.repositories.account_repository import AccountRepository
from ...domain.usecases.add_account import AddAccount
from ...application.use_cases.account.add_account import DbAddAccount
from ...infrastructure.cryptography.bcrypt_adapter import BcryptAdapter
from ...infrastructure.validation.email_validator_adapter import EmailValidatorAdapter
from ...presentation.controllers.sign_up_controller import SignUpController

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AccountProvider:
    """Account provider - registers sign-up collaborators and controller"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register sign-up dependencies.
        Use case is created with repository from container.
        """
        container.register_singleton(
            Encrypter,
            BcryptAdapter(salt_rounds=get_settings().bcrypt_salt_rounds)
        )
        container.register_singleton(EmailValidator, EmailValidatorAdapter())
        container.register_singleton(
            AddAccount,
            DbAddAccount(account_repository=container.get(AccountRepository))
        )
        container.register_singleton(
            SignUpController,
            SignUpController(
                add_account=container.get(AddAccount),
                email_validator=container.get(EmailValidator),
                encrypter=container.get(Encrypter),
            )
        )
