"""
Authentication service implementation.

Registration, login, password reset and profile updates. Field checks run
in a fixed order and stop at the first failure, so clients always get the
message for the first missing field.
"""

import logging
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from modules.users.exceptions import UserNotFoundError
from modules.users.models import PublicUser, User
from modules.users.repository import UserRepository

from .exceptions import (
    AlreadyRegisteredError,
    EmailNotRegisteredError,
    FieldRequiredError,
    InvalidPasswordError,
    MissingCredentialsError,
    PasswordHashingError,
    PasswordTooShortError,
    WrongAnswerError,
)
from .interfaces import IAuthService, ICredentialHasher, ITokenService
from .models import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateProfileRequest,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# (attribute, label) in the order they are checked
REGISTER_FIELDS = [
    ("name", "Name"),
    ("email", "Email"),
    ("password", "Password"),
    ("phone", "Phone number"),
    ("address", "Address"),
    ("answer", "Answer"),
]

FORGOT_PASSWORD_FIELDS = [
    ("email", "Email"),
    ("answer", "Answer"),
    ("new_password", "New password"),
]


def is_blank(value: Optional[str]) -> bool:
    """True for None and for strings that are empty after trimming."""
    return value is None or not str(value).strip()


def require_fields(request: Any, fields: list[tuple[str, str]]) -> None:
    """
    Raise for the first missing or blank field.

    Raises:
        FieldRequiredError: Naming the field's label
    """
    for attr, label in fields:
        if is_blank(getattr(request, attr)):
            raise FieldRequiredError(label)


class AuthService(IAuthService):
    """
    Implementation of the account operations.

    Depends on the user repository for storage, the credential hasher for
    passwords and the token service for login tokens.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: ICredentialHasher,
        tokens: ITokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> dict[str, Any]:
        require_fields(request, REGISTER_FIELDS)

        if self._users.get_by_email(request.email):
            raise AlreadyRegisteredError(request.email)

        hashed = await self._hasher.hash(request.password)
        if hashed is None:
            raise PasswordHashingError()

        user = User(
            name=request.name,
            email=request.email,
            password=hashed,
            phone=request.phone,
            address=request.address,
            answer=request.answer,
        )
        try:
            created = self._users.create(user)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration
            raise AlreadyRegisteredError(request.email)

        logger.info("Registered user %s", created["_id"])
        return PublicUser.from_document(created)

    async def login(self, request: LoginRequest) -> LoginResult:
        if is_blank(request.email) or is_blank(request.password):
            raise MissingCredentialsError()

        user = self._users.get_by_email(request.email)
        if not user:
            raise EmailNotRegisteredError(request.email)

        if not await self._hasher.compare(request.password, user["password"]):
            raise InvalidPasswordError()

        token = self._tokens.issue(user["_id"], user.get("role"))
        return LoginResult(user=PublicUser.from_document(user), token=token)

    async def forgot_password(self, request: ForgotPasswordRequest) -> None:
        require_fields(request, FORGOT_PASSWORD_FIELDS)

        user = self._users.get_by_email_and_answer(request.email, request.answer)
        if not user:
            raise WrongAnswerError()

        hashed = await self._hasher.hash(request.new_password)
        if hashed is None:
            raise PasswordHashingError()

        self._users.update(user["_id"], {"password": hashed})
        logger.info("Password reset for user %s", user["_id"])

    async def update_profile(
        self, user_id: Optional[str], request: UpdateProfileRequest
    ) -> Optional[dict[str, Any]]:
        """
        Update name, phone, address and optionally password.

        Fields left out keep their stored values. The email address is
        never changed here.
        """
        if request.password and len(request.password.strip()) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()

        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        password = user.get("password")
        if request.password:
            password = await self._hasher.hash(request.password)
            if password is None:
                raise PasswordHashingError()

        updated = self._users.update(
            user_id,
            {
                "name": request.name or user.get("name"),
                "password": password,
                "phone": request.phone or user.get("phone"),
                "address": request.address or user.get("address"),
            },
        )
        return PublicUser.from_document(updated) if updated else None
