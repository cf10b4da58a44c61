from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import parse_payload
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from ..institutions.model import Institution
from ..institutions.repository import InstitutionRepository
from ..users.model import User
from ..users.repository import UserRepository
from .schemas import LoginPayload, RegisterPayload
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """What register/login hand back to the client."""

    user: User
    token: str


class AuthService:
    """Use cases: register, login, who-am-i."""

    def __init__(self, users: UserRepository, institutions: InstitutionRepository, tokens: TokenService):
        self._users = users
        self._institutions = institutions
        self._tokens = tokens

    def register(self, payload: Any) -> AuthResult:
        body = parse_payload(RegisterPayload, payload)
        username = body.username
        email = body.email.lower()
        password = body.password
        role = body.role or Role.ADMIN.value

        if "@" not in email:
            raise ValidationError("email is invalid", {"email": "invalid email address"})

        if self._users.get_by_email(email):
            raise ConflictError("User already exists with this email", {"email": "already registered"})
        if self._users.get_by_username(username):
            raise ConflictError("Username is already taken", {"username": "already taken"})

        user_id = self._users.create_user(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
        )
        user = self._users.get_by_id(user_id)
        if user is None:
            raise RuntimeError(f"user {user_id} vanished after insert")

        logger.info("registered user %s <%s> role=%s", user.id, email, role)
        return AuthResult(user=user, token=self._tokens.issue(user))

    def login(self, payload: Any) -> AuthResult:
        body = parse_payload(LoginPayload, payload)
        email = body.email.strip().lower()
        password = body.password

        user = self._users.get_by_email(email) if email else None
        if not user or not user.is_active:
            logger.info("failed login for %s", email or "<empty>")
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # Unknown hash method, e.g. a placeholder written by hand.
            ok = False

        if not ok:
            logger.info("failed login for %s", email)
            raise AuthenticationError("Invalid credentials")

        return AuthResult(user=user, token=self._tokens.issue(user))

    def resolve_token(self, token: str) -> Optional[User]:
        """Live user behind a token; ``None`` when the row no longer exists."""

        claims = self._tokens.decode(token)
        return self._users.get_by_id(int(claims["userId"]))

    def me(self, user: User) -> tuple[User, Optional[Institution]]:
        institution = None
        if user.institution_id:
            institution = self._institutions.get_by_id(int(user.institution_id))
        return user, institution
