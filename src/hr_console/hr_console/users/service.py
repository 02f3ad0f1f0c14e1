from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import FieldErrors, require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)

# Highest privilege first; a user holding several roles acts as the first match.
ROLE_PRIORITY = (Role.ADMIN, Role.HR_MANAGER, Role.EMPLOYEE)
HR_STAFF_ROLES = frozenset({Role.ADMIN, Role.HR_MANAGER})

_BAD_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str
    full_name: str
    role: Role

    @property
    def is_hr_staff(self) -> bool:
        return self.role in HR_STAFF_ROLES


def effective_role(roles: Iterable[Role]) -> Role:
    held = set(roles)
    for role in ROLE_PRIORITY:
        if role in held:
            return role
    return Role.EMPLOYEE


class AuthService:
    """Use cases: sign in, sign up and role lookups."""

    def __init__(self, users: UserRepository):
        self._users = users

    def sign_in(self, email: str, password: str) -> SessionUser:
        errors = FieldErrors()
        email = errors.check("email", require_email, email)
        errors.check("password", require_min_length, password, "Password", MIN_PASSWORD_LENGTH)
        errors.raise_if_any()

        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            logger.info("Sign-in rejected for %s", email)
            raise AuthenticationError(_BAD_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' are not in werkzeug's format
            ok = False
        if not ok:
            logger.info("Sign-in rejected for %s", email)
            raise AuthenticationError(_BAD_CREDENTIALS)

        role = self.get_role(user.user_id)
        logger.info("User %s signed in as %s", user.user_id, role.value)
        return SessionUser(user_id=user.user_id, email=user.email, full_name=user.full_name, role=role)

    def sign_up(
        self,
        *,
        email: str,
        password: str,
        confirm_password: str,
        first_name: str,
        last_name: str,
    ) -> SessionUser:
        """Create an account with the default `employee` role and sign it in."""
        errors = FieldErrors()
        first_name = errors.check("first_name", require_non_empty, first_name, "First name")
        last_name = errors.check("last_name", require_non_empty, last_name, "Last name")
        email = errors.check("email", require_email, email)
        errors.check("password", require_min_length, password, "Password", MIN_PASSWORD_LENGTH)
        if "password" not in errors.errors and password != confirm_password:
            errors.add("confirm_password", "Passwords don't match")
        errors.raise_if_any()

        if self._users.get_by_email(email):
            raise ValidationError(
                "This email is already registered. Please sign in instead.",
                {"email": "This email is already registered"},
            )

        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            role=Role.EMPLOYEE,
        )
        logger.info("Registered user %s (%s)", user_id, email)
        full_name = f"{first_name} {last_name}"
        return SessionUser(user_id=user_id, email=email, full_name=full_name, role=Role.EMPLOYEE)

    def get_role(self, user_id: int) -> Role:
        return effective_role(self._users.list_roles(int(user_id)))

    def has_role(self, user_id: int, role: Role) -> bool:
        return role in set(self._users.list_roles(int(user_id)))

    def is_hr_staff(self, user_id: int) -> bool:
        return any(r in HR_STAFF_ROLES for r in self._users.list_roles(int(user_id)))
