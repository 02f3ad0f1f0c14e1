from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.hr_console.hr_console.container import ALL_TABLES, assemble_container
from src.hr_console.hr_console.core.enums import Role
from src.hr_console.hr_console.core.exceptions import StoreError
from src.hr_console.hr_console.main import create_app
from src.hr_console.hr_console.store.cache import QueryCache
from src.hr_console.hr_console.users.model import User


class InMemoryTableRepo:
    """TableRepository fake: rows live in a dict, ordering follows the TableSpec."""

    def __init__(self, spec):
        self.spec = spec
        self._rows: dict = {}
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, 9, 0, 0)
        self.list_calls = 0
        self.fail_reads = False

    def _sort_key(self, record):
        value = getattr(record, self.spec.order_by)
        return (value is not None, value if value is not None else 0, record.id)

    def list_all(self, filters=None):
        self.list_calls += 1
        if self.fail_reads:
            raise StoreError("Database is unavailable")
        rows = list(self._rows.values())
        for name, value in (filters or {}).items():
            rows = [r for r in rows if getattr(r, name) == value]
        return sorted(rows, key=self._sort_key, reverse=self.spec.descending)

    def get_by_id(self, record_id):
        if self.fail_reads:
            raise StoreError("Database is unavailable")
        return self._rows.get(int(record_id))

    def insert(self, values):
        rid = self._next_id
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        row = {"id": rid, "created_at": self._clock, "updated_at": self._clock, **self.spec.to_db(values)}
        self._rows[rid] = self.spec.to_model(row)
        return rid

    def update_by_id(self, record_id, values):
        current = self._rows.get(int(record_id))
        if current is None:
            return False
        self._rows[int(record_id)] = replace(current, **values)
        return True

    def delete_by_id(self, record_id):
        return self._rows.pop(int(record_id), None) is not None

    def count(self, filters=None):
        return len(self.list_all(filters))


class InMemoryUsers:
    def __init__(self):
        self._by_email: dict[str, User] = {}
        self._roles: dict[int, list[Role]] = {}
        self._next_id = 1

    def add(self, *, email: str, password: str, roles=(Role.EMPLOYEE,), first_name="Test", last_name="User", is_active=True) -> User:
        user = User(
            user_id=self._next_id,
            email=email,
            password_hash=generate_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            is_active=is_active,
        )
        self._next_id += 1
        self._by_email[email] = user
        self._roles[user.user_id] = list(roles)
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)

    def create_user(self, *, email, password_hash, first_name, last_name, role):
        user = User(
            user_id=self._next_id,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        self._next_id += 1
        self._by_email[email] = user
        self._roles[user.user_id] = [role]
        return user.user_id

    def list_roles(self, user_id: int):
        return list(self._roles.get(int(user_id), []))


@pytest.fixture
def repos():
    return {spec.name: InMemoryTableRepo(spec) for spec in ALL_TABLES}


@pytest.fixture
def users():
    return InMemoryUsers()


@pytest.fixture
def container(repos, users):
    return assemble_container(repositories=repos, users=users, cache=QueryCache())


@pytest.fixture
def app(container):
    app = create_app("config.testing", container=container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in_as(client, role: Role, *, user_id: int = 1, name: str = "Test User") -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = name
        sess["email"] = "test@example.com"
        sess["role"] = role.value


@pytest.fixture
def login(client):
    def _login(role: Role, **kwargs) -> None:
        sign_in_as(client, role, **kwargs)

    return _login
