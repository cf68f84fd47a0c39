"""Tests for user service."""

import pytest

from photosphere.adapters.memory_user_repository import InMemoryUserRepository
from photosphere.domain.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidInputError,
)
from photosphere.services.security import PasswordHasher
from photosphere.services.users import UserService


def test_register_stores_hashed_password() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = service.register("Alice", " A@X.com ", "pw", "creator")

    assert user.email == "a@x.com"
    assert user.role == "creator"
    assert user.password_hash != "pw"
    assert repository.users["a@x.com"] == user


def test_register_defaults_role_to_reader() -> None:
    service = UserService(InMemoryUserRepository())

    user = service.register("Bob", "b@x.com", "pw")

    assert user.role == "reader"


def test_register_rejects_duplicate_email() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("Alice", "a@x.com", "pw", "creator")

    with pytest.raises(DuplicateUserError):
        service.register("Other Alice", "A@x.com", "pw2", "reader")


@pytest.mark.parametrize(
    ("name", "email", "password"),
    [(None, "a@x.com", "pw"), ("Alice", "  ", "pw"), ("Alice", "a@x.com", "")],
)
def test_register_requires_fields(name, email, password) -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(InvalidInputError):
        service.register(name, email, password, "creator")


def test_verify_returns_user_for_valid_credentials() -> None:
    service = UserService(InMemoryUserRepository())
    registered = service.register("Alice", "a@x.com", "pw", "creator")

    assert service.verify("a@x.com", "pw") == registered


def test_verify_uses_same_error_for_unknown_email_and_wrong_password() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("Alice", "a@x.com", "pw", "creator")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        service.verify("a@x.com", "nope")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        service.verify("ghost@x.com", "pw")

    assert wrong_password.value.message == unknown_email.value.message


def test_repository_enforces_unique_email() -> None:
    repository = InMemoryUserRepository()
    repository.create_user("Alice", "a@x.com", "creator", "hash")

    with pytest.raises(DuplicateUserError):
        repository.create_user("Alice", "a@x.com", "creator", "hash")


class RecordingHasher(PasswordHasher):
    """Password hasher that records which stored hashes were checked."""

    def __init__(self) -> None:
        super().__init__()
        self.checked: list[str | None] = []

    def verify(self, password: str, password_hash: str | None) -> bool:
        self.checked.append(password_hash)
        return super().verify(password, password_hash)


def test_verify_unknown_email_still_runs_password_check() -> None:
    hasher = RecordingHasher()
    service = UserService(InMemoryUserRepository(), hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        service.verify("ghost@x.com", "pw")

    assert hasher.checked == [None]


def test_hasher_rejects_missing_hash_and_garbage_hash() -> None:
    hasher = PasswordHasher()

    assert hasher.verify("pw", None) is False
    assert hasher.verify("pw", "not-a-passlib-hash") is False
    assert hasher.verify("pw", hasher.hash("pw")) is True
