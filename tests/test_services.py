"""Service layer tests."""

import pytest

from src.models.user import User
from src.services.auth import AuthService
from src.services.errors import (
    DeleteFailedError,
    DuplicateEmailError,
    ErrorKind,
    InvalidCredentialsError,
    NotFoundError,
    UpdateFailedError,
)
from src.services.users import UserService


@pytest.fixture
def auth_service(db):
    return AuthService(db)


@pytest.fixture
def user_service(db):
    return UserService(db)


@pytest.fixture
def jane(auth_service):
    return auth_service.sign_up(email="jane@example.com", password="secret123", name="Jane")


def test_sign_up_returns_view_without_password(jane):
    """Test the returned view never exposes the password."""
    fields = jane.model_dump()
    assert "password" not in fields
    assert "password_hash" not in fields
    assert jane.role == "user"
    assert jane.name == "Jane"


def test_sign_up_stores_hash(db, jane):
    """Test the stored password is a hash, not the plaintext."""
    stored = db.query(User).filter(User.id == jane.id).one()
    assert stored.password_hash != "secret123"
    assert stored.password_hash.startswith("$2")


def test_sign_up_duplicate_email(db, auth_service, jane):
    """Test a reused email is rejected and nothing is inserted."""
    with pytest.raises(DuplicateEmailError) as exc_info:
        auth_service.sign_up(email="jane@example.com", password="other123", name="Other")

    assert exc_info.value.kind == ErrorKind.DUPLICATE_EMAIL
    assert db.query(User).count() == 1


def test_sign_in(auth_service, jane):
    """Test signing in with correct credentials returns the stored view."""
    user = auth_service.sign_in(email="jane@example.com", password="secret123")
    assert user.id == jane.id
    assert user.email == jane.email
    assert user.name == jane.name


def test_sign_in_failures_are_indistinguishable(auth_service, jane):
    """Test wrong password and unknown email raise the same error."""
    with pytest.raises(InvalidCredentialsError) as wrong_password:
        auth_service.sign_in(email="jane@example.com", password="wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        auth_service.sign_in(email="nobody@example.com", password="secret123")

    assert wrong_password.value.message == unknown_email.value.message


def test_list_users_in_id_order(auth_service, user_service):
    """Test listing returns every user ordered by id."""
    first = auth_service.sign_up(email="a@example.com", password="secret123")
    second = auth_service.sign_up(email="b@example.com", password="secret123", role="admin")

    users = user_service.list_users()
    assert [user.id for user in users] == [first.id, second.id]
    assert users[1].role == "admin"


def test_get_user_not_found(user_service):
    """Test a missing user raises a typed error."""
    with pytest.raises(NotFoundError) as exc_info:
        user_service.get_user(999)

    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert exc_info.value.message == "User with ID 999 not found"


def test_update_merges_supplied_fields(user_service, jane):
    """Test only supplied fields change."""
    updated = user_service.update_user(jane.id, {"name": "Janet"})
    assert updated.name == "Janet"
    assert updated.email == jane.email
    assert updated.role == jane.role


def test_update_missing_user(user_service):
    """Test updating a missing user raises NotFoundError."""
    with pytest.raises(NotFoundError):
        user_service.update_user(999, {"name": "Ghost"})


def test_update_reports_lost_race(monkeypatch, user_service):
    """Test a row deleted after the existence check is an update failure."""
    monkeypatch.setattr(user_service, "get_user", lambda user_id: None)

    with pytest.raises(UpdateFailedError) as exc_info:
        user_service.update_user(999, {"name": "Ghost"})

    assert exc_info.value.kind == ErrorKind.UPDATE_FAILED


def test_delete_user(db, user_service, jane):
    """Test deleting removes the row and returns its id."""
    assert user_service.delete_user(jane.id) == jane.id
    assert db.query(User).count() == 0


def test_delete_missing_user_twice(user_service):
    """Test deleting a missing id never succeeds."""
    for _ in range(2):
        with pytest.raises(NotFoundError):
            user_service.delete_user(999)


def test_delete_reports_lost_race(monkeypatch, user_service):
    """Test a row deleted after the existence check is a delete failure."""
    monkeypatch.setattr(user_service, "get_user", lambda user_id: None)

    with pytest.raises(DeleteFailedError):
        user_service.delete_user(999)
