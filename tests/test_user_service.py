# File: tests/test_user_service.py

import pytest

from app.core.exceptions import DuplicateEmailError, UserNotFoundError
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService


@pytest.fixture
def repository(db_session):
    return UserRepository(db_session)


@pytest.fixture
def service(repository):
    return UserService(repository)


def test_create_then_get_round_trip(service):
    created = service.create_user("a@x.com", "A")

    fetched = service.get_user_by_id(created.id)
    assert fetched.email == "a@x.com"
    assert fetched.name == "A"
    assert fetched.created_at == created.created_at
    assert fetched.updated_at == fetched.created_at


def test_second_create_with_same_email_fails(service, repository):
    service.create_user("a@x.com", "A")

    with pytest.raises(DuplicateEmailError):
        service.create_user("a@x.com", "B")

    assert len(repository.get_all()) == 1


def test_get_all_users_returns_views(service):
    service.create_user("a@x.com", "A")
    service.create_user("b@x.com", "B")

    users = service.get_all_users()
    assert [u.email for u in users] == ["a@x.com", "b@x.com"]
    assert all(u.id is not None for u in users)


def test_update_refreshes_updated_at_only(service):
    created = service.create_user("a@x.com", "A")

    updated = service.update_user(created.id, "b@x.com", "A2")
    assert updated.email == "b@x.com"
    assert updated.name == "A2"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at

    again = service.update_user(created.id, "b@x.com", "A3")
    assert again.updated_at > updated.updated_at


def test_update_to_own_email_is_not_a_conflict(service):
    created = service.create_user("a@x.com", "A")

    updated = service.update_user(created.id, "a@x.com", "A2")
    assert updated.email == "a@x.com"
    assert updated.name == "A2"


def test_update_to_other_users_email_fails(service):
    service.create_user("a@x.com", "A")
    other = service.create_user("b@x.com", "B")

    with pytest.raises(DuplicateEmailError):
        service.update_user(other.id, "a@x.com", "B")

    assert service.get_user_by_id(other.id).email == "b@x.com"


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_unknown_id_raises_not_found(service, operation):
    with pytest.raises(UserNotFoundError) as excinfo:
        if operation == "get":
            service.get_user_by_id(7)
        elif operation == "update":
            service.update_user(7, "a@x.com", "A")
        else:
            service.delete_user(7)
    assert excinfo.value.user_id == 7


def test_deleted_user_is_gone(service):
    created = service.create_user("a@x.com", "A")
    service.create_user("b@x.com", "B")

    service.delete_user(created.id)

    with pytest.raises(UserNotFoundError):
        service.get_user_by_id(created.id)
    with pytest.raises(UserNotFoundError):
        service.update_user(created.id, "c@x.com", "C")
    with pytest.raises(UserNotFoundError):
        service.delete_user(created.id)
    assert created.id not in [u.id for u in service.get_all_users()]


# -----------------------------
# Storage gateway
# -----------------------------

def test_unique_constraint_backs_the_exists_check(repository):
    # Skips the service check to simulate a racing writer
    repository.insert("a@x.com", "A")

    with pytest.raises(DuplicateEmailError):
        repository.insert("a@x.com", "B")

    # Session is usable again after the rollback
    assert repository.exists_by_email("a@x.com")
    assert len(repository.get_all()) == 1


def test_unique_constraint_on_persist_mutation(repository):
    repository.insert("a@x.com", "A")
    other = repository.insert("b@x.com", "B")

    other.email = "a@x.com"
    with pytest.raises(DuplicateEmailError):
        repository.persist_mutation(other)

    assert repository.get_by_id(other.id).email == "b@x.com"


def test_exists_helpers(repository):
    user = repository.insert("a@x.com", "A")

    assert repository.exists_by_id(user.id)
    assert repository.exists_by_email("a@x.com")
    assert not repository.exists_by_id(user.id + 1)
    assert not repository.exists_by_email("b@x.com")

    repository.delete_by_id(user.id)
    assert not repository.exists_by_id(user.id)
    assert repository.get_by_id(user.id) is None
