"""Users: creation gates, partial updates and the delete cascade."""

import asyncpg
import bcrypt
import pytest

from completed_articles import repository as completed_repository
from core.errors import ConflictError, MutationFailedError, NotFoundError
from core.results import MutationResult
from users import security, service
from users.schemas import UserCreate, UserUpdate


def _seed_dependents(store, user_id, article_id, package_id):
    store.add("bookmarks", id_user=user_id, id_article=article_id)
    store.add("completed_articles", id_user=user_id, id_article=article_id, rating=4)
    store.add("followed_packages", id_user=user_id, id_package=package_id)
    store.add("comments", id_user=user_id, id_article=article_id, text="hi", post_date=None)


async def test_delete_user_removes_every_dependent(store, user_row, article_row, package_row):
    _seed_dependents(store, user_row["id"], article_row["id"], package_row["id"])
    other = store.add("users", email="bob@example.com", first_name="Bob", last_name="B", password_hash="x")
    store.add("bookmarks", id_user=other["id"], id_article=article_row["id"])

    deleted = await service.delete_user(user_row["id"])

    assert deleted["id"] == user_row["id"]
    assert store.rows("users", id=user_row["id"]) == []
    for table in ("bookmarks", "completed_articles", "followed_packages", "comments"):
        assert store.rows(table, id_user=user_row["id"]) == []
    assert len(store.rows("bookmarks", id_user=other["id"])) == 1
    assert [w for w in store.writes if w[0] == "delete"] == [
        ("delete", "bookmarks"),
        ("delete", "completed_articles"),
        ("delete", "followed_packages"),
        ("delete", "comments"),
        ("delete", "users"),
    ]


async def test_failure_at_completed_step_stops_cascade(store, monkeypatch, user_row, article_row, package_row):
    _seed_dependents(store, user_row["id"], article_row["id"], package_row["id"])

    async def failing(user_id):
        return MutationResult(rows_affected=-1)

    monkeypatch.setattr(completed_repository, "delete_all_by_user", failing)

    with pytest.raises(MutationFailedError):
        await service.delete_user(user_row["id"])

    # No rollback in the in-memory store: this shows the order steps ran in.
    assert store.rows("bookmarks", id_user=user_row["id"]) == []
    assert len(store.rows("followed_packages", id_user=user_row["id"])) == 1
    assert len(store.rows("users", id=user_row["id"])) == 1


async def test_storage_fault_at_completed_step_stops_cascade(store, monkeypatch, user_row, article_row, package_row):
    _seed_dependents(store, user_row["id"], article_row["id"], package_row["id"])

    async def broken(user_id):
        raise asyncpg.exceptions.DeadlockDetectedError("deadlock detected")

    monkeypatch.setattr(completed_repository, "delete_all_by_user", broken)

    with pytest.raises(asyncpg.PostgresError):
        await service.delete_user(user_row["id"])

    assert len(store.rows("users", id=user_row["id"])) == 1
    assert len(store.rows("followed_packages", id_user=user_row["id"])) == 1


async def test_delete_twice_reports_not_found(store, user_row):
    await service.delete_user(user_row["id"])
    with pytest.raises(NotFoundError):
        await service.delete_user(user_row["id"])


async def test_delete_missing_user_never_writes(store):
    with pytest.raises(NotFoundError):
        await service.delete_user(404)
    assert store.writes == []


async def test_create_user_hashes_password_and_echoes_without_it(store):
    payload = UserCreate(
        firstName="Grace",
        lastName="Hopper",
        email="Grace@Example.com",
        password="cobol-rules",
    )

    created = await service.create_user(payload)

    assert "password" not in created
    assert created["email"] == "grace@example.com"
    stored = store.first("users", id=created["id"])
    assert stored["password_hash"] != "cobol-rules"
    assert bcrypt.checkpw(b"cobol-rules", stored["password_hash"].encode())


async def test_create_user_with_taken_email_conflicts(store, user_row):
    payload = UserCreate(firstName="A", lastName="B", email="ADA@example.com", password="secret1")

    with pytest.raises(ConflictError):
        await service.create_user(payload)
    assert store.writes == []


async def test_update_user_only_touches_supplied_fields(store, user_row):
    updated = await service.update_user(user_row["id"], UserUpdate(lastName="King", phoneNumber=""))

    assert updated["last_name"] == "King"
    assert updated["phone_number"] == ""
    assert updated["first_name"] == "Ada"
    assert updated["email"] == "ada@example.com"


async def test_update_user_email_must_be_free(store, user_row):
    store.add("users", email="taken@example.com", first_name="T", last_name="T", password_hash="x")

    with pytest.raises(ConflictError):
        await service.update_user(user_row["id"], UserUpdate(email="taken@example.com"))

    # Re-sending your own address is fine.
    same = await service.update_user(user_row["id"], UserUpdate(email="ada@example.com"))
    assert same["email"] == "ada@example.com"


async def test_update_user_rehashes_password(store, user_row):
    await service.update_user(user_row["id"], UserUpdate(password="brand-new"))

    stored = store.first("users", id=user_row["id"])
    assert "password" not in stored
    assert bcrypt.checkpw(b"brand-new", stored["password_hash"].encode())


async def test_update_missing_user_never_writes(store):
    with pytest.raises(NotFoundError):
        await service.update_user(77, UserUpdate(firstName="Nobody"))
    assert store.writes == []


def test_update_rejects_null_for_required_column():
    with pytest.raises(ValueError):
        UserUpdate(firstName=None)


def test_hash_password_refuses_input_bcrypt_cannot_hash():
    with pytest.raises(security.PasswordError):
        security.hash_password("é" * 50)


def test_multibyte_password_over_bcrypt_limit_is_rejected():
    # 36 two-byte characters is exactly 72 bytes.
    UserUpdate(password="é" * 36)
    with pytest.raises(ValueError):
        UserUpdate(password="é" * 37)
