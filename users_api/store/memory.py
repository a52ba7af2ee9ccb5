from __future__ import annotations

import logging
from threading import Lock

from users_api.models.schemas import User, UserPayload


logger = logging.getLogger(__name__)


class UserStore:
    """Thread-safe, process-local User records (resets on restart).

    The record map and the id counter live behind a single lock so that
    assigning an id and publishing the record happen as one step. Ids start
    at 1 and are never handed out twice, even after a delete.

    Not-found is reported by returning ``None``/``False``, never by raising.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: dict[int, User] = {}
        self._next_id = 1

    def list_users(self) -> list[User]:
        with self._lock:
            return [self._users[user_id] for user_id in sorted(self._users)]

    def get(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def add(self, candidate: UserPayload | User) -> User:
        with self._lock:
            user = User(id=self._next_id, name=candidate.name)
            self._next_id += 1
            self._users[user.id] = user

        logger.info("user.created", extra={"user_id": user.id})
        return user

    def update(self, user_id: int, candidate: UserPayload | User) -> User | None:
        with self._lock:
            if user_id not in self._users:
                return None
            user = User(id=user_id, name=candidate.name)
            self._users[user_id] = user

        logger.info("user.updated", extra={"user_id": user_id})
        return user

    def delete(self, user_id: int) -> bool:
        with self._lock:
            removed = self._users.pop(user_id, None) is not None

        if removed:
            logger.info("user.deleted", extra={"user_id": user_id})
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def reset(self) -> None:
        with self._lock:
            self._users = {}
            self._next_id = 1


_STORE: UserStore | None = None
_STORE_LOCK = Lock()


def get_user_store() -> UserStore:
    """Process-wide store; also used as the FastAPI dependency."""

    global _STORE
    if _STORE is None:
        with _STORE_LOCK:
            if _STORE is None:
                _STORE = UserStore()
    return _STORE


def reset_user_store() -> None:
    """Drop all records and restart ids at 1 (used by tests)."""

    get_user_store().reset()
