from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from users_api.models.schemas import User, UserPayload
from users_api.store.memory import UserStore, get_user_store

router = APIRouter(prefix="/users", tags=["users"])

NAME_REQUIRED = "Name is required."


def _require_name(payload: UserPayload | None) -> UserPayload:
    if payload is None or not payload.name:
        raise HTTPException(status_code=400, detail=NAME_REQUIRED)
    return payload


async def users_body_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Report an unreadable /users body as a missing name (400) instead of 422.

    Errors outside the body (e.g. a non-integer path id) keep FastAPI's default handling.
    """

    body_only = all(tuple(error.get("loc", ()))[:1] == ("body",) for error in exc.errors())
    if request.url.path.startswith(router.prefix) and body_only:
        return await http_exception_handler(request, HTTPException(status_code=400, detail=NAME_REQUIRED))
    return await request_validation_exception_handler(request, exc)


@router.get("", response_model=list[User])
def list_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.list_users()


@router.get("/{user_id}", response_model=User)
def get_user(user_id: int, store: UserStore = Depends(get_user_store)) -> User:
    user = store.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    response: Response,
    payload: UserPayload | None = Body(default=None),
    store: UserStore = Depends(get_user_store),
) -> User:
    created = store.add(_require_name(payload))
    response.headers["Location"] = f"/users/{created.id}"
    return created


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: int,
    payload: UserPayload | None = Body(default=None),
    store: UserStore = Depends(get_user_store),
) -> User:
    updated = store.update(user_id, _require_name(payload))
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    return updated


@router.delete("/{user_id}")
def delete_user(user_id: int, store: UserStore = Depends(get_user_store)) -> str:
    if not store.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return f"User {user_id} deleted"
