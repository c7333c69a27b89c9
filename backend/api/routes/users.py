from fastapi import APIRouter

from api.deps import StoreDep
from exceptions.errors import NotFoundError
from schemas.users import UserCreate, UserResponse
from services.query_service import get_user, get_user_by_username
from services.records_service import register_user

router = APIRouter()


@router.post("", response_model=UserResponse)
def create_user(payload: UserCreate, store: StoreDep):
    return UserResponse.model_validate(register_user(store, payload).model_dump())


@router.get("/by-username/{username}", response_model=UserResponse)
def user_by_username(username: str, store: StoreDep):
    user = get_user_by_username(store, username)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse.model_validate(user.model_dump())


@router.get("/{user_id}", response_model=UserResponse)
def user_by_id(user_id: str, store: StoreDep):
    user = get_user(store, user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse.model_validate(user.model_dump())
