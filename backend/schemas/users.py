from pydantic import Field

from schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=128)


class User(CamelModel):
    id: str
    username: str
    password: str  # hash, never returned by the API


class UserResponse(CamelModel):
    id: str
    username: str
