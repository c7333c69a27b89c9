from typing import Annotated

from fastapi import Depends, Request

from core.config import Settings
from database.store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


StoreDep = Annotated[RecordStore, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
