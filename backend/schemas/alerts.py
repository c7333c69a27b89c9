from datetime import datetime

from pydantic import Field

from schemas.common import AlertSeverity, AlertType, CamelModel


class AlertCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    type: AlertType
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    severity: AlertSeverity = AlertSeverity.INFO
    is_read: bool = False


class Alert(AlertCreate):
    id: str
    timestamp: datetime
