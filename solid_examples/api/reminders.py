"""Password reminder endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from solid_examples.application.password_reminder import PasswordReminder
from solid_examples.container import get_password_reminder
from solid_examples.core import config
from solid_examples.domain.common.errors import InvalidStateError

router = APIRouter(prefix="/reminders", tags=["reminders"])


class ReminderBody(BaseModel):
    email: str


@router.post("/")
def send_reminder(
    body: ReminderBody,
    reminder: PasswordReminder = Depends(get_password_reminder),
):
    try:
        sent = reminder.send_reminder(body.email)
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return {"email": body.email, "sent": sent, "driver": config.DB_DRIVER}
