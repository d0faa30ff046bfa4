# app/models/employee.py
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeModel(BaseModel):
    name: str
    email: str
    department: Optional[str] = None
    added_date: datetime = Field(default_factory=utcnow, alias="addedDate")

    class Config:
        populate_by_name = True
