# app/models/company_list.py
from datetime import datetime
from pydantic import BaseModel, Field

from app.models.employee import utcnow


class CompanyListEntryModel(BaseModel):
    """Denormalized projection of an employee: name and timestamp only."""
    name: str
    added_at: datetime = Field(default_factory=utcnow, alias="addedAt")

    class Config:
        populate_by_name = True
