# app/schemas/company_list.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class CompanyListEntryOut(BaseModel):
    id: str
    name: str
    added_at: Optional[datetime] = Field(default=None, alias="addedAt")

    class Config:
        from_attributes = True
        populate_by_name = True
