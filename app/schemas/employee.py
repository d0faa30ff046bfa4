# app/schemas/employee.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    department: Optional[str] = None

class EmployeeOut(BaseModel):
    id: str
    name: str
    email: str
    department: Optional[str] = None
    added_date: Optional[datetime] = Field(default=None, alias="addedDate")

    class Config:
        from_attributes = True
        populate_by_name = True

class EmployeeCreated(BaseModel):
    message: str
    employee: EmployeeOut
    warning: Optional[str] = None
