from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmployeeCreate(BaseModel):
    id: int
    first_name: str
    last_name: str


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    full_name: str
