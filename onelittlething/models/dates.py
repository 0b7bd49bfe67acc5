# onelittlething/models/dates.py
from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class AgeRequest(BaseModel):
    birthdate: Optional[str] = None


class AgeResponse(BaseModel):
    age: Optional[str] = None


class PregnancyRequest(BaseModel):
    due_date: str


class PregnancyResponse(BaseModel):
    week: int = Field(..., ge=1, le=40)
    days_until_due: int
    weeks_until_due: int
    pct_complete: float = Field(..., ge=0, le=100)
    status: str  # pre | normal | term | post


class DueDateValidationResponse(BaseModel):
    date: str
    valid: bool


class CountdownRequest(BaseModel):
    due_date: str
    baby_name: str = "Baby"
    item_index: int = 0  # para ir ciclando las comparaciones de tamaño


class ChildRow(BaseModel):
    id: Optional[str] = None
    name: str
    birthdate: Optional[str] = None
    gender: Optional[str] = None


class ChildrenSummaryRequest(BaseModel):
    children: List[ChildRow]


class ChildrenSummaryResponse(BaseModel):
    children: List[Dict]
    context: str
