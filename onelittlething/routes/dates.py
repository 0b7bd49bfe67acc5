# onelittlething/routes/dates.py
import os
from fastapi import APIRouter, Depends, HTTPException, Query
from ..auth import get_current_user
from ..models.dates import (
    AgeRequest,
    AgeResponse,
    CountdownRequest,
    DueDateValidationResponse,
    PregnancyRequest,
    PregnancyResponse,
)
from ..services.countdown_service import CountdownService
from ..utils.age import format_age
from ..utils.date_utils import DateParseError
from ..utils.pregnancy import REFERENCE_TIMEZONE, calculate_pregnancy, is_valid_due_date

router = APIRouter(prefix="/api/dates")

PREGNANCY_TIMEZONE = os.getenv("PREGNANCY_TIMEZONE", REFERENCE_TIMEZONE)


@router.post("/age", response_model=AgeResponse)
async def age(payload: AgeRequest, user=Depends(get_current_user)):
    try:
        age_text = format_age(payload.birthdate)
    except DateParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    print(f"👶 [AGE] {payload.birthdate} → {age_text}")
    return AgeResponse(age=age_text)


@router.post("/pregnancy", response_model=PregnancyResponse)
async def pregnancy(payload: PregnancyRequest, user=Depends(get_current_user)):
    try:
        meta = calculate_pregnancy(payload.due_date, tz=PREGNANCY_TIMEZONE)
    except DateParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    print(f"🤰 [PREGNANCY] Due {payload.due_date}: semana {meta.week}, estado {meta.status.value}")
    return PregnancyResponse(**meta.as_dict())


@router.get("/due-date/validate", response_model=DueDateValidationResponse)
async def validate_due_date(date: str = Query(...), user=Depends(get_current_user)):
    valid = is_valid_due_date(date, tz=PREGNANCY_TIMEZONE)
    if not valid:
        print(f"⚠️ [PREGNANCY] Fecha probable fuera de rango o inválida: {date}")
    return DueDateValidationResponse(date=date, valid=valid)


@router.post("/countdown")
async def countdown(payload: CountdownRequest, user=Depends(get_current_user)):
    try:
        return CountdownService.build_countdown(
            payload.due_date,
            payload.baby_name,
            tz=PREGNANCY_TIMEZONE,
            item_index=payload.item_index,
        )
    except DateParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
