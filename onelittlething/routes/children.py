# onelittlething/routes/children.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from ..auth import get_current_user
from ..models.dates import ChildrenSummaryRequest, ChildrenSummaryResponse
from ..services.child_service import ChildService
from ..utils.cdc_guidelines import (
    calculate_age_in_months,
    get_age_guidelines,
    get_field_guideline,
    get_parenting_tips,
)
from ..utils.date_utils import DateParseError
from .dates import PREGNANCY_TIMEZONE

router = APIRouter()


@router.post("/api/children/summary", response_model=ChildrenSummaryResponse)
async def children_summary(payload: ChildrenSummaryRequest, user=Depends(get_current_user)):
    children = [child.model_dump() for child in payload.children]

    try:
        summaries = [ChildService.build_child_summary(child) for child in children]
    except DateParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    context = ChildService.format_children_for_context(children, tz=PREGNANCY_TIMEZONE)
    print(f"📋 [CHILDREN] Resumen generado para {len(summaries)} hijo(s)")

    return ChildrenSummaryResponse(children=summaries, context=context)


@router.get("/api/guidelines")
async def guidelines(
    age_in_months: Optional[int] = Query(None, ge=0),
    birthdate: Optional[str] = None,
    field: Optional[str] = None,
    parenting_style: Optional[List[str]] = Query(None),
    user=Depends(get_current_user),
):
    """
    Pautas CDC/AAP para la edad. Se puede pasar la edad en meses
    o la fecha de nacimiento; si viene `field`, se agrega la pauta
    y el consejo de crianza de ese campo.
    """
    if age_in_months is None:
        if not birthdate:
            raise HTTPException(status_code=400, detail="age_in_months or birthdate required")
        try:
            age_in_months = calculate_age_in_months(birthdate)
        except DateParseError as e:
            raise HTTPException(status_code=400, detail=str(e))

    response = {
        "age_in_months": age_in_months,
        "guidelines": get_age_guidelines(age_in_months)._asdict(),
    }

    if field:
        response["field"] = field
        response["field_guideline"] = get_field_guideline(field, age_in_months)
        response["parenting_tip"] = get_parenting_tips(field, parenting_style)

    return response
