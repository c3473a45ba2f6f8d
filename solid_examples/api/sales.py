"""Sales report endpoint. Access control happens here, not in the reporter."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from solid_examples.api.auth import get_current_user
from solid_examples.application.sales_app_service import SalesAppService
from solid_examples.container import get_sales_app_service

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("/report")
def sales_report(
    start: str = Query(..., description="ISO-8601 start of the range (inclusive)"),
    end: str = Query(..., description="ISO-8601 end of the range (inclusive)"),
    fmt: Optional[str] = Query(None, alias="format", description="html | json | csv"),
    svc: SalesAppService = Depends(get_sales_app_service),
    current_user: dict = Depends(get_current_user),
):
    result = svc.report_between(start, end, fmt or "")
    if not result.is_success:
        raise HTTPException(status_code=400, detail=result.error)
    return {"format": (fmt or svc.default_format).lower(), "report": result.value}
