"""Worker management endpoint."""
from __future__ import annotations
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from solid_examples.container import get_captain
from solid_examples.domain.workers.captain import Captain
from solid_examples.domain.workers.models import build_worker

router = APIRouter(prefix="/workers", tags=["workers"])


class ManageTeamBody(BaseModel):
    workers: List[str]
    action: Literal["manage", "work", "rest"] = "manage"


@router.post("/manage")
def manage_team(
    body: ManageTeamBody,
    captain: Captain = Depends(get_captain),
):
    try:
        team = [build_worker(kind) for kind in body.workers]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if body.action == "work":
        activity = captain.coordinate_work(team)
    elif body.action == "rest":
        activity = captain.rest_team(team)
    else:
        activity = captain.manage_team(team)
    return {"action": body.action, "activity": activity}
