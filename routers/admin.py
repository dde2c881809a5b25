from __future__ import annotations

from fastapi import APIRouter, Depends

import ledger
from db import SessionLocal
from deps.auth import require_admin
from schemas.stats import ResetResult, UsageStatsOut

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/usage-stats", response_model=UsageStatsOut)
def usage_stats():
    with SessionLocal() as db:
        return UsageStatsOut.model_validate(ledger.usage_stats(db))


@router.post("/teams/{team_id}/reset", response_model=ResetResult)
def reset_team(team_id: int):
    with SessionLocal() as db:
        used, skipped = ledger.reset_team(db, team_id)
    return ResetResult(
        ok=True,
        message="Team questions reset successfully",
        removed_used=used,
        removed_skipped=skipped,
    )
