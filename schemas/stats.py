from datetime import datetime
from typing import List

from schemas.base import CamelModel


class _LedgerEntry(CamelModel):
    id: int
    team_id: int
    team_name: str
    question_id: int
    question_text: str
    user_name: str


class UsageEntry(_LedgerEntry):
    used_at: datetime | None = None


class SkipEntry(_LedgerEntry):
    skipped_at: datetime | None = None


class UsageSummary(CamelModel):
    total_used: int
    total_skipped: int
    total_questions: int
    total_teams: int


class UsageStatsOut(CamelModel):
    usage: List[UsageEntry]
    skipped: List[SkipEntry]
    summary: UsageSummary


class ResetResult(CamelModel):
    ok: bool
    message: str
    removed_used: int
    removed_skipped: int
