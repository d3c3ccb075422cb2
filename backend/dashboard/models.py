"""
Dashboard data model.

RawInputBundle holds the five pasted text fields. DashboardSnapshot is the
aggregate rendered by the dashboard: inputs, signals, recommendations and
the derived summary cards. Snapshots are rebuilt on every analysis run and
never patched in place.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from insights.signals import SearchSignals, UpdateSignals, SummarySignals


INPUT_FIELDS = (
    "search_links",
    "daily_updates",
    "transcript",
    "retro_notes",
    "sheet_summary",
)


@dataclass(frozen=True)
class RawInputBundle:
    """
    The five independently editable input fields.

    Attributes:
        search_links: URL-encoded search links, one per line
        daily_updates: Free-text end-of-day sourcing updates
        transcript: Hiring manager meeting notes
        retro_notes: Retrospective notes (displayed, not analyzed)
        sheet_summary: Pasted spreadsheet summary with approval figures
    """
    search_links: str = ""
    daily_updates: str = ""
    transcript: str = ""
    retro_notes: str = ""
    sheet_summary: str = ""


@dataclass(frozen=True)
class ApprovalSummary:
    """Approval card."""
    rate: int
    status: str  # critical, healthy
    headline: str
    main_blocker: str
    variant: str  # low, mid, high
    approved: int = 0
    rejected: int = 0


@dataclass(frozen=True)
class DriftSummary:
    """Seniority drift card."""
    detected: bool
    severity: str  # low, medium
    direction: str
    evidence: str


@dataclass(frozen=True)
class CoverageSummary:
    """Sourcing method coverage card."""
    score: int  # 0-100
    missing_methods: List[str] = field(default_factory=list)
    overused_method: str = "None"


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard renders for one analysis run."""
    inputs: RawInputBundle
    search: SearchSignals
    update: UpdateSignals
    summary: SummarySignals
    recommendations: List[str]
    approval: ApprovalSummary
    drift: DriftSummary
    coverage: CoverageSummary
    notice: Optional[str] = None  # user-visible parse failure message

    @property
    def approval_status(self) -> str:
        return self.approval.status

    @property
    def drift_detected(self) -> bool:
        return self.drift.detected
