"""
Dashboard package for Sourcing Pulse.
Provides the analysis orchestrator, snapshot model, demo data and state transitions.
"""

from .analyzer import DashboardAnalyzer, normalize_text
from .models import (
    RawInputBundle,
    DashboardSnapshot,
    ApprovalSummary,
    DriftSummary,
    CoverageSummary
)
from .demo import DEMO_INPUTS, DEMO_SNAPSHOT
from .state import (
    DashboardState,
    InputEdited,
    SectionToggled,
    AnalyzeRequested,
    DemoLoaded,
    Cleared,
    initial_state,
    reduce
)

__all__ = [
    'DashboardAnalyzer',
    'normalize_text',
    'RawInputBundle',
    'DashboardSnapshot',
    'ApprovalSummary',
    'DriftSummary',
    'CoverageSummary',
    'DEMO_INPUTS',
    'DEMO_SNAPSHOT',
    'DashboardState',
    'InputEdited',
    'SectionToggled',
    'AnalyzeRequested',
    'DemoLoaded',
    'Cleared',
    'initial_state',
    'reduce',
]
