"""
Tests for backend/dashboard/state.py.

Every event returns a new state and leaves the previous one untouched.
"""

import dataclasses

import pytest

from dashboard.demo import DEMO_INPUTS, DEMO_SNAPSHOT
from dashboard.models import INPUT_FIELDS, RawInputBundle
from dashboard.state import (
    ALL_SECTIONS,
    AnalyzeRequested,
    Cleared,
    DashboardState,
    DemoLoaded,
    InputEdited,
    SectionToggled,
    initial_state,
    reduce,
)


class TestInitialState:

    def test_initial_state(self):
        state = initial_state()
        assert state.inputs == RawInputBundle()
        assert state.snapshot is DEMO_SNAPSHOT
        assert state.expanded == frozenset({"search_links"})


class TestReduce:

    def test_input_edited(self):
        before = DashboardState()
        after = reduce(before, InputEdited("transcript", "too junior"))
        assert after.inputs.transcript == "too junior"
        assert before.inputs.transcript == ""
        assert after is not before

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="Unknown input field"):
            reduce(DashboardState(), InputEdited("notes", "x"))

    def test_section_toggled(self):
        before = DashboardState()
        opened = reduce(before, SectionToggled("daily_updates"))
        closed = reduce(opened, SectionToggled("daily_updates"))
        assert "daily_updates" in opened.expanded
        assert "daily_updates" not in closed.expanded
        assert before.expanded == frozenset({"search_links"})

    def test_analyze_builds_snapshot_and_expands_all(self, analyzer):
        state = DashboardState()
        for name in INPUT_FIELDS:
            state = reduce(state, InputEdited(name, getattr(DEMO_INPUTS, name)))
        after = reduce(state, AnalyzeRequested(), analyzer)
        assert after.snapshot is not None
        assert after.snapshot.inputs == DEMO_INPUTS
        assert after.snapshot.drift_detected
        assert after.expanded == ALL_SECTIONS
        assert state.snapshot is None

    def test_analyze_recomputes_instead_of_patching(self, analyzer):
        state = reduce(DashboardState(), InputEdited("sheet_summary", "Approval Rate: 22%"))
        first = reduce(state, AnalyzeRequested(), analyzer)
        edited = reduce(first, InputEdited("sheet_summary", "Approval Rate: 75%"))
        second = reduce(edited, AnalyzeRequested(), analyzer)
        assert first.snapshot.approval.rate == 22
        assert second.snapshot.approval.rate == 75
        assert edited.snapshot is first.snapshot

    def test_demo_loaded(self):
        after = reduce(DashboardState(), DemoLoaded())
        assert after.inputs == DEMO_INPUTS
        assert after.snapshot is DEMO_SNAPSHOT
        assert after.expanded == ALL_SECTIONS

    def test_cleared(self):
        loaded = reduce(DashboardState(), DemoLoaded())
        cleared = reduce(loaded, Cleared())
        assert cleared.inputs == RawInputBundle()
        assert cleared.snapshot is None
        assert loaded.inputs == DEMO_INPUTS

    def test_unknown_event(self):
        with pytest.raises(ValueError, match="Unknown dashboard event"):
            reduce(DashboardState(), "analyze")

    def test_state_is_frozen(self):
        state = DashboardState()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.snapshot = DEMO_SNAPSHOT


class TestPackageExports:

    def test_state_and_demo_exported(self):
        import dashboard

        assert dashboard.reduce is reduce
        assert dashboard.initial_state is initial_state
        assert dashboard.DashboardState is DashboardState
        assert dashboard.DEMO_INPUTS is DEMO_INPUTS
        assert dashboard.DEMO_SNAPSHOT is DEMO_SNAPSHOT
