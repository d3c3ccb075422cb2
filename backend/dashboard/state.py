"""
Dashboard state transitions.

The dashboard holds the current inputs, the snapshot on screen and which
input sections are expanded. Every user action is an event; reduce()
returns a new DashboardState and never mutates the previous one.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional, Union

from dashboard.analyzer import DashboardAnalyzer
from dashboard.demo import DEMO_INPUTS, DEMO_SNAPSHOT
from dashboard.models import INPUT_FIELDS, DashboardSnapshot, RawInputBundle


@dataclass(frozen=True)
class DashboardState:
    """
    One immutable view of the dashboard.

    Attributes:
        inputs: Current contents of the five input fields
        snapshot: Analysis on screen, or None while waiting for data
        expanded: Names of the expanded input sections
    """
    inputs: RawInputBundle = field(default_factory=RawInputBundle)
    snapshot: Optional[DashboardSnapshot] = None
    expanded: FrozenSet[str] = frozenset({"search_links"})


@dataclass(frozen=True)
class InputEdited:
    field: str
    value: str


@dataclass(frozen=True)
class SectionToggled:
    section: str


@dataclass(frozen=True)
class AnalyzeRequested:
    pass


@dataclass(frozen=True)
class DemoLoaded:
    pass


@dataclass(frozen=True)
class Cleared:
    pass


Event = Union[InputEdited, SectionToggled, AnalyzeRequested, DemoLoaded, Cleared]

ALL_SECTIONS = frozenset(INPUT_FIELDS)


def initial_state() -> DashboardState:
    """Empty inputs with the demo analysis on screen."""
    return DashboardState(snapshot=DEMO_SNAPSHOT)


def _check_name(name: str) -> None:
    if name not in ALL_SECTIONS:
        raise ValueError(
            f"Unknown input field: {name}. "
            f"Available fields: {', '.join(INPUT_FIELDS)}"
        )


def reduce(
    state: DashboardState,
    event: Event,
    analyzer: Optional[DashboardAnalyzer] = None
) -> DashboardState:
    """
    Apply one event to the dashboard state.

    Args:
        state: Current state
        event: User action
        analyzer: Analyzer used by AnalyzeRequested (default configuration if omitted)

    Returns:
        New DashboardState

    Raises:
        ValueError: If the event names an unknown field or section, or is not an event
    """
    if isinstance(event, InputEdited):
        _check_name(event.field)
        inputs = replace(state.inputs, **{event.field: event.value})
        return replace(state, inputs=inputs)

    elif isinstance(event, SectionToggled):
        _check_name(event.section)
        return replace(state, expanded=state.expanded ^ {event.section})

    elif isinstance(event, AnalyzeRequested):
        analyzer = analyzer or DashboardAnalyzer()
        snapshot = analyzer.analyze(state.inputs)
        return replace(state, snapshot=snapshot, expanded=ALL_SECTIONS)

    elif isinstance(event, DemoLoaded):
        return DashboardState(
            inputs=DEMO_INPUTS,
            snapshot=DEMO_SNAPSHOT,
            expanded=ALL_SECTIONS,
        )

    elif isinstance(event, Cleared):
        return replace(state, inputs=RawInputBundle(), snapshot=None)

    raise ValueError(f"Unknown dashboard event: {event!r}")
