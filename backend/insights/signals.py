"""
Signal dataclasses for sourcing analysis.
Each signal record is the fixed-shape result of one extractor.
"""

from dataclasses import dataclass


@dataclass
class SearchSignals:
    """Signals derived from search-link text."""
    seniority_bias: str = "Mid-level"  # Senior, Junior, Mid-level (Unknown on parse failure)
    company_type: str = "General"  # Startup, Enterprise, General
    search_intent: str = "Keyword Search"  # Current Role, Keyword Search


@dataclass
class UpdateSignals:
    """Signals derived from daily-update text."""
    method_count: int = 0  # distinct sourcing methods mentioned
    primary_method: str = "None"
    raw_text: str = ""  # original text, used by the method diversity rule


@dataclass
class SummarySignals:
    """Signals derived from a pasted spreadsheet summary."""
    approval_rate: int = 0  # 0-100
    top_rejection_reason: str = "General Fit"
    approved_count: int = 0  # "Approved: N" line, 0 if absent
    rejected_count: int = 0  # "Rejected: N" line, 0 if absent


def fallback_signals(update_text: str = ""):
    """
    Safe defaults used when extraction fails as a whole.

    Args:
        update_text: Raw daily-update text, still handed to the rule evaluator

    Returns:
        Tuple of (SearchSignals, UpdateSignals, SummarySignals)
    """
    return (
        SearchSignals(seniority_bias="Unknown"),
        UpdateSignals(method_count=0, primary_method="None", raw_text=update_text),
        SummarySignals(approval_rate=0, top_rejection_reason="None"),
    )
