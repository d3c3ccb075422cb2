"""
Insights package for sourcing analysis.
Provides signal extraction and recommendation rules.
"""

from .engine import InsightEngine
from .extractor import SignalExtractor
from .signals import (
    SearchSignals,
    UpdateSignals,
    SummarySignals,
    fallback_signals
)

__all__ = [
    'InsightEngine',
    'SignalExtractor',
    'SearchSignals',
    'UpdateSignals',
    'SummarySignals',
    'fallback_signals',
]
