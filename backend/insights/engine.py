"""
Rule evaluation engine for sourcing analysis.
Turns extracted signals into ordered recommendations and dashboard labels.
"""

import logging
import re
from typing import List, Optional

from .signals import SearchSignals, UpdateSignals, SummarySignals
from config import Config

logger = logging.getLogger(__name__)

HIGH_REJECTION_TEMPLATE = (
    "⚠️ High Rejection Rate (<{threshold}%): Re-calibrate Seniority filters immediately."
)
HIGH_REJECTION_MESSAGE = HIGH_REJECTION_TEMPLATE.format(threshold=30)
LOW_DIVERSITY_MESSAGE = (
    "📉 Low Method Diversity: Juicebox usage is low. Try AI sourcing to expand pool."
)
SENIOR_REJECTION_MESSAGE = (
    '🎯 Strategy Shift: Candidates are "Too Senior". '
    'Target distinct "Staff" vs "Senior" keywords.'
)
ALIGNMENT_ALERT_MESSAGE = (
    '⚡ Alignment Alert: Sourcing "Senior" profiles, '
    'but hiring manager mentioned "Junior".'
)
HEALTHY_MESSAGE = "✅ Pipeline looks healthy. Continue with current sourcing mix."


class InsightEngine:
    """Evaluates recommendation rules against extracted signals."""

    def __init__(self, config: Config):
        """
        Initialize insight engine.

        Args:
            config: Configuration object with thresholds and the AI sourcing tool name
        """
        self.config = config
        self.thresholds = config.thresholds
        tool = config.vocabulary.ai_sourcing_tool
        self._tool_pattern = re.compile(rf"\b{re.escape(tool)}\b", re.IGNORECASE)
        self.high_rejection_message = HIGH_REJECTION_TEMPLATE.format(
            threshold=self.thresholds.rejection_alert_rate
        )

    def count_tool_mentions(self, text: str) -> int:
        """
        Count whole-word, case-insensitive mentions of the AI sourcing tool.

        Args:
            text: Raw daily-update text

        Returns:
            Number of occurrences (not distinct matches)
        """
        return len(self._tool_pattern.findall(text or ""))

    def generate_recommendations(
        self,
        search: SearchSignals,
        update: UpdateSignals,
        summary: SummarySignals,
        transcript: Optional[str] = None
    ) -> List[str]:
        """
        Apply every rule in declaration order.

        Rules 1-4 are independent and unconditional. The healthy fallback
        is appended only when none of them fired.

        Args:
            search: Search-link signals
            update: Daily-update signals (raw_text is re-scanned)
            summary: Sheet summary signals
            transcript: Raw meeting transcript text

        Returns:
            Ordered list of 1 to 4 recommendation strings
        """
        recommendations = []
        rate = summary.approval_rate

        # Rule 1: approval rate below the rejection alert band
        if 0 < rate < self.thresholds.rejection_alert_rate:
            recommendations.append(self.high_rejection_message)

        # Rule 2: AI sourcing mentions, independent of primary_method
        mentions = self.count_tool_mentions(update.raw_text)
        if mentions < self.thresholds.min_ai_sourcing_mentions:
            recommendations.append(LOW_DIVERSITY_MESSAGE)

        # Rule 3: rejections for seniority
        if "senior" in (summary.top_rejection_reason or "").lower():
            recommendations.append(SENIOR_REJECTION_MESSAGE)

        # Rule 4: search links and transcript disagree on seniority
        if self.detect_drift(search, transcript):
            recommendations.append(ALIGNMENT_ALERT_MESSAGE)

        if not recommendations:
            recommendations.append(HEALTHY_MESSAGE)

        logger.debug(
            f"Evaluated rules: rate={rate} tool_mentions={mentions} "
            f"seniority={search.seniority_bias} recommendations={len(recommendations)}"
        )
        return recommendations

    def detect_drift(self, search: SearchSignals, transcript: Optional[str]) -> bool:
        """
        Check whether Senior-targeted searches conflict with a Junior transcript.

        Args:
            search: Search-link signals
            transcript: Raw meeting transcript text

        Returns:
            True if seniority bias is Senior and the transcript mentions "junior"
        """
        return (
            search.seniority_bias == "Senior"
            and "junior" in (transcript or "").lower()
        )

    def approval_status(self, rate: int) -> str:
        """
        Determine approval status label.

        Uses its own band, separate from the rejection alert rule.

        Args:
            rate: Approval rate (0-100)

        Returns:
            'critical' or 'healthy'
        """
        if rate < self.thresholds.approval_critical_rate:
            return "critical"
        return "healthy"

    def approval_variant(self, rate: int) -> str:
        """Display band for the approval card: 'low', 'mid' or 'high'."""
        if rate < self.thresholds.approval_critical_rate:
            return "low"
        elif rate > self.thresholds.approval_high_rate:
            return "high"
        return "mid"

    def coverage_score(self, update: UpdateSignals) -> int:
        """Coverage score from distinct method count, clamped to 0-100."""
        score = update.method_count * self.thresholds.coverage_points_per_method
        return max(0, min(100, score))
