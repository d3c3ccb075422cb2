"""
Analysis orchestrator for the dashboard.

Runs all extractors over a RawInputBundle, applies the single top-level
parsing fallback, evaluates the recommendation rules and derives the
summary cards.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from config import Config
from insights.engine import InsightEngine
from insights.extractor import SignalExtractor
from insights.signals import fallback_signals
from dashboard.models import (
    ApprovalSummary,
    CoverageSummary,
    DashboardSnapshot,
    DriftSummary,
    RawInputBundle,
)

logger = logging.getLogger(__name__)

_HTML_TAG = re.compile(
    r"</?(?:html|body|meta|style|table|thead|tbody|tr|td|th|div|p|br|span|b|i|u|ul|ol|li)\b[^>]*>",
    re.IGNORECASE,
)


def normalize_text(text: str) -> str:
    """
    Flatten pasted rich text (HTML) to plain text and preserve line breaks.
    Table rows become one line each. Plain text is returned unchanged.

    Args:
        text: Pasted text, possibly HTML from a spreadsheet or doc

    Returns:
        Plain text with blank lines dropped
    """
    if not text or not _HTML_TAG.search(text):
        return text or ""
    soup = BeautifulSoup(text, 'html.parser')
    for row in soup.find_all("tr"):
        cells = [cell.get_text(" ", strip=True) for cell in row.find_all(["td", "th"])]
        row.replace_with("\n" + " ".join(cells) + "\n")
    flattened = soup.get_text("\n")
    lines = [line.strip() for line in flattened.splitlines()]
    return "\n".join([l for l in lines if l])


class DashboardAnalyzer:
    """Builds dashboard snapshots from raw inputs."""

    def __init__(
        self,
        config: Optional[Config] = None,
        extractor: Optional[SignalExtractor] = None,
        engine: Optional[InsightEngine] = None
    ):
        """
        Initialize analyzer.

        Args:
            config: Configuration object (defaults used when omitted)
            extractor: SignalExtractor instance
            engine: InsightEngine instance
        """
        self.config = config or Config()
        self.extractor = extractor or SignalExtractor(self.config)
        self.engine = engine or InsightEngine(self.config)

    def analyze(self, inputs: RawInputBundle) -> DashboardSnapshot:
        """
        Run extraction and rule evaluation for one set of inputs.

        A failure anywhere in the extraction step replaces all three signal
        bundles with safe defaults and sets a notice on the snapshot. The
        extractors are total, so this path is not expected to run.

        Args:
            inputs: The five raw text fields

        Returns:
            Freshly built DashboardSnapshot
        """
        daily_updates = inputs.daily_updates
        transcript = inputs.transcript

        notice = None
        try:
            search = self.extractor.extract_search_signals(inputs.search_links)
            update = self.extractor.extract_update_signals(daily_updates)
            sheet_summary = normalize_text(inputs.sheet_summary)
            summary = self.extractor.extract_summary_signals(sheet_summary)
        except Exception as e:
            logger.error(f"Parsing error: {e}")
            notice = f"Parsing failed: {str(e) or 'invalid input'}"
            search, update, summary = fallback_signals(daily_updates)

        recommendations = self.engine.generate_recommendations(
            search, update, summary, transcript
        )

        rate = summary.approval_rate
        status = self.engine.approval_status(rate)
        approval = ApprovalSummary(
            rate=rate,
            status=status,
            headline="Approval Rate Alert" if status == "critical" else "Healthy Pipeline",
            main_blocker=summary.top_rejection_reason,
            variant=self.engine.approval_variant(rate),
            approved=summary.approved_count,
            rejected=summary.rejected_count,
        )

        detected = self.engine.detect_drift(search, transcript)
        if detected:
            drift = DriftSummary(
                detected=True,
                severity="medium",
                direction="Seniority Mismatch",
                evidence="Search links target Senior, but the transcript mentions Junior.",
            )
        else:
            drift = DriftSummary(
                detected=False,
                severity="low",
                direction="Aligned",
                evidence="No seniority mismatch between search links and transcript.",
            )

        coverage = CoverageSummary(
            score=self.engine.coverage_score(update),
            missing_methods=self.extractor.missing_methods(daily_updates),
            overused_method=update.primary_method,
        )

        logger.info(
            f"Analysis complete: seniority={search.seniority_bias} "
            f"methods={update.method_count} approval={rate}% "
            f"status={status} drift={detected} "
            f"recommendations={len(recommendations)}"
        )

        return DashboardSnapshot(
            inputs=inputs,
            search=search,
            update=update,
            summary=summary,
            recommendations=recommendations,
            approval=approval,
            drift=drift,
            coverage=coverage,
            notice=notice,
        )
