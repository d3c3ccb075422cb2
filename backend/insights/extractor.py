"""
Signal extraction module for sourcing analysis.
Extracts signals from pasted recruiting text based on keywords and patterns.

Every extractor is total: empty or malformed input yields the default record.
"""

import re
from typing import List, Optional
from urllib.parse import unquote

from .signals import SearchSignals, UpdateSignals, SummarySignals
from config import Config


APPROVAL_RATE_PATTERN = re.compile(
    r"approval[\s:_\-]*(?:[a-z]+[\s:_\-]+)?rate.*?(\d{1,3}(?:\.\d+)?)\s*%",
    re.IGNORECASE,
)
APPROVED_COUNT_PATTERN = re.compile(r"approved:\s*(\d+)", re.IGNORECASE)
REJECTED_COUNT_PATTERN = re.compile(r"rejected:\s*(\d+)", re.IGNORECASE)


class SignalExtractor:
    """Extracts analysis signals from free-text inputs."""

    def __init__(self, config: Config):
        """
        Initialize signal extractor with configuration.

        Args:
            config: Configuration object with keyword vocabularies
        """
        self.config = config
        self.vocabulary = config.vocabulary

    @staticmethod
    def _first_match(text: str, keywords: List[str]) -> Optional[str]:
        """Return the first keyword, in list order, found as a substring of text."""
        for kw in keywords:
            if kw.lower() in text:
                return kw
        return None

    def extract_search_signals(self, text: str) -> SearchSignals:
        """
        Classify search links by seniority, company stage and intent.

        Args:
            text: One or more URL-encoded search links, one per line

        Returns:
            SearchSignals with seniority bias, company type and search intent
        """
        decoded = unquote(text or "").lower()
        vocab = self.vocabulary

        # Senior terms win when both families are present
        if self._first_match(decoded, vocab.senior_terms):
            seniority = "Senior"
        elif self._first_match(decoded, vocab.junior_terms):
            seniority = "Junior"
        else:
            seniority = "Mid-level"

        if self._first_match(decoded, vocab.startup_terms):
            company_type = "Startup"
        elif self._first_match(decoded, vocab.enterprise_terms):
            company_type = "Enterprise"
        else:
            company_type = "General"

        # Raw parameter names only survive in the undecoded text
        if vocab.current_company_param and vocab.current_company_param in (text or ""):
            intent = "Current Role"
        else:
            intent = "Keyword Search"

        return SearchSignals(
            seniority_bias=seniority,
            company_type=company_type,
            search_intent=intent,
        )

    def extract_update_signals(self, text: str) -> UpdateSignals:
        """
        Count distinct sourcing methods mentioned in daily updates.

        Args:
            text: Free-text daily update log

        Returns:
            UpdateSignals with method count, primary method and the raw text
        """
        text = text or ""
        text_lower = text.lower()

        found = [m for m in self.vocabulary.sourcing_methods if m.lower() in text_lower]

        primary = "None"
        if found:
            primary = found[0][:1].upper() + found[0][1:]

        return UpdateSignals(
            method_count=len(set(m.lower() for m in found)),
            primary_method=primary,
            raw_text=text,
        )

    def extract_summary_signals(self, text: str) -> SummarySignals:
        """
        Parse approval rate and top rejection reason from a sheet summary.

        Args:
            text: Pasted spreadsheet or summary block

        Returns:
            SummarySignals with approval rate (0-100), rejection reason
            and the approved/rejected counts when listed
        """
        text = text or ""

        rate = 0
        match = APPROVAL_RATE_PATTERN.search(text)
        if match:
            rate = min(100, int(float(match.group(1))))

        reason = "General Fit"
        keyword = self._first_match(text.lower(), self.vocabulary.rejection_keywords)
        if keyword:
            reason = f'Issues with "{keyword}"'

        approved = APPROVED_COUNT_PATTERN.search(text)
        rejected = REJECTED_COUNT_PATTERN.search(text)

        return SummarySignals(
            approval_rate=rate,
            top_rejection_reason=reason,
            approved_count=int(approved.group(1)) if approved else 0,
            rejected_count=int(rejected.group(1)) if rejected else 0,
        )

    def missing_methods(self, text: str) -> List[str]:
        """
        List expected sourcing methods absent from daily updates.

        Args:
            text: Free-text daily update log

        Returns:
            Display-capitalized method names, in configured order
        """
        text_lower = (text or "").lower()
        return [
            m[:1].upper() + m[1:]
            for m in self.vocabulary.expected_methods
            if m.lower() not in text_lower
        ]
