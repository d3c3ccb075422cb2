"""
Demo mode data.

DEMO_INPUTS fills all five fields with a realistic week of sourcing notes.
DEMO_SNAPSHOT is the hand-written analysis shown alongside them. Its signal
bundles match what the extractors derive from DEMO_INPUTS; the card text and
recommendations are curated rather than rule-generated.
"""

from insights.signals import SearchSignals, UpdateSignals, SummarySignals
from dashboard.models import (
    ApprovalSummary,
    CoverageSummary,
    DashboardSnapshot,
    DriftSummary,
    RawInputBundle,
)


DEMO_SEARCH_LINKS = (
    "https://www.linkedin.com/sales/search/people?query=(spellCorrectionEnabled%3Atrue"
    "%2Ckeywords%3Asenior%20software%20engineer%20AND%20react)&sessionId=5938485\n"
    "https://www.linkedin.com/sales/search/people?query=(keywords%3Astaff%20engineer"
    "%20AND%20typescript)"
)

DEMO_DAILY_UPDATES = (
    "Oct 14: Focused heavily on Sales Nav today. Sent 40 inmails. Response rate is low.\n"
    "Oct 15: Tried some Juicebox searches for \"Product-minded engineers\", "
    "better quality but low volume.\n"
    "Oct 16: Went back to Sales Nav, targeting Series B companies only."
)

DEMO_TRANSCRIPT = (
    "HM (Sarah): \"Honestly, the candidates from the last batch were too junior. "
    "Even the 'seniors' felt like mid-level.\"\n"
    "HM (Sarah): \"We really need someone who has seen scale. Maybe look at ex-Uber "
    "or Airbnb folks? We can pay top of band.\""
)

DEMO_RETRO_NOTES = (
    "- What worked: Juicebox signals for \"open source contributor\".\n"
    "- What failed: General keyword search on LinkedIn. Too much noise.\n"
    "- Blocker: Candidates failing the System Design round consistently."
)

DEMO_SHEET_SUMMARY = (
    "Submitted: 45\n"
    "Approved: 6\n"
    "Rejected: 39\n"
    "Approval Rate: 13.3%\n"
    "Rejection Reasons:\n"
    "- Failed System Design (20)\n"
    "- Not enough scale experience (10)\n"
    "- Cultural mismatch (5)"
)

DEMO_INPUTS = RawInputBundle(
    search_links=DEMO_SEARCH_LINKS,
    daily_updates=DEMO_DAILY_UPDATES,
    transcript=DEMO_TRANSCRIPT,
    retro_notes=DEMO_RETRO_NOTES,
    sheet_summary=DEMO_SHEET_SUMMARY,
)

DEMO_SNAPSHOT = DashboardSnapshot(
    inputs=DEMO_INPUTS,
    search=SearchSignals(
        seniority_bias="Senior",
        company_type="General",
        search_intent="Keyword Search",
    ),
    update=UpdateSignals(
        method_count=1,
        primary_method="Juicebox",
        raw_text=DEMO_DAILY_UPDATES,
    ),
    summary=SummarySignals(
        approval_rate=13,
        top_rejection_reason='Issues with "experience"',
        approved_count=6,
        rejected_count=39,
    ),
    recommendations=[
        "🛑 PAUSE: Stop general keyword sourcing on LinkedIn immediately.",
        "🎯 PIVOT: Target \"Donor Companies\" (Uber, Airbnb, Stripe) as requested in transcript.",
        "📉 FILTER: Increase YOE floor to 7+ years to filter out \"fake seniors\".",
        "🔍 TRY: Run a GitHub scrape for \"High Scale Distributed Systems\" contributors.",
    ],
    approval=ApprovalSummary(
        rate=13,
        status="critical",
        headline="Critical Bottleneck in Technical Screening",
        main_blocker="System Design / Scale Experience",
        variant="low",
        approved=6,
        rejected=39,
    ),
    drift=DriftSummary(
        detected=True,
        severity="high",
        direction="Seniority & Pedigree Up-leveling",
        evidence=(
            "Hiring Manager explicitly requested \"ex-Uber/Airbnb\" and noted "
            "current candidates are \"too junior\"."
        ),
    ),
    coverage=CoverageSummary(
        score=40,
        missing_methods=["Donor Company Sourcing", "GitHub Scraping", "Ex-Colleague Mapping"],
        overused_method="Generic Sales Navigator Search",
    ),
)
