"""
Shared pytest fixtures for the Sourcing Pulse test suite.

Provides a default configuration and the extractor, engine and analyzer
built from it.
"""

import pytest

from config import Config
from dashboard.analyzer import DashboardAnalyzer
from insights.engine import InsightEngine
from insights.extractor import SignalExtractor


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def extractor(config) -> SignalExtractor:
    return SignalExtractor(config)


@pytest.fixture
def engine(config) -> InsightEngine:
    return InsightEngine(config)


@pytest.fixture
def analyzer(config, extractor, engine) -> DashboardAnalyzer:
    return DashboardAnalyzer(config, extractor, engine)
