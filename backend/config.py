"""
Configuration module for Sourcing Pulse.
Loads and validates keyword vocabularies and thresholds from a YAML file using Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import List
import yaml
import os


class VocabularyConfig(BaseModel):
    """Keyword lists used by the signal extractors.

    List order is significant: every "first match" lookup scans these lists
    in declared order, never in text order.
    """
    senior_terms: List[str] = Field(default_factory=lambda: [
        "senior", "staff", "principal", "lead", "founding", "head"
    ])
    junior_terms: List[str] = Field(default_factory=lambda: [
        "junior", "associate", "entry", "intern"
    ])
    startup_terms: List[str] = Field(default_factory=lambda: [
        "seed", "series", "founding", "early"
    ])
    enterprise_terms: List[str] = Field(default_factory=lambda: [
        "enterprise", "public", "fortune"
    ])
    current_company_param: str = "currentCompany"
    sourcing_methods: List[str] = Field(default_factory=lambda: [
        "juicebox",
        "hubspot",
        "linkedin",
        "crunchbase",
        "github",
        "google",
        "x-ray",
        "deep research",
        "keyword search",
        "quota metrics",
        "startup",
        "donor companies",
    ])
    ai_sourcing_tool: str = "juicebox"
    rejection_keywords: List[str] = Field(default_factory=lambda: [
        "senior", "experience", "culture", "mismatch",
        "technical", "scale", "quality", "grind"
    ])
    expected_methods: List[str] = Field(default_factory=lambda: [
        "juicebox", "linkedin", "github", "crunchbase", "donor companies"
    ])


class ThresholdsConfig(BaseModel):
    """Numeric bands used by the rule evaluator and dashboard summaries."""
    rejection_alert_rate: int = 30
    approval_critical_rate: int = 40
    approval_high_rate: int = 70
    coverage_points_per_method: int = 25
    min_ai_sourcing_mentions: int = 2


class Config(BaseModel):
    """Main configuration model."""
    vocabulary: VocabularyConfig = Field(default_factory=VocabularyConfig)
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    log_level: str = "INFO"


def load_config(path: str = "config.yaml") -> Config:
    """
    Load and validate configuration from YAML file.

    Keys missing from the file keep their defaults.

    Args:
        path: Path to configuration file (default: config.yaml)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If the file is empty or its structure is invalid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Configuration file not found: {path}\n"
            f"Please copy config.example.yaml to {path} and customize it."
        )

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(
            f"Invalid YAML syntax in {path}: {e}"
        )

    if data is None:
        raise ValueError(f"Configuration file {path} is empty")

    try:
        config = Config(**data)
    except Exception as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check config.example.yaml for the correct format."
        )

    return config
