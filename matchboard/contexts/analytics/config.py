"""
Analytics Configuration

Rule thresholds and list limits for the analytics context, defined as an
OmegaConf structured config. A YAML file may override any subset of fields:

    # configs/analytics.yaml
    ats_threshold: 65
    top_skills_limit: 10

Unknown keys and wrongly typed values are rejected by OmegaConf when merging.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from matchboard.contexts.analytics import defaults

load_dotenv()


@dataclass
class AnalyticsConfig:
    """
    Tunable parameters of the analytics context.

    Attributes:
        ats_threshold: Average ATS score below which ATS advice is given
        skill_match_threshold: Average skill match below which skill advice is given
        experience_threshold: Average experience score below which experience advice is given
        min_jobs_for_insights: Job count below which more analysis is suggested
        high_match_threshold: Overall score above which a job counts as a high match
        top_skills_limit: Maximum number of skill frequency entries
        missing_skills_limit: Maximum number of missing skill entries
        recommended_skills_limit: Number of missing skills named in skill advice
        recent_scores_limit: Number of score records listed as recent jobs
    """

    ats_threshold: float = defaults.ATS_THRESHOLD
    skill_match_threshold: float = defaults.SKILL_MATCH_THRESHOLD
    experience_threshold: float = defaults.EXPERIENCE_THRESHOLD
    min_jobs_for_insights: int = defaults.MIN_JOBS_FOR_INSIGHTS
    high_match_threshold: float = defaults.HIGH_MATCH_THRESHOLD
    top_skills_limit: int = defaults.TOP_SKILLS_LIMIT
    missing_skills_limit: int = defaults.MISSING_SKILLS_LIMIT
    recommended_skills_limit: int = defaults.RECOMMENDED_SKILLS_LIMIT
    recent_scores_limit: int = defaults.RECENT_SCORES_LIMIT

    def __post_init__(self):
        for name in (
            "top_skills_limit",
            "missing_skills_limit",
            "recommended_skills_limit",
            "recent_scores_limit",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")


def _default_config_path() -> Optional[Path]:
    env_path = os.getenv("MATCHBOARD_CONFIG_PATH")
    return Path(env_path) if env_path else None


def load_analytics_config(config_path: Path = None) -> AnalyticsConfig:
    """
    Load analytics configuration, applying YAML overrides onto the defaults.

    Args:
        config_path: Optional YAML override file (defaults to MATCHBOARD_CONFIG_PATH
            env variable; defaults only when neither is set)

    Returns:
        AnalyticsConfig instance

    Raises:
        FileNotFoundError: If the config path (argument or env variable) is not a file
        omegaconf.errors.ConfigKeyError: If the YAML contains unknown keys
        omegaconf.errors.ValidationError: If a value has the wrong type
    """
    schema = OmegaConf.structured(AnalyticsConfig)

    if config_path is None:
        config_path = _default_config_path()
    if config_path is None:
        return OmegaConf.to_object(schema)

    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Analytics config not found: {config_path}")

    overrides = OmegaConf.load(config_path)
    merged = OmegaConf.merge(schema, overrides)
    return OmegaConf.to_object(merged)
