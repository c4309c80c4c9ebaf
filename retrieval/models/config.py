"""
Retrieval configuration — detection, workout ranking, and recipe ranking parameters.

RetrievalConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file named by RETRIEVAL_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RetrievalConfig(BaseModel):
    """Configuration for hint detection and content ranking."""

    # -------------------------------------------------------------------------
    # Detection: duration / time-budget extraction
    # -------------------------------------------------------------------------

    # Parsed minutes are clamped into [min_duration_minutes, max_duration_minutes].
    min_duration_minutes: int = 10
    max_duration_minutes: int = 90

    # Used when no hint parses as a duration.
    default_duration_minutes: int = 20
    default_recipe_max_time_minutes: int = 30

    # -------------------------------------------------------------------------
    # Workouts
    # score = base + duration_bonus (within tolerance) + level_bonus (exact level)
    #         + popularity_max * view_count / max_view_count_in_pool
    # -------------------------------------------------------------------------

    workout_result_limit: int = 4

    # Items within +/- this many minutes of the preference count as duration matches.
    duration_tolerance_minutes: int = 5

    score_base: float = 1.0
    score_duration_bonus: float = 0.5
    score_level_bonus: float = 0.3
    score_popularity_max: float = 0.2

    # Watch URL exposed on workout cards; {id} is the external video id.
    canonical_url_template: str = "https://www.youtube.com/watch?v={id}"

    # -------------------------------------------------------------------------
    # Recipes
    # -------------------------------------------------------------------------

    recipe_result_limit: int = 3

    # Fallback pool: quick and easy recipes used when ingredient signal is missing or thin.
    fallback_max_time_minutes: int = 20
    fallback_difficulty: str = "easy"

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min_duration_minutes > self.max_duration_minutes:
            raise ValueError(
                f"min_duration_minutes ({self.min_duration_minutes}) exceeds "
                f"max_duration_minutes ({self.max_duration_minutes})"
            )
        if self.workout_result_limit <= 0 or self.recipe_result_limit <= 0:
            raise ValueError("Result limits must be positive")
        if self.duration_tolerance_minutes < 0:
            raise ValueError("duration_tolerance_minutes must be >= 0")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RetrievalConfig":
        """Create config from a grouped dictionary (e.g., loaded from JSON)."""
        flat = {}
        for group in ("detection", "workouts", "recipes"):
            if isinstance(config_dict.get(group), dict):
                flat.update(config_dict[group])
        if "scoring" in config_dict:
            sc = config_dict["scoring"]
            for key in ("base", "duration_bonus", "level_bonus", "popularity_max"):
                if key in sc:
                    flat[f"score_{key}"] = sc[key]
        if "fallback" in config_dict:
            fb = config_dict["fallback"]
            if "max_time_minutes" in fb:
                flat["fallback_max_time_minutes"] = fb["max_time_minutes"]
            if "difficulty" in fb:
                flat["fallback_difficulty"] = fb["difficulty"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RetrievalConfig()


def resolve_config(config: Optional["RetrievalConfig"]) -> "RetrievalConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
