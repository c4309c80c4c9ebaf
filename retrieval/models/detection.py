"""
Detection models — canonical signals resolved from a request's hints, and the
audit record kept for each detection.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WORKOUT_AUDIT_KIND = "workout_image"
RECIPE_AUDIT_KIND = "recipe_image"


class WorkoutDetection(BaseModel):
    """Workout signal: canonical equipment, level, and target duration."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    equipment: str
    level: str
    duration_minutes: int


class RecipeDetection(BaseModel):
    """Recipe signal: canonical ingredients (first-detected order) and time budget."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    ingredients: List[str] = Field(default_factory=list)
    max_time_minutes: int


class DetectionAudit(BaseModel):
    """
    Audit record for one detection call.

    raw_hints are the sanitized hints the resolvers saw; normalized holds the
    resolved values using the public (camelCase) field names.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    image_url: Optional[str] = None
    raw_hints: List[str] = Field(default_factory=list)
    normalized: Dict[str, Any] = Field(default_factory=dict)
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


class AuditOutcome(BaseModel):
    """Result of a best-effort audit write: ok, or the error that was caught."""

    ok: bool
    error: Optional[str] = None
