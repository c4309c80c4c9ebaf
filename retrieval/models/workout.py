"""
Workout model — typed representation of a catalog workout video.

Used by the workout ranking stages instead of raw dicts.
Built from catalog dicts via WorkoutItem.model_validate(d) or ensure_workouts().
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

WORKOUT_LEVELS = ("beginner", "intermediate", "advanced")


def _clean_tags(values: Optional[List[Any]], dedupe: bool) -> List[str]:
    out: List[str] = []
    for v in values or []:
        if not isinstance(v, str):
            continue
        tag = v.strip().lower()
        if not tag or (dedupe and tag in out):
            continue
        out.append(tag)
    return out


class WorkoutItem(BaseModel):
    """
    Workout video payload used across the ranking stages.

    duration_minutes and level are optional; when absent they never match a
    preference (they are not wildcards).
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True
    )

    id: str
    title: str = ""
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    level: Optional[str] = None
    equipment: List[str] = Field(default_factory=list)
    body_parts: List[str] = Field(default_factory=list)
    view_count: Optional[int] = Field(default=None, ge=0)
    thumbnail_url: Optional[str] = None

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Workout id must be non-empty")
        return v

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        level = str(v).strip().lower()
        if not level:
            return None
        if level not in WORKOUT_LEVELS:
            raise ValueError(f"Unknown workout level: {v!r}")
        return level

    @field_validator("equipment", mode="before")
    @classmethod
    def normalize_equipment(cls, v: Any) -> List[str]:
        return _clean_tags(v, dedupe=True)

    @field_validator("body_parts", mode="before")
    @classmethod
    def normalize_body_parts(cls, v: Any) -> List[str]:
        return _clean_tags(v, dedupe=False)

    @property
    def primary_body_part(self) -> Optional[str]:
        """First body-part tag, used for diversity selection."""
        return self.body_parts[0] if self.body_parts else None

    def has_equipment(self, equipment: str) -> bool:
        return equipment.strip().lower() in self.equipment


def ensure_workouts(
    items: List[Union[Dict[str, Any], "WorkoutItem"]],
) -> List["WorkoutItem"]:
    """Convert list of dicts or WorkoutItems to list of WorkoutItem models for the pipeline."""
    return [
        WorkoutItem.model_validate(w) if isinstance(w, dict) else w
        for w in items
    ]
