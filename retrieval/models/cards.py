"""
Result cards — the externally visible projection of catalog items.

Cards are built fresh per response. Absent optional fields stay None and are
dropped on serialization (model_dump(by_alias=True, exclude_none=True)).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .recipe import RecipeStep


class WorkoutCard(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    duration_minutes: Optional[int] = None
    level: Optional[str] = None
    equipment: List[str] = []
    body_parts: List[str] = []
    thumbnail_url: Optional[str] = None
    view_count: Optional[int] = None
    canonical_url: Optional[str] = None


class RecipeCard(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    title: str
    time_minutes: int
    difficulty: str
    image_url: Optional[str] = None
    steps: Optional[List[RecipeStep]] = None
    nutrition: Optional[Dict[str, Any]] = None


def card_payload(card: BaseModel) -> Dict[str, Any]:
    """Serialized card with camelCase keys and absent fields omitted."""
    return card.model_dump(by_alias=True, exclude_none=True)
