"""
Recipe model — typed representation of a catalog recipe.

steps and nutrition hold the payloads exactly as stored (JSON text or decoded
values). They are parsed when a card is built, so one malformed recipe cannot
fail a whole request.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecipeStep(BaseModel):
    """One numbered preparation step."""

    model_config = ConfigDict(frozen=True)

    step: Optional[int] = None
    instruction: Optional[str] = None


class RecipeItem(BaseModel):
    """Recipe payload used by the recipe ranking stage."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True
    )

    id: Optional[str] = None
    title: str = ""
    time_minutes: int = Field(gt=0)
    difficulty: str = ""
    ingredients: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    # Raw stored payloads; shape is checked when a card is built.
    steps: Optional[Any] = None
    nutrition: Optional[Any] = None

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_absent(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("difficulty", mode="before")
    @classmethod
    def difficulty_str(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("ingredients", mode="before")
    @classmethod
    def normalize_ingredients(cls, v: Any) -> List[str]:
        names: List[str] = []
        for raw in v or []:
            # Catalog rows may carry {"name": ...} objects instead of plain names.
            if isinstance(raw, dict):
                raw = raw.get("name")
            if not isinstance(raw, str):
                continue
            name = raw.strip().lower()
            if name and name not in names:
                names.append(name)
        return names

    @property
    def dedupe_key(self) -> Optional[str]:
        """Identity used to suppress duplicates: id, else title."""
        return self.id or self.title or None

    def is_quick_and_easy(self, max_time: int, difficulty: str) -> bool:
        return self.time_minutes <= max_time and self.difficulty.lower() == difficulty.lower()


def ensure_recipes(
    items: List[Union[Dict[str, Any], "RecipeItem"]],
) -> List["RecipeItem"]:
    """Convert list of dicts or RecipeItems to list of RecipeItem models for the pipeline."""
    return [
        RecipeItem.model_validate(r) if isinstance(r, dict) else r
        for r in items
    ]
