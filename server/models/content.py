"""Request/response models for the workout and recipe endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from retrieval.models.cards import RecipeCard, WorkoutCard


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageRequest(_CamelModel):
    image_url: Optional[str] = None
    user_hints: List[str] = []


class WorkoutSearchRequest(_CamelModel):
    equipment: str
    level: Optional[str] = None
    duration_preference: int = Field(default=20, ge=0)


class RecipeSearchRequest(_CamelModel):
    ingredients: List[str] = []
    max_time: int = 30


class WorkoutResponse(_CamelModel):
    workouts: List[WorkoutCard]
    detected_equipment: Optional[str] = None
    detected_level: Optional[str] = None
    target_duration_minutes: Optional[int] = None
    latency_ms: Optional[int] = None


class RecipeResponse(_CamelModel):
    recipes: List[RecipeCard]
    detected_ingredients: Optional[List[str]] = None
    max_time_minutes: Optional[int] = None
    latency_ms: Optional[int] = None
