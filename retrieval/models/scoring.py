"""
Scoring models — a catalog item paired with the score that ordered it.
"""

from typing import Optional

from pydantic import BaseModel

from .recipe import RecipeItem
from .workout import WorkoutItem


class ScoredWorkout(BaseModel):
    """A workout with its ranking components."""

    workout: WorkoutItem
    within_tolerance: bool
    level_match: bool
    popularity_score: float
    final_score: float
    # None when the workout has no duration (sorts after every known delta).
    duration_delta: Optional[int] = None


class ScoredRecipe(BaseModel):
    """A recipe with its ingredient-overlap count."""

    recipe: RecipeItem
    match_count: int
