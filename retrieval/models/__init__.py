"""Data models for content retrieval."""

from .cards import RecipeCard, WorkoutCard, card_payload
from .config import DEFAULT_CONFIG, RetrievalConfig, resolve_config
from .detection import (
    RECIPE_AUDIT_KIND,
    WORKOUT_AUDIT_KIND,
    AuditOutcome,
    DetectionAudit,
    RecipeDetection,
    WorkoutDetection,
)
from .recipe import RecipeItem, RecipeStep, ensure_recipes
from .scoring import ScoredRecipe, ScoredWorkout
from .workout import WORKOUT_LEVELS, WorkoutItem, ensure_workouts

__all__ = [
    "DEFAULT_CONFIG",
    "RECIPE_AUDIT_KIND",
    "WORKOUT_AUDIT_KIND",
    "WORKOUT_LEVELS",
    "AuditOutcome",
    "DetectionAudit",
    "RecipeCard",
    "RecipeDetection",
    "RecipeItem",
    "RecipeStep",
    "RetrievalConfig",
    "ScoredRecipe",
    "ScoredWorkout",
    "WorkoutCard",
    "WorkoutDetection",
    "WorkoutItem",
    "card_payload",
    "ensure_recipes",
    "ensure_workouts",
    "resolve_config",
]
