"""
Workout and recipe retrieval core.

Single entry point for the retrieval package:
- models/: RetrievalConfig, WorkoutItem, RecipeItem, detection results, cards
- stages/: hints (normalization), detection, workout_ranking + diversity,
  recipe_ranking, orchestrator (catalog fetch + ranking)
- contracts: ContentCatalog and DetectionAuditStore protocols
"""

from .contracts import ContentCatalog, DetectionAuditStore
from .errors import CatalogError, CatalogUnavailableError
from .models.cards import RecipeCard, WorkoutCard, card_payload
from .models.config import DEFAULT_CONFIG, RetrievalConfig, resolve_config
from .models.detection import AuditOutcome, DetectionAudit, RecipeDetection, WorkoutDetection
from .models.recipe import RecipeItem, ensure_recipes
from .models.workout import WorkoutItem, ensure_workouts
from .stages.detection import detect_recipe_context, detect_workout_context
from .stages.orchestrator import find_recipes, find_workouts
from .stages.recipe_ranking import rank_recipes
from .stages.workout_ranking import filter_by_equipment, rank_workouts

__all__ = [
    "AuditOutcome",
    "CatalogError",
    "CatalogUnavailableError",
    "ContentCatalog",
    "DEFAULT_CONFIG",
    "DetectionAudit",
    "DetectionAuditStore",
    "RecipeCard",
    "RecipeDetection",
    "RecipeItem",
    "RetrievalConfig",
    "WorkoutCard",
    "WorkoutDetection",
    "WorkoutItem",
    "card_payload",
    "detect_recipe_context",
    "detect_workout_context",
    "ensure_recipes",
    "ensure_workouts",
    "filter_by_equipment",
    "find_recipes",
    "find_workouts",
    "rank_recipes",
    "rank_workouts",
    "resolve_config",
]
