"""Pipeline stages: hint normalization, detection, workout and recipe ranking, retrieval."""

from .detection import detect_recipe_context, detect_workout_context, persist_detection_audit
from .diversity import select_diverse_workouts
from .hints import resolve_recipe_signal, resolve_workout_signal, sanitize_hints
from .orchestrator import find_recipes, find_workouts
from .recipe_ranking import rank_recipes, score_recipes
from .workout_ranking import filter_by_equipment, rank_workouts, score_workouts

__all__ = [
    "detect_recipe_context",
    "detect_workout_context",
    "filter_by_equipment",
    "find_recipes",
    "find_workouts",
    "persist_detection_audit",
    "rank_recipes",
    "rank_workouts",
    "resolve_recipe_signal",
    "resolve_workout_signal",
    "sanitize_hints",
    "score_recipes",
    "score_workouts",
    "select_diverse_workouts",
]
