"""
Hint normalization — turn free-text hints into canonical detection signals.

Resolvers:
- equipment: exact alias match, then substring match, then the fallback priority list
- level: first hint mentioning a level keyword
- duration / recipe time budget: first hint with a minute value, clamped
- ingredients: whole-hint and per-word alias matches, first-detected order

Alias tables are ordered tuples; first match wins.
The public entry points are resolve_workout_signal and resolve_recipe_signal.
"""

import re
from typing import Iterable, List, Optional, Tuple

from ..models.config import RetrievalConfig, DEFAULT_CONFIG
from ..models.detection import RecipeDetection, WorkoutDetection
from ..utils.durations import first_minutes

EQUIPMENT_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("dumbbell", "dumbbells"),
    ("dumbbells", "dumbbells"),
    ("kettlebell", "kettlebell"),
    ("kettlebells", "kettlebell"),
    ("resistance band", "resistance_bands"),
    ("resistance bands", "resistance_bands"),
    ("band", "resistance_bands"),
    ("yoga mat", "mat"),
    ("mat", "mat"),
    ("barbell", "barbell"),
    ("bodyweight", "bodyweight"),
)

# First entry is the default when no hint names any equipment.
FALLBACK_EQUIPMENT_PRIORITY: Tuple[str, ...] = (
    "dumbbells",
    "bodyweight",
    "resistance_bands",
    "kettlebell",
    "mat",
)

# (keyword, level), checked in this order within each hint.
LEVEL_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("advanced", "advanced"),
    ("intermediate", "intermediate"),
    ("beginner", "beginner"),
    ("easy", "beginner"),
)

DEFAULT_LEVEL = "beginner"

INGREDIENT_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("chicken", "chicken"),
    ("salmon", "salmon"),
    ("tofu", "tofu"),
    ("shrimp", "shrimp"),
    ("turkey", "turkey"),
    ("beef", "beef"),
    ("steak", "beef"),
    ("broccoli", "broccoli"),
    ("quinoa", "quinoa"),
    ("rice", "rice"),
    ("pasta", "pasta"),
    ("egg", "eggs"),
    ("eggs", "eggs"),
    ("spinach", "spinach"),
    ("vegetable", "vegetable"),
    ("veggie", "vegetable"),
)

_INGREDIENT_LOOKUP = dict(INGREDIENT_ALIASES)
_EQUIPMENT_LOOKUP = dict(EQUIPMENT_ALIASES)
_WORD = re.compile(r"[a-z]+")


def sanitize_hints(hints: Optional[Iterable[object]]) -> List[str]:
    """Trim and lowercase hints, dropping blanks and non-strings; order is kept."""
    sanitized = []
    for raw in hints or []:
        if not isinstance(raw, str):
            continue
        hint = raw.strip().lower()
        if hint:
            sanitized.append(hint)
    return sanitized


def resolve_equipment(hints: List[str]) -> str:
    """Canonical equipment for sanitized hints (defaults to the first fallback)."""
    for hint in hints:
        canonical = _EQUIPMENT_LOOKUP.get(hint)
        if canonical is not None:
            return canonical
    for alias, canonical in EQUIPMENT_ALIASES:
        if any(alias in hint for hint in hints):
            return canonical
    return FALLBACK_EQUIPMENT_PRIORITY[0]


def resolve_level(hints: List[str]) -> str:
    for hint in hints:
        for keyword, level in LEVEL_KEYWORDS:
            if keyword in hint:
                return level
    return DEFAULT_LEVEL


def resolve_duration(hints: List[str], config: RetrievalConfig = DEFAULT_CONFIG) -> int:
    return first_minutes(
        hints,
        config.min_duration_minutes,
        config.max_duration_minutes,
        config.default_duration_minutes,
    )


def resolve_recipe_max_time(hints: List[str], config: RetrievalConfig = DEFAULT_CONFIG) -> int:
    return first_minutes(
        hints,
        config.min_duration_minutes,
        config.max_duration_minutes,
        config.default_recipe_max_time_minutes,
    )


def resolve_ingredients(hints: List[str]) -> List[str]:
    """
    Canonical ingredients named by the hints, in first-detected order.

    Each hint is checked as a whole ("eggs") and word by word ("chicken breast").
    No hints means no ingredients; there is no default food.
    """
    detected: List[str] = []
    for hint in hints:
        normalized = hint.lower()
        candidates = [normalized] + _WORD.findall(normalized)
        for token in candidates:
            canonical = _INGREDIENT_LOOKUP.get(token)
            if canonical is not None and canonical not in detected:
                detected.append(canonical)
    return detected


def resolve_workout_signal(
    hints: List[str],
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> WorkoutDetection:
    """Workout detection for already-sanitized hints."""
    return WorkoutDetection(
        equipment=resolve_equipment(hints),
        level=resolve_level(hints),
        duration_minutes=resolve_duration(hints, config),
    )


def resolve_recipe_signal(
    hints: List[str],
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> RecipeDetection:
    """Recipe detection for already-sanitized hints."""
    return RecipeDetection(
        ingredients=resolve_ingredients(hints),
        max_time_minutes=resolve_recipe_max_time(hints, config),
    )
