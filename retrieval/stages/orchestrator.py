"""
Retrieval orchestrator — fetch the candidate pool from the catalog, then rank.

find_workouts and find_recipes are what the HTTP layer calls after detection.
Catalog exceptions propagate; ranking itself never raises.
"""

import logging
from typing import Iterable, List, Optional

from ..contracts import ContentCatalog
from ..models.cards import RecipeCard, WorkoutCard
from ..models.config import RetrievalConfig, resolve_config
from ..models.recipe import ensure_recipes
from ..models.workout import ensure_workouts
from .recipe_ranking import normalize_detected, rank_recipes
from .workout_ranking import filter_by_equipment, rank_workouts

logger = logging.getLogger(__name__)


def find_workouts(
    catalog: ContentCatalog,
    equipment: Optional[str],
    level: Optional[str],
    duration_preference: int,
    config: Optional[RetrievalConfig] = None,
) -> List[WorkoutCard]:
    """Up to workout_result_limit cards for the equipment; empty when nothing carries it."""
    config = resolve_config(config)
    wanted = (equipment or "").strip().lower()
    if not wanted:
        logger.warning("[workouts] NO_EQUIPMENT equipment not provided; returning no workouts")
        return []
    rows = catalog.fetch_workouts_by_equipment(wanted)
    # Re-apply the membership filter so a loose catalog query cannot leak other equipment.
    candidates = filter_by_equipment(ensure_workouts(rows), wanted)
    return rank_workouts(candidates, level, duration_preference, config)


def find_recipes(
    catalog: ContentCatalog,
    ingredients: Optional[Iterable[object]],
    max_time: int,
    config: Optional[RetrievalConfig] = None,
) -> List[RecipeCard]:
    """Up to recipe_result_limit cards, ingredient matches first, quick-and-easy fallback after."""
    config = resolve_config(config)
    detected = normalize_detected(ingredients or [])
    fallback_pool = ensure_recipes(
        catalog.fetch_recipes_by_time_and_difficulty(
            config.fallback_max_time_minutes, config.fallback_difficulty
        )
    )
    candidates = (
        ensure_recipes(catalog.fetch_recipes_by_any_ingredient(detected)) if detected else []
    )
    return rank_recipes(candidates, detected, max_time, fallback_pool, config)
