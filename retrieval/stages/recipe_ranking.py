"""
Recipe ranking: ingredient-overlap scoring with a quick-and-easy fallback pool.

Candidates arrive already matched on at least one ingredient (catalog query);
the fallback pool is the catalog's quick-and-easy recipes. Both are re-checked
here, so the ranker alone guarantees its output contract.

The public entry points are normalize_detected, score_recipes and rank_recipes.
"""

import logging
from typing import Iterable, List, Set

from ..models.cards import RecipeCard
from ..models.config import RetrievalConfig, DEFAULT_CONFIG
from ..models.recipe import RecipeItem
from ..models.scoring import ScoredRecipe
from ..utils.payloads import parse_nutrition, parse_steps

logger = logging.getLogger(__name__)


def normalize_detected(detected: Iterable[object]) -> List[str]:
    """Lowercase, trim, drop blanks, de-duplicate; first-seen order kept."""
    names: List[str] = []
    for raw in detected or []:
        if not isinstance(raw, str):
            continue
        name = raw.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


def fallback_recipes(
    pool: List[RecipeItem],
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> List[RecipeItem]:
    """Quick-and-easy recipes from pool, fastest first."""
    quick = [
        r for r in pool
        if r.is_quick_and_easy(config.fallback_max_time_minutes, config.fallback_difficulty)
    ]
    return sorted(quick, key=lambda r: r.time_minutes)


def _difficulty_key(difficulty: str):
    # Empty difficulty sorts after every named one.
    value = difficulty.lower()
    return (value == "", value)


def score_recipes(
    candidates: List[RecipeItem],
    detected: List[str],
    max_time: int,
) -> List[ScoredRecipe]:
    """
    Recipes within the time budget that share ingredients with detected, best first.

    Score is the number of the recipe's ingredients in detected. max_time <= 0 means
    no time limit. Ties: faster first, then difficulty name (empty last).
    """
    detected_set = set(detected)
    scored: List[ScoredRecipe] = []
    for recipe in candidates:
        if max_time > 0 and recipe.time_minutes > max_time:
            continue
        matches = sum(1 for name in recipe.ingredients if name in detected_set)
        if matches == 0:
            continue
        scored.append(ScoredRecipe(recipe=recipe, match_count=matches))
    scored.sort(
        key=lambda s: (-s.match_count, s.recipe.time_minutes, _difficulty_key(s.recipe.difficulty))
    )
    return scored


def _add_unique(selected: List[RecipeItem], seen: Set[str], recipe: RecipeItem) -> None:
    key = recipe.dedupe_key
    if key is None or key in seen:
        return
    selected.append(recipe)
    seen.add(key)


def to_recipe_card(recipe: RecipeItem) -> RecipeCard:
    return RecipeCard(
        id=recipe.id,
        title=recipe.title,
        time_minutes=recipe.time_minutes,
        difficulty=recipe.difficulty,
        image_url=recipe.image_url,
        steps=parse_steps(recipe),
        nutrition=parse_nutrition(recipe),
    )


def rank_recipes(
    candidates: List[RecipeItem],
    detected_ingredients: Iterable[object],
    max_time: int,
    fallback_pool: List[RecipeItem],
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> List[RecipeCard]:
    """
    Up to recipe_result_limit recipe cards.

    No detected ingredients: the fastest quick-and-easy recipes.
    Otherwise: best ingredient matches, topped up from the quick-and-easy pool
    when fewer than the limit matched.
    """
    limit = config.recipe_result_limit
    detected = normalize_detected(detected_ingredients)
    fallback = fallback_recipes(fallback_pool, config)

    selected: List[RecipeItem] = []
    seen: Set[str] = set()

    if detected:
        for scored in score_recipes(candidates, detected, max_time):
            if len(selected) >= limit:
                break
            _add_unique(selected, seen, scored.recipe)
        if len(selected) < limit:
            logger.debug(
                "[recipes] FALLBACK_TOP_UP matched=%s limit=%s fallback_pool=%s",
                len(selected), limit, len(fallback),
            )

    for recipe in fallback:
        if len(selected) >= limit:
            break
        _add_unique(selected, seen, recipe)

    return [to_recipe_card(r) for r in selected]
