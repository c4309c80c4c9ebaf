"""
Stored-payload helpers — decode recipe steps and nutrition facts.

Catalog rows keep these as JSON text (or already-decoded values). Anything that
does not decode to the expected shape is logged and treated as absent.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..models.recipe import RecipeItem, RecipeStep

logger = logging.getLogger(__name__)

_STEPS_ADAPTER = TypeAdapter(List[RecipeStep])


def _decode(raw: Any) -> Any:
    if isinstance(raw, str):
        if not raw.strip():
            return None
        return json.loads(raw)
    return raw


def parse_steps(recipe: RecipeItem) -> Optional[List[RecipeStep]]:
    """Decoded steps, or None when missing, empty, or malformed."""
    try:
        data = _decode(recipe.steps)
        if not data:
            return None
        steps = _STEPS_ADAPTER.validate_python(data)
    except (ValueError, ValidationError) as e:
        logger.warning(
            "[recipes] STEPS_PARSE_FAILED recipe=%r id=%s error=%s",
            recipe.title, recipe.id, e,
        )
        return None
    return steps or None


def parse_nutrition(recipe: RecipeItem) -> Optional[Dict[str, Any]]:
    """Decoded nutrition facts, or None when missing, empty, or malformed."""
    try:
        data = _decode(recipe.nutrition)
    except ValueError as e:
        logger.warning(
            "[recipes] NUTRITION_PARSE_FAILED recipe=%r id=%s error=%s",
            recipe.title, recipe.id, e,
        )
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(
            "[recipes] NUTRITION_PARSE_FAILED recipe=%r id=%s error=expected object, got %s",
            recipe.title, recipe.id, type(data).__name__,
        )
        return None
    return dict(data) or None
