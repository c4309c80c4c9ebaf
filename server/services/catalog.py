"""
Content catalogs.

Implementations of the ContentCatalog contract used by the retrieval core:
InMemoryCatalog (tests, fixtures) and JsonCatalog (a JSON document with
"workouts" and "recipes" arrays). Rows are validated once at load time;
invalid rows are logged and skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from retrieval.errors import CatalogUnavailableError
from retrieval.models.recipe import RecipeItem
from retrieval.models.workout import WorkoutItem
from retrieval.stages.workout_ranking import filter_by_equipment

logger = logging.getLogger(__name__)


def _validated(rows: List[Any], model, kind: str) -> list:
    items = []
    for idx, row in enumerate(rows or []):
        if isinstance(row, model):
            items.append(row)
            continue
        try:
            items.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(
                "[catalog] INVALID_ROW kind=%s index=%s errors=%s",
                kind, idx, e.error_count(),
            )
    return items


class InMemoryCatalog:
    """Catalog over in-memory lists of workouts and recipes."""

    def __init__(
        self,
        workouts: Optional[List[Union[Dict, WorkoutItem]]] = None,
        recipes: Optional[List[Union[Dict, RecipeItem]]] = None,
    ):
        self._workouts: List[WorkoutItem] = _validated(workouts or [], WorkoutItem, "workout")
        self._recipes: List[RecipeItem] = _validated(recipes or [], RecipeItem, "recipe")

    @property
    def workouts(self) -> List[WorkoutItem]:
        return list(self._workouts)

    @property
    def recipes(self) -> List[RecipeItem]:
        return list(self._recipes)

    def fetch_workouts_by_equipment(self, equipment: str) -> List[WorkoutItem]:
        return filter_by_equipment(self._workouts, equipment)

    def fetch_recipes_by_any_ingredient(self, names: List[str]) -> List[RecipeItem]:
        wanted = {n.strip().lower() for n in names if isinstance(n, str) and n.strip()}
        if not wanted:
            return []
        return [r for r in self._recipes if wanted.intersection(r.ingredients)]

    def fetch_recipes_by_time_and_difficulty(
        self,
        max_time: int,
        difficulty: str,
    ) -> List[RecipeItem]:
        return [r for r in self._recipes if r.is_quick_and_easy(max_time, difficulty)]


class JsonCatalog(InMemoryCatalog):
    """Catalog loaded from a JSON file: {"workouts": [...], "recipes": [...]}."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogUnavailableError(str(self._path), f"Catalog file unreadable ({e})") from e
        if not isinstance(data, dict):
            raise CatalogUnavailableError(str(self._path), "Catalog file must hold a JSON object")
        super().__init__(data.get("workouts", []), data.get("recipes", []))
        logger.info(
            "[catalog] loaded %s workouts, %s recipes from %s",
            len(self._workouts), len(self._recipes), self._path,
        )

    @property
    def path(self) -> Path:
        return self._path
