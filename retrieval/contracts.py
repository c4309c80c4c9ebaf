"""
Collaborator contracts the retrieval core consumes but does not implement.

ContentCatalog supplies catalog snapshots for one request; DetectionAuditStore
keeps detection audit records. Implementations live with the host application
(see server/services).
"""

from typing import Any, Dict, List, Protocol, Union

from .models.detection import DetectionAudit
from .models.recipe import RecipeItem
from .models.workout import WorkoutItem

WorkoutRow = Union[Dict[str, Any], WorkoutItem]
RecipeRow = Union[Dict[str, Any], RecipeItem]


class ContentCatalog(Protocol):
    """Protocol for read-only catalog queries. Implement for in-memory, JSON, or a database."""

    def fetch_workouts_by_equipment(self, equipment: str) -> List[WorkoutRow]:
        """Workouts whose equipment tags contain equipment (case-insensitive)."""
        ...

    def fetch_recipes_by_any_ingredient(self, names: List[str]) -> List[RecipeRow]:
        """Recipes sharing at least one ingredient with names."""
        ...

    def fetch_recipes_by_time_and_difficulty(
        self,
        max_time: int,
        difficulty: str,
    ) -> List[RecipeRow]:
        """Recipes taking at most max_time minutes with the given difficulty (case-insensitive)."""
        ...


class DetectionAuditStore(Protocol):
    """Protocol for best-effort persistence of detection audit records."""

    def save(self, record: DetectionAudit) -> None:
        """Persist one record. May raise; callers treat failures as non-fatal."""
        ...
