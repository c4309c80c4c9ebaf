"""
Detection orchestration — normalize hints, record an audit entry, return the signal.

The audit write is best effort: persist_detection_audit turns any store failure
into an AuditOutcome, and the detect_* functions log and discard failed outcomes.
Detection therefore always returns a result.
"""

import logging
from typing import Iterable, Optional

from ..contracts import DetectionAuditStore
from ..models.config import RetrievalConfig, resolve_config
from ..models.detection import (
    RECIPE_AUDIT_KIND,
    WORKOUT_AUDIT_KIND,
    AuditOutcome,
    DetectionAudit,
    RecipeDetection,
    WorkoutDetection,
)
from .hints import resolve_recipe_signal, resolve_workout_signal, sanitize_hints

logger = logging.getLogger(__name__)


def persist_detection_audit(
    store: Optional[DetectionAuditStore],
    record: DetectionAudit,
) -> AuditOutcome:
    """Save record to store, reporting failure as a value instead of raising."""
    if store is None:
        return AuditOutcome(ok=True)
    try:
        store.save(record)
    except Exception as e:
        return AuditOutcome(ok=False, error=f"{type(e).__name__}: {e}")
    return AuditOutcome(ok=True)


def _record(store: Optional[DetectionAuditStore], record: DetectionAudit) -> None:
    outcome = persist_detection_audit(store, record)
    if not outcome.ok:
        logger.warning(
            "[audit] AUDIT_WRITE_FAILED kind=%s error=%s",
            record.kind, outcome.error,
        )


def detect_workout_context(
    hints: Optional[Iterable[object]],
    audit_store: Optional[DetectionAuditStore] = None,
    image_url: Optional[str] = None,
    config: Optional[RetrievalConfig] = None,
) -> WorkoutDetection:
    """
    Resolve equipment, level, and target duration from hints.

    Empty hints resolve to dumbbells / beginner / 20 minutes.
    """
    config = resolve_config(config)
    sanitized = sanitize_hints(hints)
    detection = resolve_workout_signal(sanitized, config)
    _record(
        audit_store,
        DetectionAudit(
            kind=WORKOUT_AUDIT_KIND,
            image_url=image_url or None,
            raw_hints=sanitized,
            normalized={
                "equipment": detection.equipment,
                "level": detection.level,
                "targetDurationMinutes": detection.duration_minutes,
            },
        ),
    )
    return detection


def detect_recipe_context(
    hints: Optional[Iterable[object]],
    audit_store: Optional[DetectionAuditStore] = None,
    image_url: Optional[str] = None,
    config: Optional[RetrievalConfig] = None,
) -> RecipeDetection:
    """Resolve detected ingredients and the time budget from hints."""
    config = resolve_config(config)
    sanitized = sanitize_hints(hints)
    detection = resolve_recipe_signal(sanitized, config)
    _record(
        audit_store,
        DetectionAudit(
            kind=RECIPE_AUDIT_KIND,
            image_url=image_url or None,
            raw_hints=sanitized,
            normalized={
                "ingredients": list(detection.ingredients),
                "maxTimeMinutes": detection.max_time_minutes,
            },
        ),
    )
    return detection
