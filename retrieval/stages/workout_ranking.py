"""
Workout ranking: duration-tolerance pool, blended score, diversity selection.

Candidates arrive already filtered by equipment (a hard filter applied by the
catalog query, see filter_by_equipment). Ranking never widens that pool:
an empty candidate list yields no cards.

The public entry points are score_workouts and rank_workouts.
"""

import logging
from typing import List, Optional

from ..models.cards import WorkoutCard
from ..models.config import RetrievalConfig, DEFAULT_CONFIG
from ..models.scoring import ScoredWorkout
from ..models.workout import WorkoutItem
from .diversity import select_diverse_workouts

logger = logging.getLogger(__name__)


def filter_by_equipment(workouts: List[WorkoutItem], equipment: str) -> List[WorkoutItem]:
    """Workouts tagged with the given equipment (case-insensitive membership)."""
    wanted = (equipment or "").strip().lower()
    if not wanted:
        return []
    return [w for w in workouts if w.has_equipment(wanted)]


def _duration_delta(workout: WorkoutItem, preference: int) -> Optional[int]:
    if workout.duration_minutes is None:
        return None
    return abs(workout.duration_minutes - preference)


def _within_tolerance(delta: Optional[int], config: RetrievalConfig) -> bool:
    return delta is not None and delta <= config.duration_tolerance_minutes


def _level_matches(workout: WorkoutItem, level: Optional[str]) -> bool:
    if not level or not workout.level:
        return False
    return workout.level == level.strip().lower()


def _duration_pool(
    candidates: List[WorkoutItem],
    duration_preference: int,
    config: RetrievalConfig,
) -> List[WorkoutItem]:
    """Items within tolerance; the full pool when none are."""
    matches = [
        w for w in candidates
        if _within_tolerance(_duration_delta(w, duration_preference), config)
    ]
    if not matches:
        logger.debug(
            "[workouts] DURATION_FALLBACK preference=%s pool=%s",
            duration_preference, len(candidates),
        )
        return list(candidates)
    return matches


def _sort_key(scored: ScoredWorkout):
    delta = scored.duration_delta if scored.duration_delta is not None else float("inf")
    return (-scored.final_score, delta, -(scored.workout.view_count or 0))


def score_workouts(
    candidates: List[WorkoutItem],
    level: Optional[str],
    duration_preference: int,
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> List[ScoredWorkout]:
    """
    Score the duration pool and sort it (best first).

    score = base + duration bonus (within tolerance) + level bonus (exact level)
            + popularity share of view_count / max view_count in the pool.
    Ties: smaller duration delta, then higher view count.
    """
    pool = _duration_pool(candidates, duration_preference, config)
    max_views = max((w.view_count or 0 for w in pool), default=0)

    scored: List[ScoredWorkout] = []
    for workout in pool:
        delta = _duration_delta(workout, duration_preference)
        in_tolerance = _within_tolerance(delta, config)
        level_match = _level_matches(workout, level)
        popularity = (
            config.score_popularity_max * (workout.view_count or 0) / max_views
            if max_views > 0 else 0.0
        )
        final = config.score_base + popularity
        if in_tolerance:
            final += config.score_duration_bonus
        if level_match:
            final += config.score_level_bonus
        scored.append(
            ScoredWorkout(
                workout=workout,
                within_tolerance=in_tolerance,
                level_match=level_match,
                popularity_score=popularity,
                final_score=final,
                duration_delta=delta,
            )
        )
    scored.sort(key=_sort_key)
    return scored


def to_workout_card(workout: WorkoutItem, config: RetrievalConfig = DEFAULT_CONFIG) -> WorkoutCard:
    return WorkoutCard(
        id=workout.id,
        title=workout.title,
        duration_minutes=workout.duration_minutes,
        level=workout.level,
        equipment=list(workout.equipment),
        body_parts=list(workout.body_parts),
        thumbnail_url=workout.thumbnail_url,
        view_count=workout.view_count,
        canonical_url=config.canonical_url_template.format(id=workout.id),
    )


def rank_workouts(
    candidates: List[WorkoutItem],
    level: Optional[str],
    duration_preference: int,
    config: RetrievalConfig = DEFAULT_CONFIG,
) -> List[WorkoutCard]:
    """Ordered, body-part-diverse workout cards (at most workout_result_limit)."""
    if not candidates:
        return []
    scored = score_workouts(candidates, level, duration_preference, config)
    selected = select_diverse_workouts(scored, config.workout_result_limit)
    return [to_workout_card(s.workout, config) for s in selected]
