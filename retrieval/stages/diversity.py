"""
Body-part diversity — greedy two-pass selection over a ranked workout list.

Pass 1 walks the ranking and takes at most one workout per primary body part.
Pass 2 fills the remaining slots in ranking order, ignoring body parts.
Selection order is preserved and each workout id is taken at most once.
"""

from typing import List, Set

from ..models.scoring import ScoredWorkout


def select_diverse_workouts(
    scored_list: List[ScoredWorkout],
    k: int = 4,
) -> List[ScoredWorkout]:
    """
    Select up to k workouts, spreading picks across primary body parts first.

    Args:
        scored_list: Candidates sorted best first. Not mutated.
        k: Number to select.

    Returns:
        Ordered list of up to k ScoredWorkouts.
    """
    if k <= 0:
        return []

    selected: List[ScoredWorkout] = []
    chosen_ids: Set[str] = set()
    seen_body_parts: Set[str] = set()

    for scored in scored_list:
        if len(selected) >= k:
            break
        workout = scored.workout
        body_part = workout.primary_body_part
        if not workout.id or workout.id in chosen_ids:
            continue
        if body_part is None or body_part in seen_body_parts:
            continue
        seen_body_parts.add(body_part)
        selected.append(scored)
        chosen_ids.add(workout.id)

    for scored in scored_list:
        if len(selected) >= k:
            break
        workout = scored.workout
        if not workout.id or workout.id in chosen_ids:
            continue
        selected.append(scored)
        chosen_ids.add(workout.id)

    return selected
