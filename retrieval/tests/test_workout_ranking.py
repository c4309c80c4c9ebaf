#!/usr/bin/env python3
"""
Workout Ranking Tests

Tests the workout ranker: duration-tolerance pool, blended score, tie-breaks,
and the two-pass body-part diversity selection.

Scoring:
--------
- base 1.0
- +0.5 within +/-5 minutes of the preference
- +0.3 exact level match
- +0.2 * view_count / max view_count in pool

Run:
----
    pytest retrieval/tests/test_workout_ranking.py -v
"""

import pytest

from retrieval.models.config import RetrievalConfig
from retrieval.models.scoring import ScoredWorkout
from retrieval.models.workout import WorkoutItem, ensure_workouts
from retrieval.stages.diversity import select_diverse_workouts
from retrieval.stages.workout_ranking import (
    filter_by_equipment,
    rank_workouts,
    score_workouts,
)


def _workout(wid, duration=20, level="beginner", body="chest", views=100, equipment=("dumbbells",)):
    return WorkoutItem(
        id=wid,
        title=f"Workout {wid}",
        duration_minutes=duration,
        level=level,
        equipment=list(equipment),
        body_parts=[body] if body else [],
        view_count=views,
    )


@pytest.fixture
def dumbbell_pool():
    """Six dumbbell workouts in [15, 25] minutes across three body parts, plus one long one."""
    return [
        _workout("db-chest-1", 20, "beginner", "chest", 900),
        _workout("db-chest-2", 22, "beginner", "chest", 800),
        _workout("db-legs-1", 18, "beginner", "legs", 500),
        _workout("db-legs-2", 25, "intermediate", "legs", 1000),
        _workout("db-back-1", 15, "beginner", "back", 300),
        _workout("db-back-2", 21, "advanced", "back", 50),
        _workout("db-long", 60, "beginner", "full body", 5000),
    ]


class TestWorkoutItem:
    def test_tags_normalized(self):
        w = WorkoutItem(id=" abc ", equipment=["Dumbbells", "dumbbells", " "], body_parts=["Chest", "Arms"])
        assert w.id == "abc"
        assert w.equipment == ["dumbbells"]
        assert w.body_parts == ["chest", "arms"]
        assert w.primary_body_part == "chest"

    def test_blank_id_rejected(self):
        with pytest.raises(ValueError):
            WorkoutItem(id="   ")

    def test_has_equipment(self):
        w = WorkoutItem(id="x", equipment=["Kettlebell"])
        assert w.has_equipment(" KETTLEBELL ")
        assert not w.has_equipment("mat")

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            WorkoutItem(id="x", level="expert")

    def test_absent_duration_and_level_stay_absent(self):
        w = WorkoutItem(id="x")
        assert w.duration_minutes is None
        assert w.level is None

    def test_camel_case_rows_accepted(self):
        [w] = ensure_workouts([{"id": "yt1", "durationMinutes": 12, "bodyParts": ["core"], "viewCount": 7}])
        assert (w.duration_minutes, w.body_parts, w.view_count) == (12, ["core"], 7)


class TestEquipmentFilter:
    def test_membership_is_case_insensitive(self, dumbbell_pool):
        mat = _workout("mat-1", equipment=("mat",))
        assert filter_by_equipment(dumbbell_pool + [mat], "MAT") == [mat]

    def test_blank_equipment_matches_nothing(self, dumbbell_pool):
        assert filter_by_equipment(dumbbell_pool, "  ") == []


class TestScoring:
    def test_duration_pool_excludes_out_of_tolerance(self, dumbbell_pool):
        scored = score_workouts(dumbbell_pool, "beginner", 20)
        ids = {s.workout.id for s in scored}
        assert "db-long" not in ids
        assert all(s.within_tolerance for s in scored)

    def test_falls_back_to_full_pool_on_duration_miss(self):
        pool = [_workout("a", 60), _workout("b", 45)]
        scored = score_workouts(pool, "beginner", 20)
        assert {s.workout.id for s in scored} == {"a", "b"}
        assert not any(s.within_tolerance for s in scored)

    def test_score_components(self):
        pool = [
            _workout("top", 20, "beginner", views=1000),
            _workout("half", 20, "advanced", views=500),
        ]
        top, half = score_workouts(pool, "beginner", 20)
        assert top.workout.id == "top"
        assert top.final_score == pytest.approx(1.0 + 0.5 + 0.3 + 0.2)
        assert half.final_score == pytest.approx(1.0 + 0.5 + 0.1)

    def test_zero_views_gives_no_popularity(self):
        scored = score_workouts([_workout("a", views=0), _workout("b", views=None)], "beginner", 20)
        assert all(s.popularity_score == 0.0 for s in scored)

    def test_level_match_is_case_insensitive(self):
        [scored] = score_workouts([_workout("a", level="intermediate")], "Intermediate", 20)
        assert scored.level_match

    def test_ties_break_on_duration_delta_then_views(self):
        pool = [
            _workout("far", 24, views=0),
            _workout("near-low", 21, views=0),
            _workout("near-high", 19, views=0),
        ]
        # Equal scores: closer duration first.
        ordered = [s.workout.id for s in score_workouts(pool, "beginner", 20)]
        assert ordered[-1] == "far"
        assert set(ordered[:2]) == {"near-low", "near-high"}

    def test_missing_duration_never_matches(self):
        pool = [_workout("known", 40), WorkoutItem(id="unknown", level="beginner", equipment=["dumbbells"])]
        scored = score_workouts(pool, "beginner", 20)
        assert [s.workout.id for s in scored] == ["known", "unknown"]
        assert scored[1].duration_delta is None


class TestDiversity:
    def _scored(self, workouts):
        return [
            ScoredWorkout(
                workout=w,
                within_tolerance=True,
                level_match=True,
                popularity_score=0.0,
                final_score=10.0 - i,
            )
            for i, w in enumerate(workouts)
        ]

    def test_first_pass_one_per_body_part(self):
        ranked = self._scored([
            _workout("c1", body="chest"),
            _workout("c2", body="chest"),
            _workout("l1", body="legs"),
            _workout("b1", body="back"),
            _workout("a1", body="arms"),
        ])
        assert [s.workout.id for s in select_diverse_workouts(ranked, 4)] == ["c1", "l1", "b1", "a1"]

    def test_second_pass_fills_in_rank_order(self):
        ranked = self._scored([
            _workout("c1", body="chest"),
            _workout("c2", body="chest"),
            _workout("l1", body="legs"),
            _workout("c3", body="chest"),
        ])
        assert [s.workout.id for s in select_diverse_workouts(ranked, 4)] == ["c1", "l1", "c2", "c3"]

    def test_no_body_part_only_in_second_pass(self):
        ranked = self._scored([_workout("nobody", body=None), _workout("legs", body="legs")])
        assert [s.workout.id for s in select_diverse_workouts(ranked, 4)] == ["legs", "nobody"]

    def test_duplicate_ids_suppressed(self):
        ranked = self._scored([_workout("same", body="chest"), _workout("same", body="legs")])
        assert [s.workout.id for s in select_diverse_workouts(ranked, 4)] == ["same"]

    def test_zero_k(self):
        assert select_diverse_workouts(self._scored([_workout("a")]), 0) == []


class TestRankWorkouts:
    def test_four_diverse_cards(self, dumbbell_pool):
        cards = rank_workouts(dumbbell_pool, "beginner", 20)
        assert len(cards) == 4
        for card in cards:
            assert "dumbbells" in card.equipment
            assert 15 <= card.duration_minutes <= 25
        assert len({card.body_parts[0] for card in cards}) >= 2

    def test_empty_pool_no_fallback(self):
        assert rank_workouts([], "beginner", 20) == []

    def test_smaller_pool_returns_fewer(self):
        assert len(rank_workouts([_workout("a"), _workout("b", body="legs")], "beginner", 20)) == 2

    def test_cards_carry_canonical_url(self):
        [card] = rank_workouts([_workout("abc123")], "beginner", 20)
        assert card.canonical_url == "https://www.youtube.com/watch?v=abc123"

    def test_custom_limit(self, dumbbell_pool):
        config = RetrievalConfig(workout_result_limit=2)
        assert len(rank_workouts(dumbbell_pool, "beginner", 20, config)) == 2

    def test_idempotent(self, dumbbell_pool):
        first = rank_workouts(dumbbell_pool, "beginner", 20)
        second = rank_workouts(dumbbell_pool, "beginner", 20)
        assert [c.model_dump() for c in first] == [c.model_dump() for c in second]

    def test_ids_come_from_pool(self, dumbbell_pool):
        pool_ids = {w.id for w in dumbbell_pool}
        cards = rank_workouts(dumbbell_pool, "beginner", 20)
        assert all(card.id in pool_ids for card in cards)
        assert len({card.id for card in cards}) == len(cards)
