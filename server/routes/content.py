"""Workout and recipe retrieval endpoints."""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from retrieval.errors import CatalogError
from retrieval.stages.detection import detect_recipe_context, detect_workout_context
from retrieval.stages.orchestrator import find_recipes, find_workouts

from ..models import (
    ImageRequest,
    RecipeResponse,
    RecipeSearchRequest,
    WorkoutResponse,
    WorkoutSearchRequest,
)
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_catalog(state: AppState):
    if not state.is_loaded:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return state.catalog


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _catalog_failure(e: Exception) -> HTTPException:
    logger.error("[content] CATALOG_FETCH_FAILED %s: %s", type(e).__name__, e)
    return HTTPException(status_code=503, detail="Catalog unavailable")


@router.post(
    "/workouts/from-image",
    response_model=WorkoutResponse,
    response_model_exclude_none=True,
)
def workouts_from_image(
    request: Optional[ImageRequest] = Body(default=None),
    state: AppState = Depends(get_state),
):
    """Detect equipment, level, and duration from hints, then recommend workouts."""
    start = time.perf_counter()
    catalog = _require_catalog(state)
    request = request or ImageRequest()
    detection = detect_workout_context(
        request.user_hints,
        audit_store=state.audit_store,
        image_url=request.image_url,
        config=state.retrieval_config,
    )
    try:
        workouts = find_workouts(
            catalog,
            detection.equipment,
            detection.level,
            detection.duration_minutes,
            state.retrieval_config,
        )
    except CatalogError as e:
        raise _catalog_failure(e)
    return WorkoutResponse(
        workouts=workouts,
        detected_equipment=detection.equipment,
        detected_level=detection.level,
        target_duration_minutes=detection.duration_minutes,
        latency_ms=_elapsed_ms(start),
    )


@router.post(
    "/recipes/from-image",
    response_model=RecipeResponse,
    response_model_exclude_none=True,
)
def recipes_from_image(
    request: Optional[ImageRequest] = Body(default=None),
    state: AppState = Depends(get_state),
):
    """Detect ingredients and a time budget from hints, then recommend recipes."""
    start = time.perf_counter()
    catalog = _require_catalog(state)
    request = request or ImageRequest()
    detection = detect_recipe_context(
        request.user_hints,
        audit_store=state.audit_store,
        image_url=request.image_url,
        config=state.retrieval_config,
    )
    try:
        recipes = find_recipes(
            catalog,
            detection.ingredients,
            detection.max_time_minutes,
            state.retrieval_config,
        )
    except CatalogError as e:
        raise _catalog_failure(e)
    return RecipeResponse(
        recipes=recipes,
        detected_ingredients=list(detection.ingredients),
        max_time_minutes=detection.max_time_minutes,
        latency_ms=_elapsed_ms(start),
    )


@router.post(
    "/workouts/search",
    response_model=WorkoutResponse,
    response_model_exclude_none=True,
)
def search_workouts(request: WorkoutSearchRequest, state: AppState = Depends(get_state)):
    """Recommend workouts for explicit equipment, level, and duration."""
    start = time.perf_counter()
    catalog = _require_catalog(state)
    try:
        workouts = find_workouts(
            catalog,
            request.equipment,
            request.level,
            request.duration_preference,
            state.retrieval_config,
        )
    except CatalogError as e:
        raise _catalog_failure(e)
    return WorkoutResponse(workouts=workouts, latency_ms=_elapsed_ms(start))


@router.post(
    "/recipes/search",
    response_model=RecipeResponse,
    response_model_exclude_none=True,
)
def search_recipes(request: RecipeSearchRequest, state: AppState = Depends(get_state)):
    """Recommend recipes for explicit ingredients and a time budget."""
    start = time.perf_counter()
    catalog = _require_catalog(state)
    try:
        recipes = find_recipes(
            catalog,
            request.ingredients,
            request.max_time,
            state.retrieval_config,
        )
    except CatalogError as e:
        raise _catalog_failure(e)
    return RecipeResponse(recipes=recipes, latency_ms=_elapsed_ms(start))
