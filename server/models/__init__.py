"""Pydantic request/response models for the API."""

from .content import (
    ImageRequest,
    RecipeResponse,
    RecipeSearchRequest,
    WorkoutResponse,
    WorkoutSearchRequest,
)

__all__ = [
    "ImageRequest",
    "RecipeResponse",
    "RecipeSearchRequest",
    "WorkoutResponse",
    "WorkoutSearchRequest",
]
