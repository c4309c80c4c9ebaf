"""Shared helpers for duration parsing and stored-payload decoding."""

from .durations import clamp_minutes, first_minutes, parse_minutes
from .payloads import parse_nutrition, parse_steps

__all__ = [
    "clamp_minutes",
    "first_minutes",
    "parse_minutes",
    "parse_nutrition",
    "parse_steps",
]
