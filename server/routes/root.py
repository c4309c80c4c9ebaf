"""Root and health endpoints."""

from fastapi import APIRouter, Depends

from ..state import AppState, get_state

router = APIRouter()


def _catalog_counts(state: AppState) -> dict:
    catalog = state.catalog
    return {
        "workouts": len(getattr(catalog, "workouts", []) or []),
        "recipes": len(getattr(catalog, "recipes", []) or []),
    }


@router.get("/")
def root(state: AppState = Depends(get_state)):
    return {
        "name": "Fitsnap Retrieval API",
        "version": "1.0.0",
        "status": "loaded" if state.is_loaded else "not_configured",
        "catalog": _catalog_counts(state),
        "endpoints": {
            "workouts": ["/api/v1/workouts/from-image", "/api/v1/workouts/search"],
            "recipes": ["/api/v1/recipes/from-image", "/api/v1/recipes/search"],
        },
    }


@router.get("/api/health")
def health(state: AppState = Depends(get_state)):
    return {
        "status": "healthy" if state.is_loaded else "degraded",
        "loaded": state.is_loaded,
        "catalog": type(state.catalog).__name__ if state.catalog is not None else None,
        "audit_store": type(state.audit_store).__name__,
    }
