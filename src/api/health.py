"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, object]:
    """Return application health and the loaded catalog size."""
    item_service = getattr(request.app.state, "item_service", None)
    if item_service is None:
        return {"status": "error", "catalog_items": 0}
    return {"status": "ok", "catalog_items": item_service.catalog.count()}
