# routers/status.py
from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/status")
def api_status(request: Request):
    """Liveness check plus the base URL clients should use."""
    return {
        "status": "API is running",
        "apiUrl": f"{str(request.base_url).rstrip('/')}/api",
    }
