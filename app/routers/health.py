from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/")
@router.get("/health")
def read_health(request: Request) -> dict[str, str]:
    """Readiness probe reporting the running service and version."""
    return {
        "status": "ok",
        "service": request.app.title,
        "version": request.app.version,
    }
