"""
Health check endpoints for the API.
"""

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Health check with component status"""
    state = getattr(request.app.state, "server_state", None)
    if state is None:
        return {
            "status": "starting",
            "server": "vectormind-server"
        }

    return {
        "status": "healthy",
        "server": "vectormind-server",
        "components": {
            "embedder": "loaded" if state.embedder else "failed",
            "vector_store": "connected" if state.vector_store else "failed",
        }
    }
