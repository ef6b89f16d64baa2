from fastapi import HTTPException, Request

from ..core.vector_service import VectorService


def get_vector_service(request: Request) -> VectorService:
    """Return the service built at startup, or fail with 503 while starting"""
    state = getattr(request.app.state, "server_state", None)
    if state is None or state.vector_service is None:
        raise HTTPException(
            status_code=503,
            detail="Server not properly initialized"
        )
    return state.vector_service
