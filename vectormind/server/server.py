import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..api import health_router, embeddings_router, search_router, chunking_router
from ..config import Config, load_config
from ..core.vector_service import VectorService
from ..embedding.embedder import Embedder
from ..exceptions import (
    VectorMindError,
    InvalidArgumentError,
    NoChunksError,
    ProviderError,
    StorageError,
)
from ..logger import setup_logging
from ..storage.redis_client import RedisVectorStore

logger = logging.getLogger(__name__)


class ServerState:
    """State container for the initialized clients and config"""

    def __init__(self, config: Config):
        self.config: Config = config
        self.embedder: Optional[Embedder] = None
        self.vector_store: Optional[RedisVectorStore] = None
        self.vector_service: Optional[VectorService] = None


async def initialize_state(config: Config) -> ServerState:
    """Create the embedder, connect to Redis and ensure the index exists"""
    state = ServerState(config)

    try:
        logger.info("Initializing embedder...")
        state.embedder = Embedder(config.embedding)
        logger.info("✓ Embedder ready")
    except Exception as e:
        logger.error(f"Failed to initialize embedder: {e}")
        raise

    try:
        logger.info("Initializing Redis vector store...")
        state.vector_store = RedisVectorStore(config.redis, config.embedding.dimension)
        await state.vector_store.connect()
        await state.vector_store.initialize()
        logger.info("✓ Redis vector store connected and index ready")
    except Exception as e:
        logger.error(f"Failed to initialize Redis vector store: {e}")
        raise

    state.vector_service = VectorService(config, state.embedder, state.vector_store)
    return state


async def shutdown_state(state: ServerState):
    if state.vector_store:
        await state.vector_store.close()
    if state.embedder:
        await state.embedder.close()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def register_exception_handlers(app: FastAPI):
    """Map service errors to JSON error bodies"""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(400, f"Invalid request body: {exc}")

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return _error_response(400, str(exc))

    @app.exception_handler(NoChunksError)
    async def no_chunks_handler(request: Request, exc: NoChunksError):
        return _error_response(400, str(exc))

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.error(f"Embedding provider failure: {exc}")
        return _error_response(500, f"Failed to create embedding: {exc}")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Vector store failure: {exc}")
        return _error_response(500, f"Storage failure: {exc}")

    @app.exception_handler(VectorMindError)
    async def vectormind_error_handler(request: Request, exc: VectorMindError):
        logger.error(f"Request failed: {exc}")
        return _error_response(500, str(exc))


def create_app(config: Optional[Config] = None, state: Optional[ServerState] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: Service configuration (loaded from the environment when omitted)
        state: Pre-built state; startup initialization is skipped when given

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "server_state", None) is not None:
            yield
            return

        logger.info("Starting server initialization...")
        server_state = await initialize_state(config or load_config())
        app.state.server_state = server_state

        logger.info("=" * 60)
        logger.info("✓ Server initialization complete!")
        logger.info("=" * 60)

        yield

        logger.info("Shutting down server...")
        await shutdown_state(server_state)

    app = FastAPI(
        title="VectorMind API",
        description="Text RAG store: embeddings, document splitting and similarity search on Redis",
        version="1.0.0",
        lifespan=lifespan
    )

    if state is not None:
        app.state.server_state = state

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(embeddings_router)
    app.include_router(search_router)
    app.include_router(chunking_router)

    return app


def run(config: Config, host: Optional[str] = None, port: Optional[int] = None):
    """Serve the API with uvicorn"""
    import uvicorn

    app = create_app(config)
    uvicorn.run(
        app,
        host=host or config.server.host,
        port=port or config.server.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    config = load_config()
    setup_logging(config.log_level)
    run(config)
