"""Main FastAPI application for Document Service."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config.settings import get_settings, Settings
from .core.document_store import DocumentStore
from .api.dependencies import get_document_store
from .api.routes import documents
from .models.requests import HealthResponse

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        store: Store to serve; a new one is created at startup when omitted
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(f"Starting {settings.service_name} v{__version__}")

        if store is None:
            app.state.document_store = DocumentStore(seed=settings.seed_sample_data)
        else:
            app.state.document_store = store
        logger.info(f"Document store ready with {app.state.document_store.count()} documents")

        yield

        logger.info("Shutdown complete")

    app = FastAPI(
        title="FM Document Service",
        description="Microservice for workspace documents with JSON block content",
        version=__version__,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(documents.router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(doc_store: DocumentStore = Depends(get_document_store)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service=settings.service_name,
            version=__version__,
            document_count=doc_store.count()
        )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": __version__,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "document_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development"
    )
