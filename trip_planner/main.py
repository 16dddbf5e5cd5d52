from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from trip_planner.config import settings
from trip_planner.logging_config import configure_logging
from trip_planner.journeys import router as journeys_router
from trip_planner.stations import router as stations_router
from trip_planner.routes.index import DatasetError, RouteIndex, load_route_index

logger = logging.getLogger(__name__)


def load_dataset(data_dir: Path) -> RouteIndex:
    """Load the route index, degrading to an empty index unless the dataset is required"""
    try:
        return load_route_index(data_dir)
    except DatasetError:
        logger.exception(f"Error loading data from {data_dir}")
        if settings.REQUIRE_DATASET:
            raise
        logger.warning("Continuing with an empty route index; every search will return no routes")
        return RouteIndex.empty()


def create_app(data_dir: Optional[Path] = None) -> FastAPI:
    data_dir = Path(data_dir) if data_dir is not None else settings.DATA_DIR

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.route_index = load_dataset(data_dir)
        yield

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Bus and train trip planner with up to two transfers",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        journeys_router,
        prefix=settings.API_PREFIX,
        tags=["Journey Planning"]
    )

    app.include_router(
        stations_router.router,
        prefix=settings.API_PREFIX,
        tags=["Stations"]
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        index = getattr(app.state, "route_index", None)
        return {
            "status": "healthy",
            "routes_loaded": len(index) if index is not None else 0
        }

    return app


configure_logging(settings.LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
