from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mealplanner.api.routes import meals, plan, shopping
from mealplanner.domain.Errors import LogicError, NotFoundError, StorageError, ValidationError
from mealplanner.infra.Database import open_database
from mealplanner.utilities.config import EXPORT_DIR, MEALS_DB_PATH

# Logging
logger = logging.getLogger("meal_app")

ERROR_STATUS = (
    (ValidationError, 422),
    (NotFoundError, 404),
    (LogicError, 409),
    (StorageError, 500),
)


def _error_handler(status_code: int):
    def handler(request: Request, exc: Exception):
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        else:
            logger.info(f"{request.method} {request.url.path} rejected: {exc}")
        return JSONResponse(status_code=status_code, content={"error": str(exc)})
    return handler


def create_app(db_path: Optional[Union[str, Path]] = None,
               export_dir: Optional[Union[str, Path]] = None) -> FastAPI:
    """Build the Meal Planner API bound to one SQLite database file.

    Each request opens its own connection to ``db_path``; the schema is created on startup.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A StorageError here stops the server before it accepts requests
        conn = open_database(app.state.db_path)
        conn.close()
        logger.info(f"Using database {app.state.db_path}")
        yield

    app = FastAPI(title="Meal Planner API", lifespan=lifespan)
    app.state.db_path = str(db_path if db_path is not None else MEALS_DB_PATH)
    app.state.export_dir = str(export_dir if export_dir is not None else EXPORT_DIR)

    app.include_router(meals.router)
    app.include_router(plan.router)
    app.include_router(shopping.router)

    for exc_class, status_code in ERROR_STATUS:
        app.add_exception_handler(exc_class, _error_handler(status_code))

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    return app


# Initialize FastAPI app
app = create_app()
