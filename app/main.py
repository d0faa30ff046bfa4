# app/main.py
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.database import Database, init_db, insert_sample_data
from app.exceptions import DatabaseConnectionError
from app.routes import health_router, employee_router, company_list_router
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    # Startup
    try:
        await database.connect()
    except DatabaseConnectionError:
        logger.critical("Failed to connect to MongoDB", exc_info=True)
        raise
    await init_db(database.db)
    await insert_sample_data(database.db)
    yield
    # Shutdown
    await database.close()

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    missing = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    return JSONResponse(
        status_code=400,
        content={"detail": create_error_response(
            message="Name and email are required.",
            details=f"Invalid or missing fields: {', '.join(missing)}" if missing else None,
            example='{"name": "Ann Lee", "email": "ann@example.com", "department": "IT"}'
        )},
    )

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    if database is None:
        database = Database(settings.MONGO_URI, settings.MONGODB_DB_NAME, settings.MONGO_TIMEOUT_MS)

    app = FastAPI(title="Employee Management Service", lifespan=lifespan)
    app.state.database = database
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router, tags=["health"])
    app.include_router(employee_router, tags=["employees"])
    app.include_router(company_list_router, tags=["company-list"])
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
