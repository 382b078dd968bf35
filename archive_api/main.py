# archive_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from archive_api.core.config import LOG_LEVEL
from archive_api.core.database import dispose_db, init_db
from archive_api.core.exceptions import CatalogError
from archive_api.core.storage import get_file_store
from archive_api.routers import auth, file, metrics, search, taxonomy

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables and the content area once, release the pool on shutdown
    init_db()
    get_file_store().ensure_directory()
    logger.info("Digital archive server ready")
    yield
    dispose_db()


app = FastAPI(title="Digital Archive", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={exc.body_key: "Server error"})
    return JSONResponse(status_code=exc.status_code, content={exc.body_key: exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


# Include routers
app.include_router(auth.router, tags=["Authentication"])
app.include_router(taxonomy.router, tags=["Taxonomy"])
app.include_router(file.router, tags=["File"])
app.include_router(search.router, tags=["Search"])
app.include_router(metrics.router, prefix="/metrics", tags=["Metrics"])


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "Digital Archive Server"
