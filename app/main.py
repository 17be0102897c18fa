"""
Placement Cell Dashboard - Main Application

FastAPI backend with:
- CRUD for companies, students, job profiles, training programs/enrollments, applications
- Aggregate dashboard (placement rate, average package, top branch, status breakdown)
- PostgreSQL (or any SQLAlchemy URL) behind a generic data store

Run: uvicorn app.main:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import FetchFailure, WriteFailure
from app.core.logging import configure_logging
from app.db.postgres import create_tables, test_db_connection

settings = get_settings()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title="Placement Cell Dashboard",
    description="""
    Placement cell management API.

    ## Screens
    - **Dashboard**: totals, placement rate, average package, top branch, application status breakdown
    - **Companies**: recruiter companies and HR contacts
    - **Students**: roll number, branch, year, CGPA, contact details
    - **Job Profiles**: roles offered by companies with package (LPA)
    - **Training**: programs and student enrollments
    - **Applications**: student applications to job profiles
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(FetchFailure)
async def fetch_failure_handler(request: Request, exc: FetchFailure):
    logger.warning("fetch_failed", table=exc.table, action=exc.action,
                   path=request.url.path, error=str(exc.__cause__ or exc))
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(WriteFailure)
async def write_failure_handler(request: Request, exc: WriteFailure):
    logger.error("write_failed", table=exc.table, action=exc.action,
                 path=request.url.path, conflict=exc.conflict, error=str(exc.__cause__ or exc))
    return JSONResponse(status_code=409 if exc.conflict else 400, content={"detail": exc.message})


# Startup event
@app.on_event("startup")
async def startup_event():
    """Configure logging and make sure the tables exist."""
    configure_logging()
    if settings.create_tables_on_startup:
        try:
            create_tables()
        except Exception as e:
            logger.error("table_bootstrap_failed", error=str(e))


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected" if test_db_connection() else "disconnected"
    }
