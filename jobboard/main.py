"""
Job Board Backend - Main Application

FastAPI backend with:
- MongoDB for every record (principals, jobs, applications)
- JWT session tokens in the x-auth-token header
- bcrypt password hashing

Run: uvicorn jobboard.main:app --reload
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard import __version__
from jobboard.api.routes import api_router
from jobboard.core.config import get_settings
from jobboard.core.errors import register_exception_handlers
from jobboard.db.mongodb import init_mongo_indexes

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Job Board",
    description="""
    Job board for students and companies.

    ## Features
    - **Authentication**: token sessions for users, students, companies and admins
    - **Students**: register, profile, apply to jobs, dashboard data
    - **Companies**: register, profile, post and delete jobs
    - **Admin**: overview of all records, delete companies and students
    """,
    version=__version__,
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

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
        logger.info("MongoDB indexes initialized")
    except Exception as e:
        logger.error(f"MongoDB index initialization failed: {e}")


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    from jobboard.db.mongodb import test_mongo_connection

    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
