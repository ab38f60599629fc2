from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from dotenv import load_dotenv
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.database import engine, AsyncSessionLocal, QueryExecutor
from app.api.v1 import students, assignments

load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the pool is created lazily on first checkout
    logger.info(f"Starting API ({settings.ENVIRONMENT})")
    yield
    # Shutdown
    await engine.dispose()
    logger.info("Database pool closed")

app = FastAPI(
    title="Alunos & Trabalhos API",
    description="Students and assignments CRUD API",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Constraint violations from the database become 409 Conflict"""
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc.orig)}
    )

# Include routers
app.include_router(students.router, prefix="/api/v1", tags=["alunos"])
app.include_router(assignments.router, prefix="/api/v1", tags=["trabalhos"])

@app.get("/")
async def root():
    return {"message": "Alunos & Trabalhos API is running"}

@app.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {"status": "healthy", "service": "alunos-trabalhos-api"}

@app.get("/health/detailed")
async def detailed_health_check():
    """Detailed health check including database connectivity"""
    health_status = {
        "status": "healthy",
        "service": "alunos-trabalhos-api",
        "environment": settings.ENVIRONMENT,
        "checks": {}
    }

    try:
        async with AsyncSessionLocal() as session:
            await QueryExecutor(session).fetch_all("SELECT 1")
        health_status["checks"]["database"] = "ok"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = f"error: {str(e)}"

    return health_status

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
