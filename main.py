"""
Restaurant Order API
A FastAPI application for placing and tracking restaurant food orders
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
from contextlib import asynccontextmanager
import logging
import os
from datetime import datetime, timezone

from restaurant_api.database import database, get_db, ping
from restaurant_api.routers import orders
from restaurant_api.utils.error_handler import register_exception_handlers
from restaurant_api.utils.limiter import limiter

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("Starting Restaurant Order API...")
    database.open()

    yield

    # Shutdown
    logger.info("Shutting down Restaurant Order API...")
    database.close()

# Create FastAPI app
app = FastAPI(
    title="Restaurant Order API",
    description="REST API for placing, tracking and managing restaurant food orders",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add rate limiting
app.state.limiter = limiter

register_exception_handlers(app)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(orders.router, prefix="/api/orders", tags=["orders"])

@app.get("/")
@limiter.limit("10/minute")
async def root(request: Request):
    """Root endpoint - publicly accessible"""
    return {"success": True, "message": "Restaurant Backend API is running!"}

@app.get("/health")
@limiter.limit("30/minute")
async def health_check(request: Request, db: Session = Depends(get_db)):
    """Health check endpoint including a store round-trip"""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        ping(db)
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={
                "success": False,
                "status": "unhealthy",
                "database": "unreachable",
                "error": str(e),
                "timestamp": timestamp
            }
        )

    return {
        "success": True,
        "status": "healthy",
        "database": "connected",
        "timestamp": timestamp
    }

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
