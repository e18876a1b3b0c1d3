"""
FastAPI app entry point
- CORS
- router registration
- table creation on startup
- health check
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from blueship.config import settings
from blueship.database import engine, Base, SessionLocal
from blueship.agents import llm_client
from blueship.api import warehouses, products, orders, dashboard, chat
from blueship.schemas.common import HealthResponse

# Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: make sure the tables exist and warn when there is no demo data."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    db = SessionLocal()
    try:
        from blueship.models import Warehouse
        warehouse_count = db.query(Warehouse).count()
        if warehouse_count == 0:
            logger.warning("No master data found. Run python seed_data.py first.")
        else:
            logger.info(f"Master data present: {warehouse_count} warehouses")
    finally:
        db.close()

    yield


app = FastAPI(
    title="Blue Ship Sync",
    description="Logistics / warehouse management dashboard API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(warehouses.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(orders.shipments_router)
app.include_router(dashboard.router)
app.include_router(chat.router)


@app.get("/api/health", response_model=HealthResponse)
def health_check():
    """Service health"""
    db_ok = False
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_ok = True
    except Exception as e:
        logger.error(f"Health check: database unreachable ({e})")
    finally:
        db.close()

    return HealthResponse(
        status="ok" if db_ok else "degraded",
        db_connected=db_ok,
        llm_available=llm_client.default_llm.available,
        timestamp=datetime.now(timezone.utc),
    )
