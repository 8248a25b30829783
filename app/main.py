from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api.v1 import routers
import logging
from app.core.config import settings
from app.db.session import connect_db_pool, close_db_pool

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    yield
    await close_db_pool()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Catalog of trading-card records",
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.include_router(routers.router)

@app.get("/")
async def root():
    return {"message": "Welcome to Card Catalog API"}
