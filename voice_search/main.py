from contextlib import asynccontextmanager

from fastapi import FastAPI

from voice_search.core.config import settings
from voice_search.core.logging_config import setup_logging
from voice_search.core.mongo import close_mongo, connect_mongo
from voice_search.routers.voice import router as voice_router

# Logging is configured before the app object exists so startup messages are captured
setup_logging(log_level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_mongo()
    yield
    # Shutdown
    await close_mongo()


app = FastAPI(
    title=settings.APP_NAME,
    description="Arabic/Darija voice search: keyword extraction, catalog ranking and spoken replies",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.include_router(voice_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
