"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import router
from app.infrastructure.config.settings import settings

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title=settings.app_title,
    description="Flat-rate plan versus bank loan financing comparison",
    version="0.1.0",
)

app.include_router(router)
