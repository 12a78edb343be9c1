import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router
from infrastructure.container import get_initialize_sample_data_use_case
from infrastructure.mongo.session.client import close_client

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "info").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true":
        get_initialize_sample_data_use_case().execute()
    yield
    close_client()
    logger.info("API de tareas detenida")


app = FastAPI(title="Task Management API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

register_exception_handlers(app)
app.include_router(tasks_router)
