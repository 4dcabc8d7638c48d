from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import get_settings
from .logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(title=get_settings().app_title, lifespan=lifespan)

# Include routers
from .routes import employees  # noqa: E402

app.include_router(employees.router, tags=["Employees"])


@app.get("/health")
async def health():
    return {"status": "ok"}
