# gas_efficiency/main.py
from __future__ import annotations

from fastapi import FastAPI

from gas_efficiency.api.compare import router as compare_router
from gas_efficiency.api.health import router as health_router
from gas_efficiency.api.page import router as page_router

from gas_efficiency.config.settings import get_settings
from gas_efficiency.utils.log_config import configure_logging


app = FastAPI(title="Gas Efficiency Comparator")

# Routers
app.include_router(health_router)
app.include_router(page_router)
app.include_router(compare_router)


@app.on_event("startup")
async def on_startup() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
