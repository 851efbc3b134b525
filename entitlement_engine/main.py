from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import paywall, subscription
from .core.logging import configure_logging
from .shared.config import get_settings


settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Entitlement Engine API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(subscription.router)
app.include_router(paywall.router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
