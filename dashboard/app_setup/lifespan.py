"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Configure le SDK Stripe (pas de clé globale, pas de retry, api_base optionnelle).
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from dashboard.config import STRIPE_API_BASE, STRIPE_API_VERSION
from dashboard.payment_links.stripe_client import require_stripe

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    require_stripe()
    logger.info(
        "Stripe SDK ready (api_version=%s, api_base=%s)",
        STRIPE_API_VERSION,
        STRIPE_API_BASE or "default",
    )
    yield
