"""
Factory d'application recommandée pour les entrypoints (ex: dashboard.api).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .logging_setup import configure_logging
from .middlewares import (
    register_basic_middlewares,
    register_request_context_middleware,
    register_legacy_host_redirect_middleware,
)
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre, dans l'ordre:
      1) register_basic_middlewares: CORS.
      2) register_request_context_middleware: request_id + logger par requête.
      3) register_exception_handlers: DashboardError -> JSON {error, message}.
      4) register_routers: route unique du rapport.
      5) register_legacy_host_redirect_middleware: ajouté en dernier pour s'exécuter en premier.
    Docs/OpenAPI désactivés: tout chemin aboutit au rapport.
    """
    configure_logging()
    app = FastAPI(
        title="Open Stripe Dashboard",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    register_basic_middlewares(app)
    register_request_context_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    register_legacy_host_redirect_middleware(app)
    return app
