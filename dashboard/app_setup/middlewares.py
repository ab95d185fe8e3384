"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS (rapport consommé par des fronts tiers).
- register_request_context_middleware: request_id + logger lié à la requête, en-tête X-Request-ID.
- register_legacy_host_redirect_middleware: ancien domaine -> 301 vers l'hôte canonique.
Notes:
- L'ordre d'ajout est important: la redirection est ajoutée en dernier pour s'exécuter en premier
  (avant l'authentification et le routage).
"""
import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from dashboard.config import CORS_ORIGINS, LEGACY_HOSTS, CANONICAL_URL
from dashboard.utils.request_log import REQUEST_ID_HEADER, bind_request_logger

def register_basic_middlewares(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

def register_request_context_middleware(app: FastAPI) -> None:
    """
    Lie un logger à chaque requête:
    - request_id: X-Request-ID entrant si fourni, sinon uuid4
    - request.state.logger: consommé par la dépendance get_request_logger
    - log d'accès en fin de requête (méthode, chemin, status, durée)
    """
    @app.middleware("http")
    async def request_context(request: Request, call_next):
        log = bind_request_logger(request.headers.get(REQUEST_ID_HEADER, ""))
        request.state.logger = log
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info("%s %s -> %s (%.0f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        response.headers[REQUEST_ID_HEADER] = log.extra["request_id"]
        return response

def register_legacy_host_redirect_middleware(app: FastAPI) -> None:
    """
    Redirige (301, body vide) toute requête adressée à l'ancien domaine, avec ou sans www.
    - Indépendant de l'en-tête Authorization.
    """
    @app.middleware("http")
    async def legacy_host_redirect(request: Request, call_next):
        hostname = (request.url.hostname or "").lower()
        if hostname in LEGACY_HOSTS:
            logging.getLogger(__name__).info("legacy host redirect host=%s", hostname)
            return RedirectResponse(CANONICAL_URL, status_code=301)
        return await call_next(request)
