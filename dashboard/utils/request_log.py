"""
Logger lié à une requête (request_id), injecté dans les vues et services.
- Pas d'état global mutable: un adaptateur par requête, posé sur request.state.
"""
import logging
from typing import Any, MutableMapping, Tuple
from uuid import uuid4
from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"

class RequestLogger(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return f"[{extra.get('request_id', '-')}] {msg}", kwargs

def bind_request_logger(request_id: str = "", name: str = "dashboard.request") -> RequestLogger:
    return RequestLogger(logging.getLogger(name), {"request_id": request_id or uuid4().hex})

def get_request_logger(request: Request) -> RequestLogger:
    """
    Dépendance FastAPI: renvoie le logger posé par le middleware de contexte.
    Fallback (app sans middleware, ex: tests unitaires): nouveau logger lié.
    """
    log = getattr(request.state, "logger", None)
    if log is None:
        log = bind_request_logger()
        request.state.logger = log
    return log
