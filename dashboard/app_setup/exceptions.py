"""
Gestionnaires d'exceptions.
- DashboardError (AuthInputError 401, ProcessingError 500) -> body JSON {error, message}.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dashboard.exceptions import DashboardError

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
