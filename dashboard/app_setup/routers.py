"""
Registre central des routers.
- payment_links: route unique (tous chemins, toutes méthodes), à enregistrer en dernier.
"""
from fastapi import FastAPI
from dashboard.payment_links import views as payment_links_views

def register_routers(app: FastAPI) -> None:
    app.include_router(payment_links_views.router)
