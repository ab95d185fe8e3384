"""
Entrypoint serveur: expose `app` pour les process managers / déploiements (ex: uvicorn dashboard.api:app).
Toute la configuration (middlewares, routers, Stripe) est centralisée dans dashboard.app_setup.
"""

from dashboard.app import app

if __name__ == "__main__":
    import uvicorn
    from dashboard.config import HOST, PORT

    uvicorn.run("dashboard.api:app", host=HOST, port=PORT)
