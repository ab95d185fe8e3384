# dashboard.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

"""
Configuration centrale du dashboard.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les réglages Stripe (version d'API, base URL optionnelle)
- Expose l'hôte historique et l'URL canonique de redirection
- La clé secrète Stripe n'est JAMAIS lue ici: elle arrive avec chaque requête
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _split_env(name: str, default: str) -> list[str]:
    return [p.strip() for p in _clean_env(os.getenv(name, default)).split(",") if p.strip()]

# Logs
LOG_LEVEL = _clean_env(os.getenv("LOG_LEVEL") or "INFO").upper()

# CORS (lecture seule, GET depuis un front tiers)
CORS_ORIGINS = _split_env("CORS_ORIGINS", "*")

# Ancien domaine: redirection 301 vers l'hôte canonique
LEGACY_HOSTS = [h.lower() for h in _split_env("LEGACY_HOSTS", "openstripedashboard.com,www.openstripedashboard.com")]
CANONICAL_URL = _clean_env(os.getenv("CANONICAL_URL") or "https://plrev.wilmake.com")

# Stripe: version figée (dernière version où payment_intent.charges est expansible)
STRIPE_API_VERSION = _clean_env(os.getenv("STRIPE_API_VERSION") or "2022-08-01")
# Optionnel: ex. stripe-mock en local (http://localhost:12111)
STRIPE_API_BASE = _clean_env(os.getenv("STRIPE_API_BASE") or "")
if STRIPE_API_BASE.endswith("/"):
    STRIPE_API_BASE = STRIPE_API_BASE.rstrip("/")

# Taille de page maximale acceptée par les endpoints list de Stripe
PAGE_SIZE = 100

# Serveur (entrypoint uvicorn)
HOST = _clean_env(os.getenv("HOST") or "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
