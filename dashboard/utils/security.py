from fastapi import Request
from typing import Optional
from dashboard.exceptions import AuthInputError

BEARER_PREFIX = "Bearer "
SECRET_KEY_PREFIX = "sk_"

def extract_stripe_secret(auth_header: Optional[str]) -> str:
    """
    Extrait la clé secrète Stripe d'un en-tête 'Authorization: Bearer sk_...'.
    - En-tête absent ou sans 'Bearer ' -> AuthInputError.missing_header()
    - Clé sans préfixe sk_ (live ou test) -> AuthInputError.bad_key_format()
    Aucune vérification auprès de Stripe: une clé sk_ invalide échouera au premier appel.
    """
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        raise AuthInputError.missing_header()
    secret = auth_header[len(BEARER_PREFIX):]
    if not secret.startswith(SECRET_KEY_PREFIX):
        raise AuthInputError.bad_key_format()
    return secret

def require_stripe_secret(request: Request) -> str:
    return extract_stripe_secret(request.headers.get("Authorization"))
