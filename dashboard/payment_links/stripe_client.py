"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
- Lecture seule (endpoints list), clé secrète transmise à chaque appel.
- Traduit les erreurs du SDK en UpstreamError / TransportError.
"""
import stripe
from typing import Any, Dict

from dashboard.config import STRIPE_API_BASE, STRIPE_API_VERSION
from dashboard.exceptions import TransportError, UpstreamError

# module dashboard.payment_links.stripe_client
def require_stripe() -> stripe:
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Aucune clé globale: stripe.api_key reste vide, la clé de l'appelant est passée par requête.
    - Pas de retry SDK: un échec Stripe fait échouer la requête courante.
    - STRIPE_API_BASE (optionnel) redirige les appels (ex: stripe-mock).
    """
    stripe.max_network_retries = 0
    if STRIPE_API_BASE:
        stripe.api_base = STRIPE_API_BASE
    return stripe

def _body_text(e: stripe.StripeError) -> str:
    body = getattr(e, "http_body", None)
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return str(body)

def list_objects(resource: Any, secret_key: str, **params: Any) -> Dict[str, Any]:
    """
    Appelle resource.list(...) (ex: stripe.PaymentLink, stripe.checkout.Session) pour UNE page.
    - params: filtres, limit, expand, starting_after (tels quels)
    - Retour: la page en dict Python simple (data, has_more), objets imbriqués compris
    - Erreurs:
      - HTTP non-2xx -> UpstreamError(status, status_text, body)
      - réseau / réponse illisible sans status -> TransportError
    """
    try:
        page = resource.list(api_key=secret_key, stripe_version=STRIPE_API_VERSION, **params)
    except stripe.APIConnectionError as e:
        raise TransportError(f"Stripe API unreachable: {e.user_message or e}") from e
    except stripe.StripeError as e:
        if not e.http_status:
            raise TransportError(f"Stripe API call failed: {e.user_message or e}") from e
        raise UpstreamError.from_status(e.http_status, _body_text(e)) from e
    # ListObject n'est pas un dict: conversion récursive avant validation pydantic
    return page.to_dict()
