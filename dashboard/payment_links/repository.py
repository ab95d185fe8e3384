"""
Accès aux collections Stripe paginées (payment links, checkout sessions).
Pagination par curseur: starting_after = id du dernier élément de la page précédente.
"""
import logging
from typing import Any, Dict, List, Optional

import stripe
from pydantic import ValidationError

from dashboard.config import PAGE_SIZE
from dashboard.exceptions import UpstreamSchemaError
from . import stripe_client
from .models import CheckoutSession, PaymentLink, StripeListPage

logger = logging.getLogger(__name__)

# module dashboard.payment_links.repository
def _parse_page(raw: Any) -> StripeListPage:
    try:
        return StripeListPage.model_validate(raw)
    except ValidationError as e:
        raise UpstreamSchemaError(f"Unexpected Stripe list payload: {e}") from e

def paginate(resource: Any, secret_key: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Récupère toutes les pages d'une collection Stripe, dans l'ordre de lecture.
    - Première page sans curseur, puis starting_after = id du dernier élément.
    - Arrêt si has_more est faux OU si la page est vide (aucun curseur possible).
    - Retour: concaténation des data[] de toutes les pages.
    """
    items: List[Dict[str, Any]] = []
    starting_after: Optional[str] = None
    while True:
        query = dict(params, limit=PAGE_SIZE)
        if starting_after:
            query["starting_after"] = starting_after

        page = _parse_page(stripe_client.list_objects(resource, secret_key, **query))
        items.extend(page.data)

        if not page.has_more or not page.data:
            break
        starting_after = page.data[-1].get("id")
        if not starting_after:
            raise UpstreamSchemaError("Stripe list item without id, cannot paginate")
    logger.debug("paginate resource=%s items=%s", getattr(resource, "__name__", resource), len(items))
    return items

def _validate_all(model, raw_items: List[Dict[str, Any]]) -> list:
    try:
        return [model.model_validate(raw) for raw in raw_items]
    except ValidationError as e:
        raise UpstreamSchemaError(f"Unexpected Stripe {model.__name__} payload: {e}") from e

def list_active_payment_links(secret_key: str) -> List[PaymentLink]:
    raw = paginate(
        stripe.PaymentLink,
        secret_key,
        {"active": True, "expand": ["data.line_items"]},
    )
    return _validate_all(PaymentLink, raw)

def list_checkout_sessions(payment_link_id: str, secret_key: str) -> List[CheckoutSession]:
    raw = paginate(
        stripe.checkout.Session,
        secret_key,
        {
            "payment_link": payment_link_id,
            "expand": ["data.payment_intent", "data.payment_intent.charges"],
        },
    )
    return _validate_all(CheckoutSession, raw)
