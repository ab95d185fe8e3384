from fastapi import APIRouter, Depends

from dashboard.exceptions import ProcessingError
from dashboard.utils.request_log import RequestLogger, get_request_logger
from dashboard.utils.responses import PrettyJSONResponse
from dashboard.utils.security import require_stripe_secret
from . import service

router = APIRouter(tags=["Payment links"])

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# module dashboard.payment_links.views
@router.api_route("/{path:path}", methods=ANY_METHOD)
def payment_links_summary(
    secret_key: str = Depends(require_stripe_secret),
    log: RequestLogger = Depends(get_request_logger),
):
    """
    Rapport des ventes par payment link pour la clé Stripe de l'appelant.
    - Sécurité: Authorization: Bearer sk_... (401 sinon, via require_stripe_secret)
    - Réponse: Summary en JSON indenté
      { total_active_payment_links, total_successful_transactions, total_revenue_cents, payment_links }
    - Erreurs: toute erreur de récupération/transformation -> 500
      {"error": "Failed to process payment links", "message": ...}
    - Route unique: toutes méthodes, tous chemins (pas de routage par chemin)
    """
    try:
        summary = service.build_dashboard(secret_key, log)
    except Exception as e:
        log.exception("Error processing payment links")
        raise ProcessingError(str(e)) from e
    return PrettyJSONResponse(summary.model_dump())
