"""
Cas d'usage 'payment links': orchestre repository (Stripe paginé) et report (mise en forme).
"""
import logging
from typing import List, Union

from . import repository
from . import report
from .models import ReportLink, Summary

Logger = Union[logging.Logger, logging.LoggerAdapter]

def build_dashboard(secret_key: str, log: Logger) -> Summary:
    """
    Construit le Summary complet pour la clé fournie.
    - Liste les payment links actifs, puis pour chacun (séquentiellement, dans l'ordre)
      ses checkout sessions, et les transforme en ReportLink.
    - Toute erreur Stripe remonte telle quelle: pas de résultat partiel.
    """
    log.info("Fetching all active payment links...")
    payment_links = repository.list_active_payment_links(secret_key)
    log.info("Found %s active payment links", len(payment_links))

    results: List[ReportLink] = []
    for link in payment_links:
        log.info("Processing payment link: %s", link.id)
        sessions = repository.list_checkout_sessions(link.id, secret_key)
        log.info("Found %s checkout sessions for %s", len(sessions), link.id)

        processed = report.build_report_link(link, sessions)
        results.append(processed)
        log.info("Payment link %s has %s successful transactions", link.id, len(processed.transactions))

    return report.build_summary(results)
