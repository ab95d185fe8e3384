"""
Module 'payment_links' (feature-first): point d'entrée public.
Réunit client Stripe, pagination (repository), mise en forme (report) et orchestration (service).
"""

from .stripe_client import require_stripe, list_objects
from .repository import paginate, list_active_payment_links, list_checkout_sessions
from .report import successful_transactions, build_report_link, build_summary
from .service import build_dashboard

__all__ = [
    # stripe
    "require_stripe",
    "list_objects",
    # repository
    "paginate",
    "list_active_payment_links",
    "list_checkout_sessions",
    # report
    "successful_transactions",
    "build_report_link",
    "build_summary",
    # services
    "build_dashboard",
]
