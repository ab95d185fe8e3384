"""
Logique de rapport pure (pas de Stripe, pas d'I/O).
Aplatit payment link + checkout sessions en ReportLink, puis agrège le Summary.
"""
from typing import List, Sequence

from .models import (
    CheckoutSession,
    PaymentIntent,
    PaymentLink,
    ReportLineItem,
    ReportLink,
    StripeLineItem,
    StripeProduct,
    Summary,
    Transaction,
)

PAID = "paid"
SUCCEEDED = "succeeded"

# module dashboard.payment_links.report
def successful_transactions(sessions: Sequence[CheckoutSession]) -> List[Transaction]:
    """
    Une Transaction par charge 'succeeded' d'une session 'paid'.
    - Ordre conservé: sessions puis charges, tel que reçu.
    - Pas de déduplication: une même charge vue dans deux sessions donne deux lignes.
    - Email / reçu absents -> "".
    """
    transactions: List[Transaction] = []
    for session in sessions:
        intent = session.payment_intent
        if session.payment_status != PAID or not isinstance(intent, PaymentIntent):
            continue
        for charge in intent.charges.data:
            if charge.status != SUCCEEDED:
                continue
            transactions.append(Transaction(
                payment_intent_id=intent.id,
                charge_id=charge.id,
                amount=charge.amount,
                currency=charge.currency,
                created=charge.created,
                customer_email=charge.billing_details.email or "",
                receipt_url=charge.receipt_url or "",
            ))
    return transactions

def _line_item(item: StripeLineItem) -> ReportLineItem:
    price = item.price
    product = price.product if price else None
    # Produit non expansé (simple id prod_...) -> pas de nom disponible
    product_name = product.name if isinstance(product, StripeProduct) else None
    return ReportLineItem(
        id=item.id,
        description=item.description or "",
        price_id=price.id if price else "",
        product_name=product_name or "",
        quantity=item.quantity or 0,
        amount_total=item.amount_total,
    )

def build_report_link(link: PaymentLink, sessions: Sequence[CheckoutSession]) -> ReportLink:
    return ReportLink(
        id=link.id,
        url=link.url,
        active=link.active,
        line_items=[_line_item(item) for item in link.line_items.data],
        transactions=successful_transactions(sessions),
    )

def build_summary(report_links: Sequence[ReportLink]) -> Summary:
    """
    Totaux sur l'ensemble des liens:
    - nombre de liens actifs, nombre de transactions réussies, revenu (unités mineures).
    """
    return Summary(
        total_active_payment_links=len(report_links),
        total_successful_transactions=sum(len(link.transactions) for link in report_links),
        total_revenue_cents=sum(t.amount for link in report_links for t in link.transactions),
        payment_links=list(report_links),
    )
