"""
Schémas des objets Stripe consommés (entrée) et du rapport produit (sortie).
- Entrée: validation pydantic des pages list et des objets expansés; champs inconnus ignorés.
- Sortie: objets plats sérialisés tels quels en JSON (ordre des champs = ordre de réponse).
"""
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# module dashboard.payment_links.models
class StripeModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class StripeListPage(StripeModel):
    data: List[dict]
    has_more: bool = False


class StripeProduct(StripeModel):
    id: Optional[str] = None
    name: Optional[str] = None


class StripePrice(StripeModel):
    id: str
    # Objet expansé ou simple identifiant prod_...
    product: Union[StripeProduct, str, None] = None


class StripeLineItem(StripeModel):
    id: str
    description: Optional[str] = None
    price: Optional[StripePrice] = None
    quantity: Optional[int] = None
    amount_total: int = 0


class StripeLineItemList(StripeModel):
    data: List[StripeLineItem] = Field(default_factory=list)


class PaymentLink(StripeModel):
    id: str
    active: bool
    url: str
    line_items: StripeLineItemList = Field(default_factory=StripeLineItemList)


class BillingDetails(StripeModel):
    email: Optional[str] = None


class Charge(StripeModel):
    id: str
    status: str
    amount: int
    currency: str
    created: int
    receipt_url: Optional[str] = None
    billing_details: BillingDetails = Field(default_factory=BillingDetails)


class ChargeList(StripeModel):
    data: List[Charge] = Field(default_factory=list)


class PaymentIntent(StripeModel):
    id: str
    charges: ChargeList = Field(default_factory=ChargeList)


class CheckoutSession(StripeModel):
    id: str
    payment_link: Optional[str] = None
    payment_status: str
    # Objet expansé, identifiant pi_... ou null (session non payée)
    payment_intent: Union[PaymentIntent, str, None] = None


class ReportLineItem(BaseModel):
    id: str
    description: str
    price_id: str
    product_name: str
    quantity: int
    amount_total: int


class Transaction(BaseModel):
    payment_intent_id: str
    charge_id: str
    amount: int
    currency: str
    created: int
    customer_email: str
    receipt_url: str


class ReportLink(BaseModel):
    id: str
    url: str
    active: bool
    line_items: List[ReportLineItem]
    transactions: List[Transaction]


class Summary(BaseModel):
    total_active_payment_links: int
    total_successful_transactions: int
    total_revenue_cents: int
    payment_links: List[ReportLink]
