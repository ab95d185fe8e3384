"""
Hiérarchie d'erreurs du dashboard.

- DashboardError: erreurs rendues au client (status HTTP + body {error, message}).
- StripeAccessError: échecs côté Stripe (HTTP non-2xx, réseau, payload inattendu),
  jamais renvoyés tels quels: la vue les enveloppe dans ProcessingError (500).
"""
from http import HTTPStatus
from typing import Any, Dict, Optional


class DashboardError(Exception):
    status_code = 500

    def __init__(self, error: str, message: str):
        self.error = error
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}


class AuthInputError(DashboardError):
    """
    Clé fournie par l'appelant absente, mal formée ou sans préfixe sk_.
    Rendue en 401, jamais retentée.
    """
    status_code = 401

    @classmethod
    def missing_header(cls) -> "AuthInputError":
        return cls(
            "Missing or invalid Authorization header",
            "Please provide Stripe secret key as 'Bearer sk_...' in Authorization header",
        )

    @classmethod
    def bad_key_format(cls) -> "AuthInputError":
        return cls(
            "Invalid Stripe secret key format",
            "Stripe secret key should start with 'sk_'",
        )


class ProcessingError(DashboardError):
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__("Failed to process payment links", message or "Unknown error")


class StripeAccessError(Exception):
    pass


class UpstreamError(StripeAccessError):
    """
    Réponse non-2xx de l'API Stripe.
    - status: code HTTP, status_text: phrase standard, body: corps brut (texte)
    """

    def __init__(self, status: int, status_text: str, body: str):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"Stripe API error: {status} {status_text}- {body}")

    @classmethod
    def from_status(cls, status: int, body: str) -> "UpstreamError":
        try:
            status_text = HTTPStatus(status).phrase
        except ValueError:
            status_text = ""
        return cls(status, status_text, body)


class TransportError(StripeAccessError):
    pass


class UpstreamSchemaError(StripeAccessError):
    pass
