"""
Submission gateway: relays a quote request to the form-relay service.

The relay (Static Forms by default) accepts a JSON body and answers with a
2xx status on success. The response body is not used.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

from .forms import WatchType

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = 'https://api.staticforms.xyz/submit'
DEFAULT_SUBJECT = 'Nouvelle demande de devis'
DEFAULT_TIMEOUT = 10


class GatewayError(Exception):
    """The relay rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


def _or_dash(value: str) -> str:
    value = (value or '').strip()
    return value or '-'


def compose_message(draft) -> str:
    """
    Labelled plain-text body with every field of the request.

    Optional fields left empty are rendered as ``-``.
    """
    try:
        watch_type = WatchType(draft.watch_type).label
    except ValueError:
        watch_type = draft.watch_type

    lines = [
        f"Nom: {_or_dash(draft.name)}",
        f"Email: {_or_dash(draft.email)}",
        f"Téléphone: {_or_dash(draft.phone)}",
        f"Marque: {_or_dash(draft.brand)}",
        f"Modèle: {_or_dash(draft.model)}",
        f"Type: {watch_type}",
        "",
        "Problème:",
        (draft.problem_description or '').strip(),
        "",
        "Photos:",
        _or_dash(draft.photo_link),
    ]
    return "\n".join(lines)


class SubmissionGateway:
    """HTTP client for the form-relay endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_GATEWAY_URL,
        access_key: str = '',
        subject: str = DEFAULT_SUBJECT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = url
        self.access_key = access_key
        self.subject = subject
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> 'SubmissionGateway':
        return cls(
            url=getattr(settings, 'QUOTE_GATEWAY_URL', DEFAULT_GATEWAY_URL),
            access_key=getattr(settings, 'QUOTE_GATEWAY_ACCESS_KEY', ''),
            subject=getattr(settings, 'QUOTE_GATEWAY_SUBJECT', DEFAULT_SUBJECT),
            timeout=float(getattr(settings, 'QUOTE_GATEWAY_TIMEOUT', DEFAULT_TIMEOUT)),
        )

    def is_configured(self) -> bool:
        return bool(self.url and self.access_key)

    def build_payload(self, draft) -> Dict[str, Any]:
        return {
            'accessKey': self.access_key,
            'subject': self.subject,
            'name': (draft.name or '').strip(),
            'email': (draft.email or '').strip(),
            'message': compose_message(draft),
        }

    def send(self, draft) -> None:
        """
        POST the request once.

        Raises:
            GatewayError: on a transport error or any non-2xx status.
        """
        if not self.is_configured():
            logger.error("Quote gateway is not configured (QUOTE_GATEWAY_ACCESS_KEY missing)")
            raise GatewayError("gateway not configured")

        try:
            response = requests.post(self.url, json=self.build_payload(draft), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Quote gateway unreachable: %s", exc)
            raise GatewayError(f"transport error: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning("Quote gateway rejected request: HTTP %s", response.status_code)
            raise GatewayError(f"HTTP {response.status_code}", status_code=response.status_code)

        logger.info("Quote request relayed for %s", (draft.email or '').strip())
