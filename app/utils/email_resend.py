import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from app.config.settings import RESEND_API_URL, RESEND_TIMEOUT

logger = logging.getLogger(__name__)


class EmailConfigurationError(RuntimeError):
    """Raised when the email provider cannot be used as configured"""


@dataclass
class SendResult:
    """Outcome of one send: provider data on success, provider error otherwise"""
    data: Optional[Dict[str, Any]] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _provider_error(resp: httpx.Response) -> Dict[str, Any]:
    """Normalise a non-2xx Resend response into {name, message, statusCode}"""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        return {
            "name": body.get("name", "application_error"),
            "message": body.get("message", resp.text),
            "statusCode": body.get("statusCode", resp.status_code),
        }
    return {
        "name": "application_error",
        "message": resp.text or resp.reason_phrase,
        "statusCode": resp.status_code,
    }


class ResendClient:
    """Minimal client for the Resend "send email" API"""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = RESEND_API_URL,
        timeout: float = RESEND_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise EmailConfigurationError("RESEND_API_KEY not configured")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def send_email(self, from_email: str, to: str, subject: str, html: str) -> SendResult:
        """Send a single email.

        Provider-side rejections come back as ``SendResult.error``; transport
        failures raise ``httpx.HTTPError``.

        Args:
            from_email: Sender, e.g. ``"CadOutSource <info@cadoutsource.co.uk>"``
            to: Recipient email address
            subject: Subject line
            html: Rendered HTML body
        """
        payload = {
            "from": from_email,
            "to": [to],
            "subject": subject,
            "html": html,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.post(f"{self.base_url}/emails", json=payload, headers=self._headers())

        if resp.is_success:
            data = resp.json()
            logger.info("Resend email accepted → %s id=%s", to, data.get("id"))
            return SendResult(data=data)

        error = _provider_error(resp)
        logger.error("Resend rejected email to %s: %s", to, error)
        return SendResult(error=error)
