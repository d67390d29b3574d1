import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from app.config.settings import BRAND_NAME, OFFICIAL_EMAIL, RESEND_API_KEY, RESEND_FROM_EMAIL
from app.schemas.contact import ContactSubmission
from app.templates.emails import render_contact_notification, render_thank_you
from app.utils.email_resend import EmailConfigurationError, ResendClient, SendResult

logger = logging.getLogger(__name__)

THANK_YOU_SUBJECT = "Thank you for contacting us!"


class EmailProvider(Protocol):
    async def send_email(self, from_email: str, to: str, subject: str, html: str) -> SendResult:
        ...


@dataclass(frozen=True)
class DispatchConfig:
    api_key: Optional[str]
    operator_address: Optional[str]
    from_address: str

    @classmethod
    def from_settings(cls) -> "DispatchConfig":
        return cls(
            api_key=RESEND_API_KEY,
            operator_address=OFFICIAL_EMAIL,
            from_address=RESEND_FROM_EMAIL,
        )


@dataclass
class DispatchOutcome:
    notify_result: SendResult
    thank_you_result: SendResult

    @property
    def ok(self) -> bool:
        return self.notify_result.ok and self.thank_you_result.ok


class NotificationService:
    """Sends the operator notification and the submitter's thank-you email"""

    def __init__(self, config: DispatchConfig, provider: Optional[EmailProvider] = None):
        if not config.operator_address:
            raise EmailConfigurationError("OFFICIAL_EMAIL not configured")
        self.config = config
        self.provider = provider or ResendClient(config.api_key)

    @property
    def sender(self) -> str:
        return f"{BRAND_NAME} <{self.config.from_address}>"

    async def dispatch(self, submission: ContactSubmission) -> DispatchOutcome:
        """Send both emails, one attempt each, in order.

        The thank-you email is attempted even when the operator notification
        was rejected; provider errors are returned in the outcome.
        """
        name = submission.display_name

        notify_result = await self.provider.send_email(
            from_email=self.sender,
            to=self.config.operator_address,
            subject=f"New Contact Form Submission from {name}",
            html=render_contact_notification(submission.notification_fields()),
        )
        if not notify_result.ok:
            logger.warning(f"Operator notification failed for {name}: {notify_result.error}")

        thank_you_result = await self.provider.send_email(
            from_email=self.sender,
            to=submission.email,
            subject=THANK_YOU_SUBJECT,
            html=render_thank_you(name),
        )
        if not thank_you_result.ok:
            logger.warning(f"Thank-you email failed for {submission.email}: {thank_you_result.error}")

        return DispatchOutcome(notify_result=notify_result, thank_you_result=thank_you_result)
