"""
Validate-and-notify pipeline shared by both contact form routes
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple, Type

from app.schemas.contact import (
    ContactResponse,
    ContactSubmission,
    DetailedProjectSubmission,
    QuickServiceSubmission,
    ServerErrorResponse,
    SubmissionValidationError,
    ValidationErrorDetail,
    ValidationErrorResponse,
    validate_submission,
)
from app.services.notification_service import DispatchConfig, NotificationService

logger = logging.getLogger(__name__)

DispatcherFactory = Callable[[], NotificationService]


@dataclass(frozen=True)
class SubmissionRoute:
    """Everything that differs between the two form routes"""
    name: str
    schema: Type[ContactSubmission]
    # Key holding the operator notification result in the success body
    notify_data_key: str


DETAILED_PROJECT_ROUTE = SubmissionRoute(
    name="contact",
    schema=DetailedProjectSubmission,
    notify_data_key="recieveEmailData",
)

QUICK_SERVICE_ROUTE = SubmissionRoute(
    name="sendMessage",
    schema=QuickServiceSubmission,
    notify_data_key="receiveEmailData",
)


def default_dispatcher() -> NotificationService:
    return NotificationService(DispatchConfig.from_settings())


async def handle_submission(
    raw_body: bytes,
    route: SubmissionRoute,
    dispatcher_factory: DispatcherFactory = default_dispatcher,
) -> Tuple[int, Dict[str, Any]]:
    """
    Run one submission through validation and dispatch.

    Returns the HTTP status code and JSON body:
    - 400 with every validation issue
    - 200 with ``{"error": ...}`` when the provider rejected either email
    - 200 with the success envelope when both emails were accepted
    - 500 for anything else, including malformed JSON and missing configuration
    """
    try:
        data = json.loads(raw_body)
        submission = validate_submission(data, route.schema)

        dispatcher = dispatcher_factory()
        outcome = await dispatcher.dispatch(submission)

        # Provider errors are reported with a 200 status, as the frontend expects
        if not outcome.notify_result.ok:
            return 200, {"error": outcome.notify_result.error}
        if not outcome.thank_you_result.ok:
            return 200, {"error": outcome.thank_you_result.error}

        body = ContactResponse(
            sendMailData=outcome.thank_you_result.data,
            **{route.notify_data_key: outcome.notify_result.data},
        )
        logger.info(f"Contact form ({route.name}) submitted by {submission.display_name} ({submission.email})")
        return 200, body.model_dump()

    except SubmissionValidationError as e:
        logger.info(f"Contact form ({route.name}) rejected with {len(e.issues)} issue(s)")
        body = ValidationErrorResponse(error=ValidationErrorDetail(issues=e.issues))
        return 400, body.model_dump()
    except Exception:
        logger.exception("Error processing contact form")
        return 500, ServerErrorResponse().model_dump()
