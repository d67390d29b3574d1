"""
Form client for the contact endpoints.

Mirrors what the website forms do: hold field values, validate them with the
same schema the server uses, POST them, track the submit status and work out
where to send the visitor afterwards.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type
from urllib.parse import urlencode

import httpx

from app.constants.form_options import FORM_OPTIONS
from app.schemas.contact import ContactSubmission, SubmissionValidationError, validate_submission

logger = logging.getLogger(__name__)


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class FormAdapter:
    """Client side state for one contact form"""

    def __init__(
        self,
        endpoint_url: str,
        schema: Type[ContactSubmission],
        redirect_token: str,
        thank_you_path: str = "/thankyou",
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self.endpoint_url = endpoint_url
        self.schema = schema
        self.redirect_token = redirect_token
        self.thank_you_path = thank_you_path
        self.http_client = http_client
        self.timeout = timeout

        self.values: Dict[str, Any] = self._default_values()
        self.status = SubmitStatus.IDLE
        self.snapshot: Optional[Dict[str, Any]] = None
        self.redirect_url: Optional[str] = None
        self.last_error: Optional[Exception] = None

    def _default_values(self) -> Dict[str, Any]:
        return {field.alias or name: "" for name, field in self.schema.model_fields.items()}

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown field '{name}' for {self.schema.__name__}")
        self.values[name] = value

    def reset(self) -> None:
        """Clear every field back to its default"""
        self.values = self._default_values()

    def options(self, name: str) -> List[str]:
        """Selectable values for a dropdown field (empty for free text fields)"""
        return list(FORM_OPTIONS.get(name, []))

    def field_errors(self) -> Dict[str, List[str]]:
        """Inline validation messages keyed by field"""
        try:
            validate_submission(self.values, self.schema)
        except SubmissionValidationError as e:
            errors: Dict[str, List[str]] = {}
            for issue in e.issues:
                errors.setdefault(issue.field, []).append(issue.message)
            return errors
        return {}

    def _build_redirect_url(self) -> str:
        return f"{self.thank_you_path}?{urlencode({'token': self.redirect_token})}"

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self.http_client is not None:
            return self.http_client.post(self.endpoint_url, json=payload)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.endpoint_url, json=payload)

    def submit(self) -> bool:
        """
        Validate locally and POST the form.

        On success the response body is kept in ``snapshot``, the fields are
        cleared and ``redirect_url`` points at the acknowledgment page. On
        failure the fields are left as they were.
        """
        self.status = SubmitStatus.IDLE
        self.last_error = None
        self.redirect_url = None

        try:
            validate_submission(self.values, self.schema)
        except SubmissionValidationError as e:
            self.status = SubmitStatus.ERROR
            self.last_error = e
            return False

        payload = dict(self.values)
        self.status = SubmitStatus.SUBMITTING
        try:
            response = self._post(payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Form submission to {self.endpoint_url} failed: {e}")
            self.status = SubmitStatus.ERROR
            self.last_error = e
            return False

        self.snapshot = response.json()
        self.status = SubmitStatus.SUCCESS
        self.reset()
        self.redirect_url = self._build_redirect_url()
        return True
