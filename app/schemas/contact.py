"""Contact form submission schemas.

Two form variants post to the backend: the detailed quote form on the
contact page and the quick message form used by the modal and the landing
page widget. Constraints are declared as ``Annotated`` metadata so that
``validate_submission`` can report every violated rule in one pass, with the
same messages the frontend shows.
"""

import re
from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError


@dataclass(frozen=True)
class MinLength:
    limit: int
    message: str

    def check(self, value: str) -> Optional[str]:
        return self.message if len(value) < self.limit else None


@dataclass(frozen=True)
class MaxLength:
    limit: int
    message: str

    def check(self, value: str) -> Optional[str]:
        return self.message if len(value) > self.limit else None


@dataclass(frozen=True)
class Matches:
    pattern: str
    message: str

    def check(self, value: str) -> Optional[str]:
        return None if re.search(self.pattern, value) else self.message


@dataclass(frozen=True)
class InvalidMessage:
    """Message reported for any type or format error on the field"""
    message: str


RULE_TYPES = (MinLength, MaxLength, Matches)

EMAIL_MESSAGE = "Please enter a valid email address"


def _check_email(value: str) -> str:
    """Accept a bare address only; the submitted value is kept as typed"""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class ValidationIssue(BaseModel):
    """A single field path + message pair"""
    field: str
    message: str


class SubmissionValidationError(ValueError):
    """Raised when a payload violates one or more schema constraints"""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__(f"{len(issues)} validation issue(s)")


class ContactSubmission(BaseModel):
    """Base class for both form variants"""
    model_config = ConfigDict(extra="ignore")

    @property
    def display_name(self) -> str:
        raise NotImplementedError

    def notification_fields(self) -> Dict[str, str]:
        """Values rendered into the operator notification email"""
        raise NotImplementedError


class DetailedProjectSubmission(ContactSubmission):
    """Quote request from the main contact page form"""
    name: Annotated[
        str,
        MinLength(2, "Name must be at least 2 characters"),
        MaxLength(50, "Name must be less than 50 characters"),
    ]
    email: Annotated[EmailAddress, InvalidMessage(EMAIL_MESSAGE)]
    phone: Annotated[
        str,
        MinLength(10, "Please enter a valid phone number"),
        Matches(r"^[\+]?[0-9\s\-\(\)]+$", "Please enter a valid phone number"),
        MaxLength(25, "Phone number must be less than 20 characters"),
    ]
    company: Optional[str] = None
    project_type: Annotated[str, MinLength(1, "Please select a project type")] = Field(alias="projectType")
    budget: Annotated[str, MinLength(1, "Please select a budget range")]
    timeline: Annotated[str, MinLength(1, "Please select a timeline")]
    message: Annotated[
        str,
        MinLength(10, "Message must be at least 10 characters"),
        MaxLength(1000, "Message must be less than 1000 characters"),
    ]

    @property
    def display_name(self) -> str:
        return self.name

    def notification_fields(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "company": self.company or "",
            "project_type": self.project_type,
            "budget": self.budget,
            "timeline": self.timeline,
            "message": self.message,
        }


class QuickServiceSubmission(ContactSubmission):
    """Short message from the "send message" modal and widget"""
    full_name: Annotated[
        str,
        MinLength(2, "Name must be at least 2 characters"),
        MaxLength(50, "Name must be less than 50 characters"),
        Matches(r"^[a-zA-Z\s]+$", "Name can only contain letters and spaces"),
    ] = Field(alias="fullName")
    email: Annotated[EmailAddress, InvalidMessage(EMAIL_MESSAGE)]
    phone: Annotated[
        str,
        MinLength(10, "Phone number must be at least 10 digits"),
        MaxLength(25, "Phone number must be less than 15 digits"),
        Matches(r"^[0-9+\-()\s]+$", "Phone number can only contain digits, +, -, (, ) and spaces"),
    ]
    service: Annotated[str, MinLength(1, "Please select a service")]
    message: Annotated[
        str,
        MaxLength(500, "Message must be less than 500 characters"),
    ] = None

    @property
    def display_name(self) -> str:
        return self.full_name

    def notification_fields(self) -> Dict[str, str]:
        return {
            "name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "company": "",
            "project_type": self.service,
            "budget": "Not specified",
            "timeline": "Not specified",
            "message": self.message or "No message provided",
        }


SubmissionT = TypeVar("SubmissionT", bound=ContactSubmission)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def validate_submission(raw: Any, schema: Type[SubmissionT]) -> SubmissionT:
    """Validate a decoded JSON payload against a submission schema.

    Every field is checked; all issues are raised together in a
    ``SubmissionValidationError``, ordered by field then by rule.
    """
    if not isinstance(raw, dict):
        raise SubmissionValidationError([
            ValidationIssue(field="", message=f"Invalid input: expected object, received {_type_name(raw)}")
        ])

    fields = {field.alias or name: field for name, field in schema.model_fields.items()}
    found: Dict[str, List[str]] = {}

    submission = None
    try:
        submission = schema.model_validate(raw)
    except ValidationError as exc:
        for error in exc.errors():
            key = ".".join(str(part) for part in error["loc"])
            field = fields.get(key)
            override = None
            if field is not None:
                override = next((m.message for m in field.metadata if isinstance(m, InvalidMessage)), None)
            if override is None:
                received = _type_name(raw[key]) if key in raw else "undefined"
                override = f"Invalid input: expected string, received {received}"
            messages = found.setdefault(key, [])
            if override not in messages:
                messages.append(override)

    for key, field in fields.items():
        value = raw.get(key)
        if not isinstance(value, str):
            continue
        for rule in field.metadata:
            if isinstance(rule, RULE_TYPES):
                message = rule.check(value)
                if message:
                    found.setdefault(key, []).append(message)

    ordered_keys = [key for key in fields if key in found]
    ordered_keys += [key for key in found if key not in fields]
    issues = [ValidationIssue(field=key, message=message) for key in ordered_keys for message in found[key]]

    if issues or submission is None:
        raise SubmissionValidationError(issues)
    return submission


class ValidationErrorDetail(BaseModel):
    name: str = "ValidationError"
    issues: List[ValidationIssue]


class ValidationErrorResponse(BaseModel):
    """400 body for a payload that failed validation"""
    success: bool = False
    error: ValidationErrorDetail


class ContactResponse(BaseModel):
    """200 body once both emails were accepted by the provider.

    The operator notification result is added under a route specific key.
    """
    model_config = ConfigDict(extra="allow")

    success: bool = True
    message: str = "Thank you for your message! We will get back to you soon."
    sendMailData: Optional[Dict[str, Any]] = None


class ServerErrorResponse(BaseModel):
    success: bool = False
    message: str = "An error occurred while processing your request."
