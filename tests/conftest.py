import os

import pytest

os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("OFFICIAL_EMAIL", "office@cadoutsource.co.uk")
os.environ.setdefault("THANKYOU_TOKEN", "thanks-token")

from fakes import FakeProvider


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def detailed_payload():
    return {
        "name": "Jo",
        "email": "jo@x.com",
        "phone": "1234567890",
        "projectType": "CAD Conversion",
        "budget": "Under £1,000",
        "timeline": "Flexible",
        "message": "please quote this small job for me",
    }


@pytest.fixture
def quick_payload():
    return {
        "fullName": "Sam Taylor",
        "email": "sam.taylor@buildco.co.uk",
        "phone": "+44 (0)20 7946-0958",
        "service": "hvac",
        "message": "Need HVAC drawings for a two storey office.",
    }
