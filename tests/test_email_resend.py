import json

import httpx
import pytest

from app.utils.email_resend import EmailConfigurationError, ResendClient


def make_client(handler, requests=None):
    def _record(request):
        if requests is not None:
            requests.append(request)
        return handler(request)

    return ResendClient("re_test_key", base_url="https://resend.test", transport=httpx.MockTransport(_record))


@pytest.mark.asyncio
async def test_send_email_posts_payload():
    requests = []
    client = make_client(lambda request: httpx.Response(200, json={"id": "49a3999c"}), requests)

    result = await client.send_email(
        from_email="CadOutSource <info@cadoutsource.co.uk>",
        to="jo@x.com",
        subject="Thank you for contacting us!",
        html="<p>Hi</p>",
    )

    assert result.ok
    assert result.data == {"id": "49a3999c"}

    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://resend.test/emails"
    assert request.headers["Authorization"] == "Bearer re_test_key"
    assert json.loads(request.content) == {
        "from": "CadOutSource <info@cadoutsource.co.uk>",
        "to": ["jo@x.com"],
        "subject": "Thank you for contacting us!",
        "html": "<p>Hi</p>",
    }


@pytest.mark.asyncio
async def test_provider_error_is_returned_not_raised():
    body = {"statusCode": 422, "name": "validation_error", "message": "Invalid `to` field."}
    client = make_client(lambda request: httpx.Response(422, json=body))

    result = await client.send_email("a <a@x.com>", "bad", "subject", "<p></p>")

    assert not result.ok
    assert result.data is None
    assert result.error == {"name": "validation_error", "message": "Invalid `to` field.", "statusCode": 422}


@pytest.mark.asyncio
async def test_non_json_error_body():
    client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

    result = await client.send_email("a <a@x.com>", "jo@x.com", "subject", "<p></p>")

    assert result.error == {"name": "application_error", "message": "Bad Gateway", "statusCode": 502}


@pytest.mark.asyncio
async def test_transport_error_raises():
    def _fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(_fail)

    with pytest.raises(httpx.ConnectError):
        await client.send_email("a <a@x.com>", "jo@x.com", "subject", "<p></p>")


@pytest.mark.parametrize("api_key", [None, ""])
def test_missing_api_key(api_key):
    with pytest.raises(EmailConfigurationError):
        ResendClient(api_key)
