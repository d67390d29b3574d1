from fastapi import APIRouter
from fastapi.responses import HTMLResponse, RedirectResponse
from typing import Optional
import hmac

from app.config.settings import THANKYOU_TOKEN, BRAND_NAME

router = APIRouter()

THANKYOU_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="robots" content="noindex">
    <title>Thank You | {brand}</title>
</head>
<body style="font-family: Arial, sans-serif; text-align: center; padding: 64px 16px;">
    <h1>Thank you for getting in touch!</h1>
    <p>Your message has been sent. Our team will get back to you within 24-48 hours.</p>
    <p><a href="/">Back to {brand}</a></p>
</body>
</html>
"""


def token_is_valid(token: Optional[str]) -> bool:
    """Only visitors redirected by the contact forms carry the shared token"""
    if not THANKYOU_TOKEN or not token:
        return False
    return hmac.compare_digest(token, THANKYOU_TOKEN)


@router.get("/thankyou", tags=["pages"])
async def thank_you_page(token: Optional[str] = None):
    """Acknowledgment page shown after a successful submission"""
    if not token_is_valid(token):
        return RedirectResponse(url="/")
    return HTMLResponse(THANKYOU_PAGE.format(brand=BRAND_NAME))
