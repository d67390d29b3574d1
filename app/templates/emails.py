"""HTML bodies for the contact form emails"""

from html import escape
from typing import Dict

CONTACT_NOTIFICATION_TEMPLATE = """
<html>
<body style="font-family: Arial, sans-serif; background-color: #ffffff; padding: 24px;">
    <div style="max-width: 672px; margin: 0 auto;">
        <h1 style="font-size: 24px; font-weight: 700; color: #1f2937; margin-bottom: 24px;">New Contact Form Submission</h1>
        <table style="width: 100%; border-collapse: collapse;">
{rows}
        </table>
        <div style="margin-top: 32px; padding-top: 24px; border-top: 1px solid #e5e7eb;">
            <p style="font-size: 14px; color: #6b7280;">This message was sent from your website's contact form.</p>
        </div>
    </div>
</body>
</html>
"""

ROW_TEMPLATE = """            <tr>
                <td style="font-weight: 500; color: #374151; padding: 8px 16px 8px 0; vertical-align: top;">{label}:</td>
                <td style="color: #4b5563; padding: 8px 0; white-space: pre-line;">{value}</td>
            </tr>"""

THANK_YOU_TEMPLATE = """
<html>
<body style="font-family: Arial, sans-serif; background-color: #f9fafb; padding: 16px;">
    <div style="background-color: #ffffff; border-radius: 12px; padding: 32px; max-width: 448px; margin: 0 auto; text-align: center;">
        <div style="font-size: 48px; color: #10b981; margin-bottom: 24px;">&#10003;</div>
        <h1 style="font-size: 30px; font-weight: 700; color: #111827; margin-bottom: 16px;">Thank You, {name}!</h1>
        <p style="color: #4b5563; margin-bottom: 24px; line-height: 1.6;">
            We've received your inquiry and our team will get back to you within 24-48 hours.
        </p>
        <div style="border-top: 1px solid #e5e7eb; margin: 24px 0;"></div>
        <p style="font-size: 14px; color: #6b7280;">
            In the meantime, feel free to explore our website or follow us on social media.
        </p>
    </div>
</body>
</html>
"""

# Label, field key, always shown
NOTIFICATION_ROWS = (
    ("Name", "name", False),
    ("Email", "email", False),
    ("Phone", "phone", False),
    ("Company", "company", False),
    ("Project Type", "project_type", True),
    ("Budget", "budget", True),
    ("Timeline", "timeline", True),
    ("Message", "message", True),
)


def render_contact_notification(fields: Dict[str, str]) -> str:
    """Operator notification listing every populated submission field"""
    rows = []
    for label, key, always in NOTIFICATION_ROWS:
        value = fields.get(key) or ""
        if not value and not always:
            continue
        rows.append(ROW_TEMPLATE.format(label=label, value=escape(value)))
    return CONTACT_NOTIFICATION_TEMPLATE.format(rows="\n".join(rows))


def render_thank_you(name: str) -> str:
    return THANK_YOU_TEMPLATE.format(name=escape(name))
