"""
Plan delivery through the Resend API.

One send per call. Failures surface as DeliveryError; nothing is retried.
"""

from __future__ import annotations

import base64
import html
from typing import Any, Optional

import resend
from loguru import logger

from plan_mail.config.constants import ATTACHMENT_FILENAME, ATTACHMENT_MIME_TYPE, NAME_PLACEHOLDER
from plan_mail.config.settings import mail_settings


class DeliveryError(RuntimeError):
    pass


def _plan_email_html(display_name: Optional[str]) -> str:
    name = html.escape(display_name or NAME_PLACEHOLDER)
    return f"""
    <div style="font-family: Helvetica, Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <p>Hi {name},</p>
        <p>Your 30-day personalized plan is attached as a PDF.</p>
        <p>Stay consistent!<br/>The WearMinus Team</p>
    </div>
    """


def build_plan_email(
    to_email: str,
    display_name: Optional[str],
    pdf_bytes: bytes,
    settings: dict[str, Any],
) -> dict[str, Any]:
    params: dict[str, Any] = {
        "from": settings["sender"],
        "to": [to_email],
        "subject": settings["subject"],
        "html": _plan_email_html(display_name),
        "attachments": [
            {
                "filename": ATTACHMENT_FILENAME,
                "content": base64.b64encode(pdf_bytes).decode("utf-8"),
                "content_type": ATTACHMENT_MIME_TYPE,
            }
        ],
    }
    if settings.get("bcc"):
        params["bcc"] = [settings["bcc"]]
    if settings.get("reply_to"):
        params["reply_to"] = settings["reply_to"]
    return params


def send_plan_email(to_email: str, display_name: Optional[str], pdf_bytes: bytes) -> Optional[str]:
    settings = mail_settings()
    if not settings["api_key"]:
        raise DeliveryError("RESEND_API_KEY not configured.")
    resend.api_key = settings["api_key"]
    params = build_plan_email(to_email, display_name, pdf_bytes, settings)
    try:
        result = resend.Emails.send(params)
    except Exception as exc:
        raise DeliveryError(f"Resend send failed: {exc}") from exc
    message_id = result.get("id") if isinstance(result, dict) else None
    logger.debug("Resend accepted plan email to {} (id={})", to_email, message_id)
    return message_id
