"""
Request handling for the send-plan endpoint, shared by the Vercel function
and the FastAPI app.

Delivery is synchronous: the Resend call finishes before the response is
built, so a failed send reaches the caller as a 502.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from loguru import logger

from plan_mail.config.settings import mail_settings
from plan_mail.mail.resend_client import DeliveryError, send_plan_email
from plan_mail.pdf.writer import render_plan_pdf
from plan_mail.plan.fields import extract_display_name, extract_email, extract_plan


def parse_payload(body: bytes | str | None) -> Optional[dict[str, Any]]:
    """Decode a request body into a JSON object; anything else is None."""
    if not body:
        return None
    if isinstance(body, str):
        body = body.encode("utf-8")
    try:
        payload = json.loads(body.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def handle_send_plan(method: str, payload: Optional[dict[str, Any]]) -> tuple[int, Optional[dict[str, Any]]]:
    method = (method or "").upper()
    if method == "OPTIONS":
        return 200, None
    if method != "POST":
        return 405, {"error": "Method not allowed"}
    if not isinstance(payload, dict):
        return 400, {"error": "Invalid JSON payload."}

    email = extract_email(payload)
    plan = extract_plan(payload)
    missing = [name for name, value in (("email", email), ("plan", plan)) if value is None]
    if missing:
        label = "field" if len(missing) == 1 else "fields"
        return 400, {"error": f"Missing required {label}: {', '.join(missing)}"}

    if not mail_settings()["api_key"]:
        logger.error("RESEND_API_KEY is not set; cannot send plan to {}", email)
        return 500, {"error": "Email provider not configured."}

    display_name = extract_display_name(payload)
    try:
        pdf_bytes, page_count = render_plan_pdf(plan, display_name)
    except Exception:
        logger.exception("Plan render failed for {}", email)
        return 500, {"ok": False, "error": "Failed to render plan."}

    try:
        message_id = send_plan_email(email, display_name, pdf_bytes)
    except DeliveryError:
        logger.exception("Email send failed for {}", email)
        return 502, {"ok": False, "error": "Email delivery failed."}

    logger.info("Sent {}-page plan to {} (id={})", page_count, email, message_id)
    return 200, {"ok": True, "message": "Plan sent by email"}
