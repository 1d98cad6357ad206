from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

from plan_mail.config.constants import BASE_DIR, DEFAULT_LOG_LEVEL, DEFAULT_SENDER, DEFAULT_SUBJECT

_ROOT_ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=_ROOT_ENV_PATH)


def mail_settings() -> dict[str, Any]:
    api_key = os.environ.get("RESEND_API_KEY")
    sender = os.environ.get("PLAN_MAIL_FROM") or DEFAULT_SENDER
    subject = os.environ.get("PLAN_MAIL_SUBJECT") or DEFAULT_SUBJECT
    bcc = os.environ.get("PLAN_MAIL_BCC") or None
    reply_to = os.environ.get("PLAN_MAIL_REPLY_TO") or None
    return {
        "api_key": api_key,
        "sender": sender,
        "subject": subject,
        "bcc": bcc,
        "reply_to": reply_to,
    }


def log_level() -> str:
    return (os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
