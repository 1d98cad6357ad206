from __future__ import annotations

from pathlib import Path

# BASE_DIR points to the project root
BASE_DIR = Path(__file__).resolve().parents[2]

# A4 in points
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
MARGIN_LEFT = 50
TOP_OFFSET = 800
BOTTOM_MARGIN = 60

DOCUMENT_TITLE = "Your 30-Day Personalized Fitness Plan"
DOCUMENT_AUTHOR = "WearMinus"
NAME_PLACEHOLDER = "there"

ATTACHMENT_FILENAME = "FitnessPlan.pdf"
ATTACHMENT_MIME_TYPE = "application/pdf"

DEFAULT_SENDER = "onboarding@resend.dev"
DEFAULT_SUBJECT = "Your Personalized 30-Day Fitness Plan"
DEFAULT_LOG_LEVEL = "INFO"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

PLAN_KEYS = ("plan", "plan_data")
NAME_KEYS = ("user_name", "firstName", "name")
DAY_TITLE_KEYS = ("title", "day", "label")
DAY_EXERCISE_KEYS = ("exercises", "blocks")
