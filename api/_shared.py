import json
import sys
from pathlib import Path
from typing import Any

from vercel_runtime import Response

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from plan_mail.config.constants import CORS_HEADERS  # noqa: E402
from plan_mail.log import configure_logging  # noqa: E402
from plan_mail.service import parse_payload  # noqa: E402

configure_logging()


def json_response(payload: dict[str, Any] | None, status: int = 200) -> Response:
    headers = {**CORS_HEADERS}
    if payload is None:
        return Response(b"", status=status, headers=headers)
    headers["Content-Type"] = "application/json; charset=utf-8"
    return Response(json.dumps(payload), status=status, headers=headers)


def read_json(request) -> dict[str, Any] | None:
    return parse_payload(getattr(request, "body", None))
