from api._shared import json_response, read_json
from plan_mail.service import handle_send_plan


def handler(request):
    method = getattr(request, "method", "") or ""
    payload = read_json(request) if method.upper() == "POST" else None
    status, body = handle_send_plan(method, payload)
    return json_response(body, status=status)
