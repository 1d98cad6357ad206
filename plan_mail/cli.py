from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from plan_mail.log import configure_logging
from plan_mail.mail.resend_client import send_plan_email
from plan_mail.pdf.writer import render_plan_pdf
from plan_mail.plan.fields import extract_display_name, extract_plan


def _load_plan(path: str) -> tuple[dict[str, Any], str | None]:
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise SystemExit(f"{path}: expected a JSON object.")
    # Accept either a bare plan or a full request body.
    plan = extract_plan(data)
    if plan is None:
        return data, None
    return plan, extract_display_name(data)


def run_render(args: argparse.Namespace) -> None:
    plan, name = _load_plan(args.plan)
    pdf_bytes, page_count = render_plan_pdf(plan, args.name or name)
    out = Path(args.out)
    out.write_bytes(pdf_bytes)
    print(f"Wrote {page_count}-page plan to {out}")


def run_send(args: argparse.Namespace) -> None:
    plan, name = _load_plan(args.plan)
    name = args.name or name
    pdf_bytes, page_count = render_plan_pdf(plan, name)
    message_id = send_plan_email(args.email, name, pdf_bytes)
    print(f"Sent {page_count}-page plan to {args.email} (id={message_id})")


def main() -> None:
    # The repo-root .env is loaded by plan_mail.config.settings.
    load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))
    parser = argparse.ArgumentParser(description="Render fitness plans to PDF and email them.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    sub = parser.add_subparsers(dest="command", required=True)

    render_parser = sub.add_parser("render", help="Write the plan PDF to a local file.")
    render_parser.add_argument("plan", help="Path to a plan (or request body) JSON file.")
    render_parser.add_argument("--name", default=None, help="Recipient display name.")
    render_parser.add_argument("--out", default="FitnessPlan.pdf", help="Output PDF path.")
    render_parser.set_defaults(func=run_render)

    send_parser = sub.add_parser("send", help="Render the plan and email it through Resend.")
    send_parser.add_argument("plan", help="Path to a plan (or request body) JSON file.")
    send_parser.add_argument("--email", required=True, help="Recipient address.")
    send_parser.add_argument("--name", default=None, help="Recipient display name.")
    send_parser.set_defaults(func=run_send)

    args = parser.parse_args()
    configure_logging(args.log_level.upper() if args.log_level else None)
    args.func(args)


if __name__ == "__main__":
    main()
