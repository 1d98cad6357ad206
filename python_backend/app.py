"""
FastAPI backend for local development.
Serves the send-plan endpoint without the Vercel runtime.
"""

import asyncio
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from plan_mail.log import configure_logging
from plan_mail.service import handle_send_plan, parse_payload

# Configuration
_ENV_PATH = os.path.join(os.path.dirname(__file__), ".env")
load_dotenv(dotenv_path=_ENV_PATH)
configure_logging()

app = FastAPI(title="Plan Mailer API", version="1.0.0")

# Allow CORS for the storefront
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "plan-mailer"}


@app.api_route("/api/send-plan", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def send_plan(request: Request):
    """Render the posted plan to PDF and email it"""
    payload = parse_payload(await request.body()) if request.method == "POST" else None
    # Rendering and the Resend call block; keep them off the event loop.
    status, body = await asyncio.to_thread(handle_send_plan, request.method, payload)
    if body is None:
        return Response(status_code=status)
    return JSONResponse(body, status_code=status)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=int(os.environ.get("PORT", "8000")))
