# Proxy/main.py
from typing import Any

import requests
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from .config import settings
from .logging_config import setup_logging
from .schemas import ChatResponse, HealthResponse, ProxyError
import logging

setup_logging()
logger = logging.getLogger("leave_chat.proxy")

app = FastAPI(title="Leave Chat Proxy")


# -----------------------------
# Upstream helpers
# -----------------------------
def backend_chat_url() -> str:
    return f"{settings.LEAVE_API_BASE.rstrip('/')}/chat"


def forward_chat(payload: Any) -> requests.Response:
    """
    POST the payload to the leave backend untouched.
    No retries and no explicit timeout; the backend owns validation and auth.
    """
    return requests.post(
        backend_chat_url(),
        json=payload,
        headers={"Content-Type": "application/json"},
    )


# -----------------------------
# Endpoints
# -----------------------------
@app.get("/", response_model=HealthResponse)
def health_check():
    return HealthResponse()


@app.post(
    "/api/chat",
    responses={
        200: {"model": ChatResponse},
        500: {"model": ProxyError, "description": "Backend unreachable or returned non-JSON"},
    },
)
async def chat(request: Request):
    """
    Relay a chat request to the leave backend.

    The backend's JSON body and status code come back as they are, so a 404
    from the backend stays a 404 here. Any failure to read the request, reach
    the backend or parse its reply collapses to a 500 with {"error": ...}.
    """
    try:
        payload = await request.json()
        r = await run_in_threadpool(forward_chat, payload)
        data = r.json()
    except Exception as e:
        logger.exception("chat: proxy to %s failed", backend_chat_url())
        return JSONResponse({"error": str(e) or "Proxy error"}, status_code=500)

    logger.info("chat: backend answered %s", r.status_code)
    return JSONResponse(data, status_code=r.status_code)
