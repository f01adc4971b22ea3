"""FastAPI server guarded by the runtime token."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, HTTPException

from .auth import AuthToken
from .config import get_token_name

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

# Global state
start_time: float = 0
authority = AuthToken(get_token_name(), logi=logger.info)


@asynccontextmanager
async def lifespan(app: FastAPI):
    global start_time
    start_time = time.time()
    # Must finish before any request is served
    await authority.init()
    yield
    logger.info("Server shutting down")


app = FastAPI(lifespan=lifespan)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "ready": authority.ready,
        "uptime_seconds": int(time.time() - start_time),
    }


@app.get("/auth/check")
async def auth_check(authorization: str = Header(None)):
    _verify_rest_auth(authorization)
    return {"authenticated": True}


def _verify_rest_auth(authorization: str | None):
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")
    token = authorization.removeprefix("Bearer ")
    if not authority.check(token):
        raise HTTPException(status_code=403, detail="Invalid token")
