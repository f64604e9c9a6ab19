import json
from typing import Optional

from fastapi import FastAPI, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from database import init_db
from handlers import Operation, dispatch
from logger import setup_logger
from outcomes import Outcome
from store import CredentialStore

setup_logger()

# Create database tables on startup (simple dev setup)
init_db()

app = FastAPI(title="Credential Service")

# One store handle per process, shared read-only by every request
_store = CredentialStore()


def get_store() -> CredentialStore:
    """FastAPI dependency returning the process-wide credential store."""
    return _store


def to_response(outcome: Outcome, username: Optional[str] = None) -> JSONResponse:
    """Turn a handler outcome into the JSON body and status the client sees."""
    if outcome.ok:
        body = {"ok": True, "message": outcome.message}
        if outcome is Outcome.AUTHENTICATED:
            body["username"] = username
    else:
        body = {"ok": False, "error": outcome.message}
    return JSONResponse(body, status_code=outcome.status_code)


async def _handle(operation: Operation, request: Request, store: CredentialStore) -> JSONResponse:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return to_response(Outcome.INVALID_REQUEST)

    # bcrypt is deliberately slow; keep it off the event loop
    outcome = await run_in_threadpool(dispatch, operation, store, payload)

    username = None
    if outcome is Outcome.AUTHENTICATED:
        username = payload["username"].strip()
    return to_response(outcome, username)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"ok": True}


# ---------------- Registration ----------------

@app.post("/register")
async def register_submit(request: Request, store: CredentialStore = Depends(get_store)):
    """
    Register a new user.

    Payload:
        {
            "username": "...",
            "password": "..."
        }
    """
    return await _handle(Operation.REGISTER, request, store)


# ---------------- Login ----------------

@app.post("/login")
async def login_submit(request: Request, store: CredentialStore = Depends(get_store)):
    """
    Verify a username/password pair. No token is issued.

    Payload:
        {
            "username": "...",
            "password": "..."
        }
    """
    return await _handle(Operation.LOGIN, request, store)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
