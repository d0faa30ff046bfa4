# app/routes/health.py
from typing import Optional
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health(request: Request):
    # Only checks that the handle is set, not that the server is reachable
    if request.app.state.database.connected:
        return PlainTextResponse("OK", status_code=200)
    return PlainTextResponse("Service Unavailable: MongoDB not connected", status_code=503)

@router.get("/greet")
async def greet(name: Optional[str] = None):
    return {"message": f"Hello, {name or 'World'}!"}
