from typing import Any, Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from . import proxy

router = APIRouter()

def to_http_response(result: proxy.RelayResponse) -> Response:
    if result.is_json:
        return JSONResponse(status_code=result.status, content=result.content)
    return PlainTextResponse(status_code=result.status, content=result.content)

async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None

@router.post("/ticketing/issue")
async def create_ticketing_issue(
    request: Request,
    x_ticket_auth_token: Optional[str] = Header(default=None),
):
    body = await _read_body(request)
    # requests is blocking; keep it off the event loop
    result = await run_in_threadpool(proxy.create_ticketing_issue, body, x_ticket_auth_token)
    return to_http_response(result)

@router.post("/tracker/issue")
async def create_tracker_issue(
    request: Request,
    x_tracker_auth_token: Optional[str] = Header(default=None),
):
    body = await _read_body(request)
    if not isinstance(body, dict):
        body = {}
    result = await run_in_threadpool(
        proxy.create_tracker_issue,
        owner=body.get("owner"),
        repo=body.get("repo"),
        title=body.get("title"),
        body=body.get("body"),
        labels=body.get("labels"),
        auth_token=x_tracker_auth_token,
    )
    return to_http_response(result)
