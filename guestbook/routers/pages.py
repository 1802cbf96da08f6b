from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(prefix="", tags=["pages"])


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/", response_class=HTMLResponse)
def api_info(request: Request):
    """Informational page describing the signatures API."""
    templates = _templates(request)
    return templates.TemplateResponse(request, "index.html", {"title": request.app.title})
