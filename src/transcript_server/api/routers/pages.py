"""HTML pages served by the full variant."""

from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...config import APIConfig
from ...dependencies import get_config

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def page_context(config: APIConfig) -> dict:
    return {
        "title": config.title,
        "version": config.version,
        "default_language": config.default_language,
        "secondary_language": config.secondary_language,
    }


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, config: APIConfig = Depends(get_config)):
    """Demo page with a form posting to ``/get_transcript``."""
    return templates.TemplateResponse(request, "index.html", page_context(config))


@router.get("/api/docs", response_class=HTMLResponse, include_in_schema=False)
async def api_docs(request: Request, config: APIConfig = Depends(get_config)):
    """Human-readable documentation for ``/api/transcript``."""
    return templates.TemplateResponse(request, "api_docs.html", page_context(config))
