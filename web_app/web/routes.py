"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from golinks.common.logging_config import get_logger
from golinks.storage.exceptions import LinkStoreError

router = APIRouter()

logger = get_logger("golinks.web")

# Setup Jinja2 templates
template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)

# "/" and shortcuts answer every method the same way; only /add checks it
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _form_text(form, name: str) -> str:
    """Text value of a form field; file uploads and missing fields read as empty."""
    value = form.get(name)
    return value if isinstance(value, str) else ""


@router.api_route("/", methods=ALL_METHODS, response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Render the add form and every current link."""
    service = request.app.state.service
    config = request.app.state.config

    links = await service.list_links()

    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "links": sorted(links.items()),
                "link_prefix": config.link_prefix,
            },
        )
    except TemplateError as e:
        logger.error(f"Failed to render homepage: {e}")
        return PlainTextResponse(
            "Template error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@router.api_route("/add", methods=ALL_METHODS, include_in_schema=False)
async def add_link(request: Request):
    """Handle form submission to add a link."""
    if request.method != "POST":
        return PlainTextResponse(
            "Method not allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": "POST"},
        )

    service = request.app.state.service

    try:
        form = await request.form()
    except (StarletteHTTPException, MultiPartException, ValueError):
        return PlainTextResponse(
            "Invalid form data",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        await service.add_link(
            shortcut=_form_text(form, "shortcut"),
            url=_form_text(form, "url"),
        )
    except ValueError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except LinkStoreError as e:
        logger.error(f"Failed to save link: {e}")
        return PlainTextResponse(
            "Failed to save link",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.api_route("/{shortcut:path}", methods=ALL_METHODS, include_in_schema=False)
async def redirect_to_url(request: Request, shortcut: str):
    """Redirect to the stored destination, or back to the homepage if unknown."""
    service = request.app.state.service

    url = await service.resolve(shortcut)

    if url is None:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)

    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
