"""Web interface routes implementation."""

import os
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..dependencies import require_basic_auth
from ..links import origin_for, short_url_for
from lib.errors import (
    DuplicateCodeError,
    NotFoundError,
    StoreError,
    ValidationError,
)

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def not_found_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "not_found.html", status_code=status.HTTP_404_NOT_FOUND
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Public welcome page."""
    return templates.TemplateResponse(request, "index.html")


@router.get("/api-docs", response_class=HTMLResponse, include_in_schema=False)
async def api_docs(request: Request):
    """Public API documentation, with examples built on the caller's origin."""
    return templates.TemplateResponse(
        request, "api_docs.html", {"origin": origin_for(request)}
    )


@router.get(
    "/short",
    response_class=HTMLResponse,
    dependencies=[Depends(require_basic_auth)],
    include_in_schema=False,
)
async def short_form(request: Request):
    """Show the create form."""
    return templates.TemplateResponse(request, "short_form.html")


@router.post(
    "/short",
    response_class=HTMLResponse,
    dependencies=[Depends(require_basic_auth)],
    include_in_schema=False,
)
async def create_short_url_web(
    request: Request,
    url: Optional[str] = Form(None),
    custom_code: Optional[str] = Form(None),
):
    """Handle form submission to create a short URL."""
    service = request.app.state.service
    logger = request.app.state.logger

    try:
        result = await service.create_short_url(
            original_url=url,
            custom_code=custom_code,
        )
    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except DuplicateCodeError as e:
        return PlainTextResponse(f"Error: {e}", status_code=status.HTTP_400_BAD_REQUEST)
    except StoreError as e:
        return PlainTextResponse(f"Error: {e}", status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception(f"Unexpected error creating short URL: {e}")
        return PlainTextResponse(
            f"Error: {e}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return templates.TemplateResponse(
        request,
        "short_success.html",
        {
            "short_url": short_url_for(request, result["short_code"]),
            "original_url": result["original_url"],
        },
    )


@router.get("/{short_code:path}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service
    logger = request.app.state.logger

    try:
        mapping = await service.get_url_info(short_code)
    except NotFoundError:
        return not_found_page(request)
    except Exception as e:
        logger.exception(f"Error resolving {short_code}: {e}")
        return PlainTextResponse(
            f"Error: {e}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return RedirectResponse(url=mapping.original_url, status_code=status.HTTP_302_FOUND)
