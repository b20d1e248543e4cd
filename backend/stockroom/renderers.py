"""
Stockroom Backend — Response Renderers
========================================

What:  Turns handler results into HTTP responses, either as rendered HTML
       views or as bare JSON bodies.
Why:   One set of route handlers serves both formats. Handlers produce data;
       the renderer picked for the request decides what the bytes look like.
How:   ResponseRenderer is the abstract contract. HtmlRenderer renders Jinja2
       templates, JsonRenderer serializes schemas. ``get_renderer`` is the
       FastAPI dependency that picks one per request.

Selection (settings.response_mode):
    html  → HtmlRenderer for every request
    json  → JsonRenderer for every request
    auto  → JsonRenderer when the Accept header asks for application/json,
            HtmlRenderer otherwise

View names:
    index.html  landing page, no data
    stuff.html  list view, view-model {"inventory": [...]}
    item.html   detail view, the row's fields at top level
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from fastapi import Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from stockroom.config import settings
from stockroom.schemas.inventory import InventoryItemDetail, InventoryListItem


class ResponseRenderer(ABC):
    """
    Abstract interface for shaping handler results into responses.

    Contract:
        - Every method returns a complete Starlette Response with status 200
        - Error responses are not produced here; exception handlers own them
    """

    @abstractmethod
    def landing(self, request: Request) -> Response:
        """Static landing page for GET /."""
        ...

    @abstractmethod
    def render_list(self, request: Request, items: List[InventoryListItem]) -> Response:
        """All inventory rows, description omitted."""
        ...

    @abstractmethod
    def render_detail(self, request: Request, item: InventoryItemDetail) -> Response:
        """A single inventory row with its description."""
        ...


class HtmlRenderer(ResponseRenderer):
    """Renders the Jinja2 views from the templates directory."""

    def __init__(self, templates_dir: str):
        self.templates = Jinja2Templates(directory=templates_dir)

    def landing(self, request: Request) -> Response:
        return self.templates.TemplateResponse(request, "index.html", {})

    def render_list(self, request: Request, items: List[InventoryListItem]) -> Response:
        view_model = {"inventory": [item.model_dump() for item in items]}
        return self.templates.TemplateResponse(request, "stuff.html", view_model)

    def render_detail(self, request: Request, item: InventoryItemDetail) -> Response:
        return self.templates.TemplateResponse(request, "item.html", item.model_dump())


class JsonRenderer(ResponseRenderer):
    """
    Serializes results as bare JSON: an array for the list, an object for
    the detail. The landing page is the static ``index.html`` file.
    """

    def __init__(self, static_dir: str):
        self.static_dir = Path(static_dir)

    def landing(self, request: Request) -> Response:
        return FileResponse(self.static_dir / "index.html", media_type="text/html")

    def render_list(self, request: Request, items: List[InventoryListItem]) -> Response:
        return JSONResponse(content=[item.model_dump() for item in items])

    def render_detail(self, request: Request, item: InventoryItemDetail) -> Response:
        return JSONResponse(content=item.model_dump())


html_renderer = HtmlRenderer(settings.templates_dir)
json_renderer = JsonRenderer(settings.static_dir)


def wants_json(accept: str) -> bool:
    """True when the Accept header lists application/json ahead of text/html."""
    media_types = [part.split(";")[0].strip().lower() for part in accept.split(",")]
    for media_type in media_types:
        if media_type == "application/json":
            return True
        if media_type == "text/html":
            return False
    return False


def select_renderer(mode: str, accept: str = "") -> ResponseRenderer:
    """Pick the renderer for a response mode and the request's Accept header."""
    if mode == "json":
        return json_renderer
    if mode == "auto" and wants_json(accept):
        return json_renderer
    return html_renderer


async def get_renderer(request: Request) -> ResponseRenderer:
    """FastAPI dependency: the renderer for this request."""
    return select_renderer(settings.response_mode, request.headers.get("accept", ""))
