"""
Stockroom Backend — Inventory Route Handlers
==============================================

What:  GET / (landing), GET /stuff (list), GET /stuff/item/{id} (detail).
How:   Each handler awaits one InventoryService call and hands the result to
       the renderer chosen for the request. Failures are raised as
       QueryError / NotFoundError and answered by the global handlers.
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from stockroom.database import get_db_session
from stockroom.renderers import ResponseRenderer, get_renderer
from stockroom.schemas.inventory import (
    ErrorResponse,
    InventoryItemDetail,
    InventoryListItem,
)
from stockroom.services.inventory_service import inventory_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Inventory"])


@router.get(
    "/",
    summary="Landing page",
    response_class=Response,
)
async def home(
    request: Request,
    renderer: ResponseRenderer = Depends(get_renderer),
) -> Response:
    return renderer.landing(request)


@router.get(
    "/stuff",
    responses={
        200: {"description": "Every inventory row", "model": list[InventoryListItem]},
        500: {"description": "Query failed", "model": ErrorResponse},
    },
    summary="List inventory",
    response_class=Response,
)
async def list_stuff(
    request: Request,
    renderer: ResponseRenderer = Depends(get_renderer),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    List every inventory row as {id, item, quantity}.

    No query parameters and no pagination. Row order is whatever the
    database returns.
    """
    items = await inventory_service.list_items(db)
    return renderer.render_list(request, items)


@router.get(
    "/stuff/item/{item_id}",
    responses={
        200: {"description": "The inventory row", "model": InventoryItemDetail},
        404: {"description": "No row with this id", "content": {"text/plain": {}}},
        500: {"description": "Query failed", "model": ErrorResponse},
    },
    summary="Get one inventory item",
    response_class=Response,
)
async def get_stuff_item(
    item_id: str,
    request: Request,
    renderer: ResponseRenderer = Depends(get_renderer),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Get one inventory row including its description.

    Args:
        item_id: Taken as a string so the 404 message can echo it exactly;
                 the service parses it to an integer before binding it.
    """
    item = await inventory_service.get_item(db, item_id)
    return renderer.render_detail(request, item)
