"""
Stockroom Backend — Inventory Service (Query + Shaping)
=========================================================

What:  Runs the two fixed read queries against the `stuff` table and shapes
       the rows into response schemas.
Why:   Keeps SQL out of the route handlers; the handlers only decide how to
       render what comes back.
How:   Each method awaits exactly one query through ``fetch_rows`` and either
       returns schemas or raises QueryError / NotFoundError.
Who:   Called by the routes in ``stockroom.routes.stuff``.

Queries:
    list:   SELECT id, item, quantity FROM stuff
            No WHERE, no ORDER BY: rows come back in storage-default order.
    detail: SELECT id, item, quantity, description FROM stuff WHERE id = :id
            The path value is parsed to an integer and bound by the driver;
            it is never interpolated into the SQL text. Values that are not
            integers cannot match any row and are answered with 404 directly.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.database import fetch_rows
from stockroom.exceptions import NotFoundError, QueryError
from stockroom.schemas.inventory import InventoryItemDetail, InventoryListItem

logger = logging.getLogger(__name__)

READ_STUFF_ALL_SQL = """
    SELECT
        id, item, quantity
    FROM
        stuff
"""

READ_ITEM_SQL = """
    SELECT
        id, item, quantity, description
    FROM
        stuff
    WHERE
        id = :id
"""

MAX_KEY = 2**63 - 1


class InventoryService:
    """
    Read-only access to inventory rows.

    Stateless: the session is passed in on every call, so one instance is
    shared by all requests.
    """

    async def list_items(self, db: AsyncSession) -> List[InventoryListItem]:
        """
        Fetch every inventory row as an {id, item, quantity} projection.

        Raises:
            QueryError: The query failed for any reason (→ 500)
        """
        try:
            rows = await fetch_rows(db, READ_STUFF_ALL_SQL)
        except SQLAlchemyError as e:
            raise QueryError.from_exception(e, READ_STUFF_ALL_SQL) from e

        logger.debug("Listed %d inventory rows", len(rows))
        return [InventoryListItem.model_validate(row) for row in rows]

    async def get_item(self, db: AsyncSession, item_id: str) -> InventoryItemDetail:
        """
        Fetch one inventory row by id, description included.

        Args:
            db:       Async database session
            item_id:  The raw path value. Parsed with int() (so "01" and " 1"
                      find row 1) and bound as an integer parameter.

        Returns:
            The first matching row. Duplicate ids are not reported.

        Raises:
            NotFoundError: No row matched (→ 404)
            QueryError:    The query failed for any reason (→ 500)
        """
        try:
            key = int(item_id)
        except ValueError:
            raise NotFoundError(item_id=item_id) from None

        # Out of range for a 64-bit key column; drivers reject it outright
        if not -MAX_KEY <= key <= MAX_KEY:
            raise NotFoundError(item_id=item_id)

        try:
            rows = await fetch_rows(db, READ_ITEM_SQL, {"id": key})
        except SQLAlchemyError as e:
            raise QueryError.from_exception(e, READ_ITEM_SQL) from e

        if not rows:
            raise NotFoundError(item_id=item_id)

        return InventoryItemDetail.model_validate(rows[0])


# ── Singleton Instance ────────────────────────────────────────────────────
inventory_service = InventoryService()
