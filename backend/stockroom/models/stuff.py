"""
Stockroom Backend — Stuff SQLAlchemy Model
============================================

What:  ORM declaration of the `stuff` inventory table.
Why:   Gives the test suite and local development a single definition of the
       table shape to create with ``Base.metadata.create_all``.
Who:   Used by ``stockroom.database.create_tables`` and by test fixtures that
       seed rows. Request handlers never go through the ORM; they run fixed
       SQL text (see ``stockroom.services.inventory_service``).

Table shape:
    id          INTEGER primary key
    item        VARCHAR(45)  display name
    quantity    INTEGER      units on hand
    description VARCHAR(150) free text, only shown on the detail page
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.database import Base


class StuffItem(Base):
    """One row of inventory. The server only ever reads these."""

    __tablename__ = "stuff"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item: Mapped[str] = mapped_column(String(45), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(String(150), nullable=True)

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<StuffItem(id={self.id}, item='{self.item}', quantity={self.quantity})>"
