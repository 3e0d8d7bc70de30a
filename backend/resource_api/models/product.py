"""Product ORM — persists a catalogue product.

Invariants:
    - id is an integer primary key assigned by the database on insert, never reused
    - name and description are non-nullable text
    - price is NUMERIC(19, 2), non-nullable, at least 0.01 (CHECK constraint) and at most PRICE_MAX

Design Decisions:
    - BigInteger id with an Integer variant on SQLite: only INTEGER PRIMARY KEY aliases
      the rowid there, which AUTOINCREMENT needs
    - sqlite_autoincrement: ids of deleted rows are not handed out again
"""

from decimal import Decimal

from sqlalchemy import BigInteger, CheckConstraint, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.db.base import Base

# NUMERIC(19, 2): 17 integer digits, 2 fractional
PRICE_MAX = Decimal("99999999999999999.99")


class Product(Base):
    """Product entity — name, description and price."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0.01", name="ck_products_price_min"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, name={self.name!r}, price={self.price!r})>"
