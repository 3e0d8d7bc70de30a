"""Initial schema — products, students.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(19, 2), nullable=False),
        sa.CheckConstraint("price >= 0.01", name="ck_products_price_min"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "students",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.CheckConstraint("age >= 1", name="ck_students_age_min"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("students")
    op.drop_table("products")
