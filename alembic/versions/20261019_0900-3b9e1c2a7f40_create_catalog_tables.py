"""create_catalog_tables

Revision ID: 3b9e1c2a7f40
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b9e1c2a7f40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp_columns() -> list[sa.Column]:
    """id/created_at/updated_at from BaseMutableModel."""
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _audit_columns() -> list[sa.Column]:
    """created_by/created_date/updated_by/updated_date from AuditMixin."""
    return [
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(length=255), nullable=False),
        sa.Column("updated_date", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create identity_users, user_profiles, and products tables."""
    op.create_table(
        "identity_users",
        *_timestamp_columns(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column(
            "normalized_email",
            sa.String(length=255),
            nullable=False,
            comment="Trimmed, lowercased email (join key to user_profiles)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "role", sa.String(length=20), nullable=False, comment="Admin or User"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_identity_users_normalized_email"),
        "identity_users",
        ["normalized_email"],
        unique=True,
    )

    op.create_table(
        "user_profiles",
        *_timestamp_columns(),
        *_audit_columns(),
        sa.Column("full_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("normalized_email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_user_profiles_normalized_email"),
        "user_profiles",
        ["normalized_email"],
        unique=True,
    )

    op.create_table(
        "products",
        *_timestamp_columns(),
        *_audit_columns(),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_products_name"), "products", ["name"], unique=False)


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_index(op.f("ix_products_name"), table_name="products")
    op.drop_table("products")
    op.drop_index(op.f("ix_user_profiles_normalized_email"), table_name="user_profiles")
    op.drop_table("user_profiles")
    op.drop_index(op.f("ix_identity_users_normalized_email"), table_name="identity_users")
    op.drop_table("identity_users")
