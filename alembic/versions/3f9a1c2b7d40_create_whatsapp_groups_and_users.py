"""Create whatsapp_groups and users tables

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-19 10:12:07.518203

"""

from typing import Sequence, Union

from alembic import op  # type: ignore[attr-defined]
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9a1c2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "whatsapp_groups",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("whatsapp_link", sa.String(), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("country", sa.String(length=2), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("view_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_whatsapp_groups_category"), "whatsapp_groups", ["category"]
    )
    op.create_index(op.f("ix_whatsapp_groups_country"), "whatsapp_groups", ["country"])
    op.create_index(
        op.f("ix_whatsapp_groups_created_at"), "whatsapp_groups", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_whatsapp_groups_created_at"), table_name="whatsapp_groups")
    op.drop_index(op.f("ix_whatsapp_groups_country"), table_name="whatsapp_groups")
    op.drop_index(op.f("ix_whatsapp_groups_category"), table_name="whatsapp_groups")
    op.drop_table("whatsapp_groups")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
