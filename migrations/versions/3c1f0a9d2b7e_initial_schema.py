"""initial_schema

Create the schema for Nyumba Connect mentorship:
- Accounts (owned by the account service; created here if missing)
- Mentorship requests (one open request per student/alumni pair)
- Mentorships (one active mentorship per pair)
- Messages (append-only thread per mentorship)
- Rate limit events (sliding-window counters)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), server_default="", nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("active", sa.Boolean(), server_default="true", nullable=False),
        sa.CheckConstraint(
            "role IN ('student', 'alumni', 'admin')", name="check_account_role"
        ),
        sa.PrimaryKeyConstraint("id"),
        if_not_exists=True,
    )

    # ========================================================================
    # MENTORSHIP REQUESTS table
    # ========================================================================
    op.create_table(
        "mentorship_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("alumni_id", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column(
            "requested_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("responded_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'declined')",
            name="check_request_status",
        ),
        sa.CheckConstraint(
            "student_id <> alumni_id", name="check_request_distinct_parties"
        ),
        sa.ForeignKeyConstraint(["student_id"], ["accounts.id"]),
        sa.ForeignKeyConstraint(["alumni_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_mentorship_requests_open_pair",
        "mentorship_requests",
        ["student_id", "alumni_id"],
        unique=True,
        postgresql_where=sa.text("status IN ('pending', 'accepted')"),
    )
    op.create_index(
        "idx_mentorship_requests_alumni",
        "mentorship_requests",
        ["alumni_id", "status"],
    )

    # ========================================================================
    # MENTORSHIPS table
    # ========================================================================
    op.create_table(
        "mentorships",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("alumni_id", sa.Integer(), nullable=False),
        sa.Column(
            "started_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("active", sa.Boolean(), server_default="true", nullable=False),
        sa.CheckConstraint(
            "student_id <> alumni_id", name="check_mentorship_distinct_members"
        ),
        sa.ForeignKeyConstraint(["student_id"], ["accounts.id"]),
        sa.ForeignKeyConstraint(["alumni_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_mentorships_active_pair",
        "mentorships",
        ["student_id", "alumni_id"],
        unique=True,
        postgresql_where=sa.text("active"),
    )
    op.create_index("idx_mentorships_alumni", "mentorships", ["alumni_id"])

    # ========================================================================
    # MESSAGES table
    # ========================================================================
    op.create_table(
        "messages",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("mentorship_id", sa.Integer(), nullable=False),
        sa.Column("sender_id", sa.Integer(), nullable=False),
        sa.Column("receiver_id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "sent_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("is_read", sa.Boolean(), server_default="false", nullable=False),
        sa.CheckConstraint(
            "sender_id <> receiver_id", name="check_message_distinct_parties"
        ),
        sa.ForeignKeyConstraint(
            ["mentorship_id"], ["mentorships.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(["sender_id"], ["accounts.id"]),
        sa.ForeignKeyConstraint(["receiver_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_messages_thread", "messages", ["mentorship_id", "sent_at", "id"]
    )
    op.create_index(
        "idx_messages_unread",
        "messages",
        ["receiver_id"],
        postgresql_where=sa.text("NOT is_read"),
    )

    # ========================================================================
    # RATE LIMIT EVENTS table
    # ========================================================================
    op.create_table(
        "rate_limit_events",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column(
            "occurred_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_rate_limit_events_key_time",
        "rate_limit_events",
        ["key", "occurred_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("rate_limit_events")
    op.drop_table("messages")
    op.drop_table("mentorships")
    op.drop_table("mentorship_requests")
    # accounts belongs to the account service and is left in place
