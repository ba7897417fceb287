"""SQLAlchemy table definitions for Nyumba Connect mentorship.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (owned by the account service, read-only here)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False, server_default=""),
    Column("role", String(20), nullable=False),  # 'student', 'alumni', 'admin'
    Column("active", Boolean, nullable=False, server_default="true"),
    CheckConstraint(
        "role IN ('student', 'alumni', 'admin')", name="check_account_role"
    ),
)

# ============================================================================
# MENTORSHIP REQUESTS TABLE
# ============================================================================
mentorship_requests_table = Table(
    "mentorship_requests",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("student_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("alumni_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("message", Text, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "requested_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'declined')", name="check_request_status"
    ),
    CheckConstraint("student_id <> alumni_id", name="check_request_distinct_parties"),
)

# At most one open request per pair
Index(
    "uq_mentorship_requests_open_pair",
    mentorship_requests_table.c.student_id,
    mentorship_requests_table.c.alumni_id,
    unique=True,
    postgresql_where=text("status IN ('pending', 'accepted')"),
)
Index(
    "idx_mentorship_requests_alumni",
    mentorship_requests_table.c.alumni_id,
    mentorship_requests_table.c.status,
)

# ============================================================================
# MENTORSHIPS TABLE
# ============================================================================
mentorships_table = Table(
    "mentorships",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("student_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("alumni_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column(
        "started_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("active", Boolean, nullable=False, server_default="true"),
    CheckConstraint(
        "student_id <> alumni_id", name="check_mentorship_distinct_members"
    ),
)

# At most one active mentorship per pair
Index(
    "uq_mentorships_active_pair",
    mentorships_table.c.student_id,
    mentorships_table.c.alumni_id,
    unique=True,
    postgresql_where=text("active"),
)
Index("idx_mentorships_alumni", mentorships_table.c.alumni_id)

# ============================================================================
# MESSAGES TABLE
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "mentorship_id",
        Integer,
        ForeignKey("mentorships.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("sender_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("receiver_id", Integer, ForeignKey("accounts.id"), nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "sent_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    CheckConstraint("sender_id <> receiver_id", name="check_message_distinct_parties"),
)

Index(
    "idx_messages_thread",
    messages_table.c.mentorship_id,
    messages_table.c.sent_at,
    messages_table.c.id,
)
Index(
    "idx_messages_unread",
    messages_table.c.receiver_id,
    postgresql_where=text("NOT is_read"),
)

# ============================================================================
# RATE LIMIT EVENTS TABLE
# ============================================================================
rate_limit_events_table = Table(
    "rate_limit_events",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("key", String(100), nullable=False),  # '<action>:<actor_id>'
    Column(
        "occurred_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_rate_limit_events_key_time",
    rate_limit_events_table.c.key,
    rate_limit_events_table.c.occurred_at,
)
