"""Create social listening schema.

Revision ID: 0001_social_listening
Revises:
Create Date: 2026-10-19

This migration creates:
1. posts, unique on (platform_id, external_id)
2. analysis_batches and the per-batch tables: themes, sentiment_snapshots,
   competitor_mentions, communities
3. alerts and digests
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_social_listening"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _now(name: str) -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
    )


def upgrade() -> None:
    """Create all tables and their read-path indexes."""
    op.create_table(
        "posts",
        _id(),
        sa.Column("platform_id", sa.String(50), nullable=False),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("author_id", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("posted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("engagement_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("metadata", postgresql.JSONB(), nullable=False, server_default="{}"),
        _now("collected_at"),
        sa.UniqueConstraint("platform_id", "external_id", name="uq_posts_platform_external"),
    )
    op.create_index("idx_posts_collected_at", "posts", ["collected_at"])
    op.create_index("idx_posts_posted_at", "posts", ["posted_at"])

    op.create_table(
        "analysis_batches",
        _id(),
        sa.Column(
            "post_ids",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("post_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("time_range_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("time_range_end", sa.DateTime(timezone=True), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column(
            "enterprise_signals", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("raw_analysis", sa.Text(), nullable=False, server_default=""),
        sa.Column("processing_time_ms", sa.Integer(), nullable=False, server_default="0"),
        _now("created_at"),
    )

    op.create_table(
        "themes",
        _id(),
        sa.Column("batch_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("frequency", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sentiment_avg", sa.Float(), nullable=False, server_default="0"),
        sa.Column("audience_type", sa.String(50), nullable=False, server_default="general"),
        sa.Column("is_emerging", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "example_posts", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        _now("last_seen_at"),
    )
    op.create_index("idx_themes_last_seen", "themes", ["last_seen_at"])
    op.create_index("idx_themes_batch", "themes", ["batch_id"])

    op.create_table(
        "sentiment_snapshots",
        _id(),
        sa.Column("batch_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("platform_id", sa.String(50), nullable=True),
        sa.Column("overall_sentiment", sa.Float(), nullable=False, server_default="0"),
        sa.Column("positive_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("neutral_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("negative_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("volume", sa.Integer(), nullable=False, server_default="0"),
        _now("timestamp"),
    )
    op.create_index(
        "idx_sentiment_snapshots_timestamp", "sentiment_snapshots", ["timestamp"]
    )

    op.create_table(
        "competitor_mentions",
        _id(),
        sa.Column("batch_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("post_id", sa.String(255), nullable=True),
        sa.Column("competitor", sa.String(50), nullable=False),
        sa.Column("sentiment", sa.Float(), nullable=False, server_default="0"),
        sa.Column("is_comparison", sa.Boolean(), nullable=False, server_default="false"),
        _now("mentioned_at"),
    )
    op.create_index(
        "idx_competitor_mentions_mentioned_at", "competitor_mentions", ["mentioned_at"]
    )
    op.create_index(
        "idx_competitor_mentions_competitor", "competitor_mentions", ["competitor"]
    )

    op.create_table(
        "communities",
        _id(),
        sa.Column("batch_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("primary_platform", sa.String(50), nullable=True),
        sa.Column("audience_type", sa.String(50), nullable=False, server_default="general"),
        sa.Column("estimated_size", sa.String(20), nullable=True),
        sa.Column(
            "key_topics", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        sa.Column("sentiment_toward_claude", sa.Float(), nullable=True),
        sa.Column("notes", postgresql.JSONB(), nullable=False, server_default="{}"),
        _now("last_activity_at"),
    )
    op.create_index("idx_communities_last_activity", "communities", ["last_activity_at"])
    op.create_index("idx_communities_name", "communities", ["name"])

    op.create_table(
        "alerts",
        _id(),
        sa.Column("batch_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("alert_type", sa.String(50), nullable=False),
        sa.Column("severity", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "related_posts", postgresql.ARRAY(sa.String()), nullable=False, server_default="{}"
        ),
        sa.Column("metadata", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("is_acknowledged", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("acknowledged_at", sa.DateTime(timezone=True), nullable=True),
        _now("created_at"),
    )
    op.create_index("idx_alerts_acknowledged", "alerts", ["is_acknowledged"])
    op.create_index("idx_alerts_created", "alerts", ["created_at"])

    op.create_table(
        "digests",
        _id(),
        sa.Column("digest_type", sa.String(20), nullable=False),
        sa.Column("period_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("period_end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("summary", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "key_insights", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        _now("generated_at"),
    )
    op.create_index(
        "idx_digests_type_generated", "digests", ["digest_type", "generated_at"]
    )


def downgrade() -> None:
    """Drop every table created above."""
    for table in (
        "digests",
        "alerts",
        "communities",
        "competitor_mentions",
        "sentiment_snapshots",
        "themes",
        "analysis_batches",
        "posts",
    ):
        op.drop_table(table)
