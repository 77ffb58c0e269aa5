"""create users, profiles, votes and time slot settings

Revision ID: 0001
Revises:
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

DAYS = ["mon", "tue", "wed"]
TIMES = ["18:00", "18:30", "19:00", "19:30", "20:00", "20:30", "21:00", "21:30", "22:00"]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_student_id", "users", ["student_id"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("student_id", sa.String(), nullable=False),
        sa.Column("event_day", sa.String(), nullable=False),
        sa.Column("event_time", sa.String(), nullable=False),
        sa.Column("gender", sa.String(), nullable=False),
        sa.Column("participant_number", sa.Integer(), nullable=False),
        sa.Column("phone_number", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint(
            "event_day", "event_time", "gender", "participant_number",
            name="uq_profile_seat_per_slot",
        ),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"])
    op.create_index("ix_profiles_user_id", "profiles", ["user_id"], unique=True)

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "voter_profile_id", sa.Uuid(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "voted_for_profile_id", sa.Uuid(),
            sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("voter_profile_id", "voted_for_profile_id", name="uq_vote_once_per_target"),
    )
    op.create_index("ix_votes_id", "votes", ["id"])
    op.create_index("ix_votes_voter_profile_id", "votes", ["voter_profile_id"])
    op.create_index("ix_votes_voted_for_profile_id", "votes", ["voted_for_profile_id"])

    time_slots = op.create_table(
        "time_slot_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("event_day", sa.String(), nullable=False),
        sa.Column("event_time", sa.String(), nullable=False),
        sa.Column("voting_open", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("results_open", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("event_day", "event_time", name="uq_time_slot"),
    )
    op.create_index("ix_time_slot_settings_id", "time_slot_settings", ["id"])

    op.bulk_insert(
        time_slots,
        [
            {"event_day": day, "event_time": time, "voting_open": False, "results_open": False}
            for day in DAYS
            for time in TIMES
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_time_slot_settings_id", table_name="time_slot_settings")
    op.drop_table("time_slot_settings")
    op.drop_index("ix_votes_voted_for_profile_id", table_name="votes")
    op.drop_index("ix_votes_voter_profile_id", table_name="votes")
    op.drop_index("ix_votes_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("ix_profiles_user_id", table_name="profiles")
    op.drop_index("ix_profiles_id", table_name="profiles")
    op.drop_table("profiles")
    op.drop_index("ix_users_student_id", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
