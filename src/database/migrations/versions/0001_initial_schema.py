"""Create users and organizations tables."""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
	# users
	op.create_table(
		"users",
		sa.Column("id", postgresql.UUID(), primary_key=True, nullable=False),
		sa.Column("email", sa.Text(), nullable=False),
		sa.Column("name", sa.Text(), nullable=False),
		sa.Column("password_hash", sa.Text(), nullable=False),
		sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
		sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
	)
	op.create_index("UQ_users_email", "users", ["email"], unique=True)

	# organizations
	op.create_table(
		"organizations",
		sa.Column("id", postgresql.UUID(), primary_key=True, nullable=False),
		sa.Column("name", sa.Text(), nullable=False),
		sa.Column("location", sa.Text(), server_default=sa.text("''"), nullable=False),
		sa.Column("owners", sa.Text(), server_default=sa.text("''"), nullable=False),
		sa.Column("activities", sa.Text(), server_default=sa.text("''"), nullable=False),
		sa.Column("age", sa.Integer(), server_default=sa.text("0"), nullable=False),
		sa.Column("website", sa.Text(), server_default=sa.text("''"), nullable=False),
		sa.Column("industry", sa.Text(), server_default=sa.text("''"), nullable=False),
		sa.Column("attachments", postgresql.JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
		sa.Column("email_content", sa.Text(), nullable=True),
		sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
		sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
		sa.CheckConstraint("age >= 0 AND age <= 200", name="CK_organizations_age_range"),
	)
	op.create_index("IDX_organizations_created_at", "organizations", ["created_at"], unique=False)
	op.create_index("IDX_organizations_industry", "organizations", ["industry"], unique=False)


def downgrade() -> None:
	op.drop_index("IDX_organizations_industry", table_name="organizations")
	op.drop_index("IDX_organizations_created_at", table_name="organizations")
	op.drop_table("organizations")

	op.drop_index("UQ_users_email", table_name="users")
	op.drop_table("users")
