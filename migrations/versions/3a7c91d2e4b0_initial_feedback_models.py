"""initial feedback models

Revision ID: 3a7c91d2e4b0
Revises: 
Create Date: 2026-10-17 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c91d2e4b0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('categories'):
        op.create_table(
            'categories',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('description', sa.String(length=255), nullable=True),
        )

    if not insp.has_table('feedbacks'):
        op.create_table(
            'feedbacks',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('event_id', sa.String(length=100), nullable=False),
            sa.Column('event_name', sa.String(length=255), nullable=True),
            sa.Column('user_id', sa.String(length=100), nullable=True),
            sa.Column('user_name', sa.String(length=255), nullable=True),
            sa.Column('content', sa.Text(), nullable=True),
            sa.Column('rating', sa.Integer(), nullable=False),
            sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('is_anonymous', sa.Boolean(), nullable=False, server_default=sa.false()),
        )
        op.create_index('ix_feedbacks_event_id', 'feedbacks', ['event_id'])


def downgrade():
    op.drop_index('ix_feedbacks_event_id', table_name='feedbacks')
    op.drop_table('feedbacks')
    op.drop_table('categories')
