"""initial portfolio schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-01-12 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'sites',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('tagline', sa.String(length=500), nullable=True),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('linkedin', sa.String(length=500), nullable=True),
        sa.Column('github', sa.String(length=500), nullable=True),
        sa.Column('hero_headline', sa.String(length=500), nullable=True),
        sa.Column('hero_subhead', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sites_slug', 'sites', ['slug'], unique=True)

    op.create_table(
        'ctas',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('site_id', sa.String(length=36), nullable=False),
        sa.Column('label', sa.String(length=200), nullable=False),
        sa.Column('href', sa.String(length=500), nullable=False),
        sa.Column('icon', sa.String(length=100), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['site_id'], ['sites.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_ctas_site_id', 'ctas', ['site_id'], unique=False)

    op.create_table(
        'sections',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('site_id', sa.String(length=36), nullable=False),
        sa.Column('section_key', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('icon', sa.String(length=100), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['site_id'], ['sites.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('site_id', 'section_key', name='uq_section_key_per_site'),
    )

    op.create_table(
        'items',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('section_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('href', sa.String(length=500), nullable=True),
        sa.Column('meta', sa.String(length=200), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['section_id'], ['sections.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_items_section_id', 'items', ['section_id'], unique=False)


def downgrade():
    # Forward-only in deployment; kept for local resets
    op.drop_index('ix_items_section_id', table_name='items')
    op.drop_table('items')
    op.drop_table('sections')
    op.drop_index('ix_ctas_site_id', table_name='ctas')
    op.drop_table('ctas')
    op.drop_index('ix_sites_slug', table_name='sites')
    op.drop_table('sites')
