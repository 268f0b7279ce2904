"""initial_schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 10:00:00

Create languages and language_values tables.

- languages: code is the primary key, metadata holds direction/region/currency/dateFormat
- language_values: one row per (key, language_code), key = md5(original + "_" + code)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'languages',
        sa.Column('code', sa.String(5), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('local_name', sa.String(100), nullable=True),
        sa.Column('flag', sa.String(10), nullable=True),
        sa.Column('status', sa.String(10), nullable=False, server_default='active'),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('idx_languages_status', 'languages', ['status'])
    op.create_index('idx_languages_is_default', 'languages', ['is_default'])
    
    op.create_table(
        'language_values',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('key', sa.String(32), nullable=False),
        sa.Column('original', sa.Text(), nullable=False),
        sa.Column('destination', sa.Text(), nullable=False),
        sa.Column('language_code', sa.String(5), sa.ForeignKey('languages.code'), nullable=False),
        sa.Column('context', sa.JSON(), nullable=True),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('approved_by', sa.String(100), nullable=True),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('usage_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        # Second concurrent insert of the same (text, language) fails instead of duplicating
        sa.UniqueConstraint('key', 'language_code', name='uq_language_value_key_lang'),
    )
    op.create_index('idx_language_values_language_code', 'language_values', ['language_code'])
    op.create_index('idx_language_values_is_approved', 'language_values', ['is_approved'])
    op.create_index('idx_language_values_usage_count', 'language_values', ['usage_count'])


def downgrade():
    op.drop_index('idx_language_values_usage_count', table_name='language_values')
    op.drop_index('idx_language_values_is_approved', table_name='language_values')
    op.drop_index('idx_language_values_language_code', table_name='language_values')
    op.drop_table('language_values')
    
    op.drop_index('idx_languages_is_default', table_name='languages')
    op.drop_index('idx_languages_status', table_name='languages')
    op.drop_table('languages')
