"""Initial link-in-bio schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-03-02

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
import sys
from pathlib import Path

# Add alembic directory to path to import migration_helpers
alembic_dir = Path(__file__).resolve().parent.parent
if str(alembic_dir) not in sys.path:
    sys.path.insert(0, str(alembic_dir))

from migration_helpers import create_index_if_not_exists, create_table_if_not_exists, drop_table_if_exists


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade():
    """Create users, sessions, profiles and profile content tables."""
    create_table_if_not_exists(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('username', name='uq_users_username'),
    )
    create_index_if_not_exists('ix_users_username', 'users', ['username'])

    create_table_if_not_exists(
        'sessions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', name='fk_sessions_user_id_users'), nullable=False),
        sa.Column('token', sa.Text(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('token', name='uq_sessions_token'),
    )
    create_index_if_not_exists('ix_sessions_user_id', 'sessions', ['user_id'])

    create_table_if_not_exists(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', name='fk_profiles_user_id_users'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.Text()),
        sa.Column('location', sa.String(length=255)),
        sa.Column('email', sa.String(length=255)),
        sa.Column('phone', sa.String(length=64)),
        sa.Column('cv_url', sa.Text()),
        sa.Column('image_index', sa.Integer()),
        sa.Column('custom_image_url', sa.Text()),
        sa.Column('background_index', sa.Integer()),
        sa.Column('background_gradient', JSONType),
        sa.Column('github_username', sa.String(length=255)),
        sa.Column('try_hack_me_user_id', sa.String(length=255)),
        sa.Column('show_image', sa.Boolean()),
        sa.Column('show_contact', sa.Boolean()),
        sa.Column('show_social', sa.Boolean()),
        sa.Column('show_knowledge', sa.Boolean()),
        sa.Column('show_featured', sa.Boolean()),
        sa.Column('show_technologies', sa.Boolean()),
        sa.Column('show_github_stats', sa.Boolean()),
        sa.Column('show_try_hack_me', sa.Boolean()),
        sa.Column('section_order', JSONType),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    create_index_if_not_exists('ix_profiles_user_id', 'profiles', ['user_id'], unique=True)

    create_table_if_not_exists(
        'social_links',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('profile_id', sa.Integer(), sa.ForeignKey('profiles.id', name='fk_social_links_profile_id_profiles'), nullable=False),
        sa.Column('platform', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('icon_name', sa.String(length=255), nullable=False),
        sa.Column('order', sa.Integer()),
        sa.Column('category', sa.String(length=32), nullable=False, server_default='social'),
        sa.Column('is_visible', sa.Boolean()),
    )
    create_index_if_not_exists('ix_social_links_profile_id', 'social_links', ['profile_id'])
    create_index_if_not_exists('ix_social_links_category', 'social_links', ['category'])

    create_table_if_not_exists(
        'featured_contents',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('profile_id', sa.Integer(), sa.ForeignKey('profiles.id', name='fk_featured_contents_profile_id_profiles'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('link_url', sa.Text()),
        sa.Column('order', sa.Integer()),
        sa.Column('is_visible', sa.Boolean()),
    )
    create_index_if_not_exists('ix_featured_contents_profile_id', 'featured_contents', ['profile_id'])

    create_table_if_not_exists(
        'technologies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('profile_id', sa.Integer(), sa.ForeignKey('profiles.id', name='fk_technologies_profile_id_profiles'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('logo_url', sa.Text()),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('proficiency_level', sa.Integer()),
        sa.Column('years_of_experience', sa.Float()),
        sa.Column('is_visible', sa.Boolean()),
        sa.Column('order', sa.Integer()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    create_index_if_not_exists('ix_technologies_profile_id', 'technologies', ['profile_id'])
    create_index_if_not_exists('ix_technologies_category', 'technologies', ['category'])

    create_table_if_not_exists(
        'issues',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('profile_id', sa.Integer(), sa.ForeignKey('profiles.id', name='fk_issues_profile_id_profiles'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('image_url', sa.Text()),
        sa.Column('severity', sa.String(length=16), nullable=False, server_default='medium'),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='open'),
        sa.Column('is_resolved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('resolved_at', sa.DateTime(timezone=True)),
    )
    create_index_if_not_exists('ix_issues_profile_id', 'issues', ['profile_id'])
    create_index_if_not_exists('ix_issues_status', 'issues', ['status'])

    create_table_if_not_exists(
        'contacts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', name='fk_contacts_user_id_users'), nullable=False),
        sa.Column('contact_profile_id', sa.Integer(), sa.ForeignKey('profiles.id', name='fk_contacts_contact_profile_id_profiles'), nullable=False),
        sa.Column('category', sa.String(length=255), nullable=False, server_default='default'),
        sa.Column('notes', sa.Text()),
        sa.Column('added_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('last_viewed_at', sa.DateTime(timezone=True)),
        sa.UniqueConstraint('user_id', 'contact_profile_id', name='uq_contacts_user_id_contact_profile_id'),
    )
    create_index_if_not_exists('ix_contacts_user_id', 'contacts', ['user_id'])
    create_index_if_not_exists('ix_contacts_contact_profile_id', 'contacts', ['contact_profile_id'])


def downgrade():
    """Drop all tables, children first."""
    for table_name in ('contacts', 'issues', 'technologies', 'featured_contents', 'social_links', 'profiles', 'sessions', 'users'):
        drop_table_if_exists(table_name)
