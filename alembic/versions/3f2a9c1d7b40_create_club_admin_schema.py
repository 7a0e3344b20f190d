"""create_club_admin_schema

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-19 09:12:44.381027

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'club',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_club_id'), 'club', ['id'], unique=False)

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_id'), 'user', ['id'], unique=False)
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'team',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('age_group', sa.String(), nullable=False),
        sa.Column('gender', sa.Enum('boys', 'girls', 'mixed', name='teamgender'), nullable=False),
        sa.Column('is_opponent', sa.Boolean(), nullable=False),
        sa.Column('team_color', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_team_id'), 'team', ['id'], unique=False)
    op.create_index(op.f('ix_team_club_id'), 'team', ['club_id'], unique=False)

    op.create_table(
        'team_official',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column(
            'role',
            sa.Enum('manager', 'coach', 'assistant_manager', 'fixtures_secretary', 'other', name='officialrole'),
            nullable=False
        ),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['team_id'], ['team.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_team_official_id'), 'team_official', ['id'], unique=False)
    op.create_index(op.f('ix_team_official_team_id'), 'team_official', ['team_id'], unique=False)

    op.create_table(
        'pitch',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address_line1', sa.String(), nullable=False),
        sa.Column('address_line2', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=False),
        sa.Column('county', sa.String(), nullable=True),
        sa.Column('postal_code', sa.String(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('map_url', sa.String(), nullable=False),
        sa.Column(
            'surface_type',
            sa.Enum('grass', 'artificial_grass', 'hybrid', '3g', '4g', '5g', 'astroturf', 'other', name='pitchsurface'),
            nullable=False
        ),
        sa.Column(
            'lighting_type',
            sa.Enum('none', 'floodlights', 'natural_only', 'partial', name='pitchlighting'),
            nullable=False
        ),
        sa.Column('parking_info', sa.Text(), nullable=True),
        sa.Column('access_instructions', sa.Text(), nullable=True),
        sa.Column('equipment_requirements', sa.Text(), nullable=True),
        sa.Column('amenities', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('usage_restrictions', sa.Text(), nullable=True),
        sa.Column('special_instructions', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_pitch_id'), 'pitch', ['id'], unique=False)
    op.create_index(op.f('ix_pitch_club_id'), 'pitch', ['club_id'], unique=False)

    op.create_table(
        'fixture',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('home_team_id', sa.Integer(), nullable=False),
        sa.Column('away_team_id', sa.Integer(), nullable=False),
        sa.Column('pitch_id', sa.Integer(), nullable=False),
        sa.Column('match_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            'status',
            sa.Enum('scheduled', 'completed', 'cancelled', 'postponed', name='fixturestatus'),
            nullable=False
        ),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.ForeignKeyConstraint(['home_team_id'], ['team.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['away_team_id'], ['team.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pitch_id'], ['pitch.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_fixture_id'), 'fixture', ['id'], unique=False)
    op.create_index(op.f('ix_fixture_club_id'), 'fixture', ['club_id'], unique=False)
    op.create_index(op.f('ix_fixture_match_date'), 'fixture', ['match_date'], unique=False)

    op.create_table(
        'email_template',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('template_type', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_email_template_id'), 'email_template', ['id'], unique=False)
    op.create_index(op.f('ix_email_template_club_id'), 'email_template', ['club_id'], unique=False)

    op.create_table(
        'team_import',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('field_mappings', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('status', sa.Enum('pending', 'completed', name='importrunstatus'), nullable=False),
        sa.Column('total_rows', sa.Integer(), nullable=True),
        sa.Column('processed_rows', sa.Integer(), nullable=True),
        sa.Column('failed_rows', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_team_import_id'), 'team_import', ['id'], unique=False)
    op.create_index(op.f('ix_team_import_club_id'), 'team_import', ['club_id'], unique=False)

    op.create_table(
        'team_import_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('state', sa.String(), nullable=False),
        sa.Column('payload', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_team_import_session_id'), 'team_import_session', ['id'], unique=False)
    op.create_index(op.f('ix_team_import_session_club_id'), 'team_import_session', ['club_id'], unique=False)

    op.create_table(
        'user_column_mapping',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('club_id', sa.Integer(), nullable=False),
        sa.Column('entity_type', sa.String(), nullable=False),
        sa.Column('mapping_config', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['club_id'], ['club.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('club_id', 'entity_type', name='uix_club_entity_mapping')
    )
    op.create_index(op.f('ix_user_column_mapping_id'), 'user_column_mapping', ['id'], unique=False)


def downgrade() -> None:
    op.drop_table('user_column_mapping')
    op.drop_table('team_import_session')
    op.drop_table('team_import')
    op.drop_table('email_template')
    op.drop_table('fixture')
    op.drop_table('pitch')
    op.drop_table('team_official')
    op.drop_table('team')
    op.drop_table('user')
    op.drop_table('club')
    for enum_name in ('importrunstatus', 'fixturestatus', 'pitchlighting', 'pitchsurface', 'officialrole', 'teamgender'):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
