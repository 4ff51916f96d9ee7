"""create udyam_registrations

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'udyam_registrations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('aadhaar', sa.String(length=12), nullable=False),
        sa.Column('name_as_per_aadhaar', sa.String(length=255), nullable=False),
        sa.Column('type_of_organisation', sa.String(length=50), nullable=False),
        sa.Column('pan', sa.String(length=10), nullable=False),
        sa.Column('mobile', sa.String(length=10), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('social_category', sa.String(length=20), nullable=False),
        sa.Column('gender', sa.String(length=10), nullable=False),
        sa.Column('specially_abled', sa.Boolean(), nullable=False),
        sa.Column('name_of_enterprise', sa.String(length=100), nullable=False),
        sa.Column('major_activity', sa.String(length=50), nullable=False),
        sa.Column('registration_number', sa.String(length=30), nullable=False),
        sa.Column('registration_date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('aadhaar'),
        sa.UniqueConstraint('pan'),
        sa.UniqueConstraint('registration_number')
    )
    with op.batch_alter_table('udyam_registrations', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_udyam_registrations_created_at'), ['created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('udyam_registrations', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_udyam_registrations_created_at'))

    op.drop_table('udyam_registrations')
