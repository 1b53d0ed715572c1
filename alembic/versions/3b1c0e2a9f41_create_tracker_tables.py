"""create tracker tables

Revision ID: 3b1c0e2a9f41
Revises:
Create Date: 2026-10-19 09:12:40.118203

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1c0e2a9f41'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('admins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_admins_username', 'admins', ['username'], unique=True)

    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_code', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id_code', 'users', ['id_code'], unique=True)

    op.create_table('process_steps',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('job_code', sa.String(length=50), nullable=False),
        sa.Column('job_name', sa.String(length=255), nullable=False),
        sa.Column('date_recorded', sa.Date(), nullable=True),
        sa.Column('worker_count', sa.Integer(), nullable=True),
        sa.Column('process_number', sa.Integer(), nullable=False),
        sa.Column('process_description', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_process_steps_job_code', 'process_steps', ['job_code'])
    op.create_index('ix_process_steps_job_process', 'process_steps', ['job_code', 'process_number'])

    op.create_table('work_plans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('production_date', sa.Date(), nullable=False),
        sa.Column('job_code', sa.String(length=50), nullable=False),
        sa.Column('job_name', sa.String(length=255), nullable=True),
        sa.Column('start_time', sa.Time(), nullable=True),
        sa.Column('end_time', sa.Time(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_work_plans_production_date', 'work_plans', ['production_date'])
    op.create_index('ix_work_plans_job_code', 'work_plans', ['job_code'])

    op.create_table('work_plan_operators',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('work_plan_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('id_code', sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(['work_plan_id'], ['work_plans.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_work_plan_operators_work_plan_id', 'work_plan_operators', ['work_plan_id'])
    op.create_index('ix_work_plan_operators_id_code', 'work_plan_operators', ['id_code'])

    op.create_table('finished_flags',
        sa.Column('work_plan_id', sa.Integer(), nullable=False),
        sa.Column('is_finished', sa.Boolean(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['work_plan_id'], ['work_plans.id'], ),
        sa.PrimaryKeyConstraint('work_plan_id')
    )

    # 删除工作计划时级联删除其事件
    op.create_table('logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('work_plan_id', sa.Integer(), nullable=False),
        sa.Column('process_number', sa.Integer(), nullable=False),
        sa.Column('status', sa.Enum('start', 'stop', name='log_status'), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['work_plan_id'], ['work_plans.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_logs_timestamp', 'logs', ['timestamp'])
    op.create_index('ix_logs_work_plan_process', 'logs', ['work_plan_id', 'process_number'])


def downgrade():
    op.drop_table('logs')
    op.drop_table('finished_flags')
    op.drop_table('work_plan_operators')
    op.drop_table('work_plans')
    op.drop_table('process_steps')
    op.drop_table('users')
    op.drop_table('admins')
