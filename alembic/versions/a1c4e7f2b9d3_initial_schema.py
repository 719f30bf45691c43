"""initial_schema

Revision ID: a1c4e7f2b9d3
Revises:
Create Date: 2026-10-19 09:00:00.000000

초기 스키마:
1. departments, employees, employee_departments
2. service_orders, os_service_days, os_departments, os_collaborators
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e7f2b9d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── 1. 부서 / 직원 ──
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('production_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('production_order'),
    )

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('work_schedule', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table(
        'employee_departments',
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id']),
        sa.PrimaryKeyConstraint('employee_id', 'department_id'),
    )

    # ── 2. 서비스 오더 ──
    op.create_table(
        'service_orders',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('os_number', sa.String(50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('os_number'),
    )

    op.create_table(
        'os_service_days',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('os_id', sa.Integer(), nullable=False),
        sa.Column('day_of_week', sa.SmallInteger(), nullable=False),
        sa.ForeignKeyConstraint(['os_id'], ['service_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('os_id', 'day_of_week', name='uq_os_service_day'),
    )

    op.create_table(
        'os_departments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('os_id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('execution_start', sa.Time(), nullable=False),
        sa.Column('execution_end', sa.Time(), nullable=False),
        sa.ForeignKeyConstraint(['os_id'], ['service_orders.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_os_departments_os_id', 'os_departments', ['os_id'])
    op.create_index('ix_os_departments_department_id', 'os_departments', ['department_id'])

    op.create_table(
        'os_collaborators',
        sa.Column('os_department_id', sa.Integer(), nullable=False),
        sa.Column('collaborator_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['os_department_id'], ['os_departments.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['collaborator_id'], ['employees.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('os_department_id', 'collaborator_id'),
    )
    op.create_index('ix_os_collaborators_collaborator_id', 'os_collaborators', ['collaborator_id'])


def downgrade() -> None:
    op.drop_index('ix_os_collaborators_collaborator_id', table_name='os_collaborators')
    op.drop_table('os_collaborators')
    op.drop_index('ix_os_departments_department_id', table_name='os_departments')
    op.drop_index('ix_os_departments_os_id', table_name='os_departments')
    op.drop_table('os_departments')
    op.drop_table('os_service_days')
    op.drop_table('service_orders')
    op.drop_table('employee_departments')
    op.drop_table('employees')
    op.drop_table('departments')
