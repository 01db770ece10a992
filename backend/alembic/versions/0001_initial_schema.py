"""Initial schema with quantity triggers

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-07-14 06:24:24.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from models.triggers import STOCK_ENTRY_TRIGGER, SALE_TRIGGER


# Revision identifiers used by Alembic
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('super_admin', 'admin', 'sales_staff', name='user_role')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False, server_default='sales_staff'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('sku', sa.String(), nullable=False),
        sa.Column('buy_price', sa.Float(), sa.CheckConstraint('buy_price >= 0'), nullable=False, server_default='0'),
        sa.Column('sell_price', sa.Float(), sa.CheckConstraint('sell_price >= 0'), nullable=False, server_default='0'),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_products_name'), 'products', ['name'], unique=False)
    op.create_index(op.f('ix_products_sku'), 'products', ['sku'], unique=True)

    op.create_table(
        'stock_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_stock_entries_product_id'), 'stock_entries', ['product_id'], unique=False)

    op.create_table(
        'sales',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('recorded_by_user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f('ix_sales_product_id'), 'sales', ['product_id'], unique=False)
    op.create_index(op.f('ix_sales_date'), 'sales', ['date'], unique=False)

    settings_table = op.create_table(
        'settings',
        sa.Column('key', sa.String(), primary_key=True),
        sa.Column('value', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # Quantity maintenance triggers for the current dialect
    dialect = op.get_bind().dialect.name
    for trigger in (STOCK_ENTRY_TRIGGER, SALE_TRIGGER):
        for sql in trigger.get(dialect, []):
            op.execute(sql)

    op.bulk_insert(settings_table, [{'key': 'currency', 'value': 'KES'}])


def downgrade() -> None:
    """Downgrade schema."""
    dialect = op.get_bind().dialect.name
    op.execute('DROP TRIGGER IF EXISTS trigger_decrease_quantity_on_sale' + (' ON sales' if dialect == 'postgresql' else ''))
    op.execute('DROP TRIGGER IF EXISTS trigger_update_quantity_on_stock' + (' ON stock_entries' if dialect == 'postgresql' else ''))
    if dialect == 'postgresql':
        op.execute('DROP FUNCTION IF EXISTS decrease_product_quantity_on_sale()')
        op.execute('DROP FUNCTION IF EXISTS update_product_quantity_on_stock()')

    op.drop_table('settings')
    op.drop_index(op.f('ix_sales_date'), table_name='sales')
    op.drop_index(op.f('ix_sales_product_id'), table_name='sales')
    op.drop_table('sales')
    op.drop_index(op.f('ix_stock_entries_product_id'), table_name='stock_entries')
    op.drop_table('stock_entries')
    op.drop_index(op.f('ix_products_sku'), table_name='products')
    op.drop_index(op.f('ix_products_name'), table_name='products')
    op.drop_table('products')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
    user_role.drop(op.get_bind(), checkfirst=True)
