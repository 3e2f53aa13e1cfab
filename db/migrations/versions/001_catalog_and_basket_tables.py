"""Catalog and basket tables

Revision ID: 001_catalog_and_basket_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_catalog_and_basket_tables'
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_by', sa.String(100), nullable=True),
        sa.Column('last_modified_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_modified_by', sa.String(100), nullable=True),
    ]


def upgrade() -> None:
    op.execute('CREATE SCHEMA IF NOT EXISTS catalog')
    op.execute('CREATE SCHEMA IF NOT EXISTS basket')

    # catalog.products
    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.String(1000), nullable=False),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('image_file', sa.String(500), nullable=False),
        sa.Column('categories', sa.JSON(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_by', sa.String(100), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        schema='catalog',
    )
    op.create_index('ix_catalog_products_name', 'products', ['name'], schema='catalog')
    op.create_index('ix_catalog_products_is_deleted', 'products', ['is_deleted'], schema='catalog')

    # basket.shopping_carts
    op.create_table(
        'shopping_carts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_name', sa.String(100), nullable=False),
        sa.Column('session_id', sa.String(100), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        schema='basket',
    )
    op.create_index('ix_basket_shopping_carts_user_name', 'shopping_carts', ['user_name'], schema='basket')
    op.create_index('ix_basket_shopping_carts_status', 'shopping_carts', ['status'], schema='basket')

    # basket.shopping_cart_items (product_id is not a foreign key: products belong to catalog)
    op.create_table(
        'shopping_cart_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cart_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('product_name', sa.String(200), nullable=False),
        sa.Column('product_price', sa.Numeric(18, 2), nullable=False),
        sa.Column('unit_price', sa.Numeric(18, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('variant', sa.String(50), nullable=True),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('last_modified_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['cart_id'], ['basket.shopping_carts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        schema='basket',
    )
    op.create_index('ix_basket_shopping_cart_items_cart_id', 'shopping_cart_items', ['cart_id'], schema='basket')
    op.create_index('ix_basket_shopping_cart_items_product_id', 'shopping_cart_items', ['product_id'], schema='basket')

    # basket.cart_discounts
    op.create_table(
        'cart_discounts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('cart_id', sa.Uuid(), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('discount_type', sa.String(20), nullable=False),
        sa.Column('value', sa.Numeric(18, 2), nullable=False),
        sa.Column('applied_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.ForeignKeyConstraint(['cart_id'], ['basket.shopping_carts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        schema='basket',
    )
    op.create_index('ix_basket_cart_discounts_cart_id', 'cart_discounts', ['cart_id'], schema='basket')


def downgrade() -> None:
    op.drop_table('cart_discounts', schema='basket')
    op.drop_table('shopping_cart_items', schema='basket')
    op.drop_table('shopping_carts', schema='basket')
    op.drop_table('products', schema='catalog')
