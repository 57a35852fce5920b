"""Initial planner schema

Revision ID: 3b7d2e91a4c0
Revises:
Create Date: 2026-10-19 09:12:44.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7d2e91a4c0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'catalog_product',
        sa.Column('id', sa.String(length=50), nullable=False),
        sa.Column('sku', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('sale_price', sa.Float(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('consumption_type', sa.String(length=20), nullable=True),
        sa.Column('texture', sa.String(length=30), nullable=True),
        sa.Column('package_weight_grams', sa.Float(), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=True),
        sa.Column('is_appetizer', sa.Boolean(), nullable=True),
        sa.Column('is_breakfast', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('catalog_product', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_catalog_product_sku'), ['sku'], unique=False)
        batch_op.create_index(batch_op.f('ix_catalog_product_category'), ['category'], unique=False)

    op.create_table(
        'settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=50), nullable=False),
        sa.Column('value', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key'),
    )

    op.create_table(
        'cart_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.String(length=50), nullable=False),
        sa.Column('q1', sa.Integer(), nullable=True),
        sa.Column('q2', sa.Integer(), nullable=True),
        sa.Column('q3', sa.Integer(), nullable=True),
        sa.Column('q4', sa.Integer(), nullable=True),
        sa.Column('source', sa.String(length=20), nullable=True, server_default='optimized'),
        sa.ForeignKeyConstraint(['product_id'], ['catalog_product.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('product_id'),
    )

    op.create_table(
        'pickup_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.String(length=50), nullable=False),
        sa.Column('delivery_index', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['product_id'], ['catalog_product.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('pickup_item', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_pickup_item_product_id'), ['product_id'], unique=False)

    op.create_table(
        'calendar_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('day_index', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('product_id', sa.String(length=50), nullable=True),
        sa.Column('is_delivery_day', sa.Boolean(), nullable=True),
        sa.Column('delivery_index', sa.Integer(), nullable=True),
        sa.Column('is_free_day', sa.Boolean(), nullable=True),
        sa.Column('locked', sa.Boolean(), nullable=True),
        sa.ForeignKeyConstraint(['product_id'], ['catalog_product.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('date'),
    )
    with op.batch_alter_table('calendar_entry', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_calendar_entry_day_index'), ['day_index'], unique=False)
        batch_op.create_index(batch_op.f('ix_calendar_entry_product_id'), ['product_id'], unique=False)


def downgrade():
    with op.batch_alter_table('calendar_entry', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_calendar_entry_product_id'))
        batch_op.drop_index(batch_op.f('ix_calendar_entry_day_index'))
    op.drop_table('calendar_entry')

    with op.batch_alter_table('pickup_item', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_pickup_item_product_id'))
    op.drop_table('pickup_item')

    op.drop_table('cart_item')
    op.drop_table('settings')

    with op.batch_alter_table('catalog_product', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_catalog_product_category'))
        batch_op.drop_index(batch_op.f('ix_catalog_product_sku'))
    op.drop_table('catalog_product')
