"""initial_schema

Revision ID: 5b2e91c4d7a0
Revises:
Create Date: 2026-10-17 10:12:41.408215
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2e91c4d7a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, index: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
        index=index,
    )


def upgrade() -> None:
    """Upgrade schema."""

    # SHOPS
    op.create_table(
        "shops",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("name_hindi", sa.String(), nullable=True),
        sa.Column("owner_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("upi_id", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("gst_number", sa.String(), nullable=True),
        sa.Column("language", sa.String(), nullable=False),
        _timestamp("created_at"),
    )

    # CATEGORIES
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("name_hindi", sa.String(), nullable=True),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        _timestamp("created_at"),
    )

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("name_hindi", sa.String(), nullable=True),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock", sa.Numeric(10, 3), nullable=False),
        sa.Column("min_stock", sa.Numeric(10, 3), nullable=False),
        sa.Column("unit", sa.String(), nullable=False),
        sa.Column("barcode", sa.String(), nullable=True),
        sa.Column("is_packaged", sa.Boolean(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.UniqueConstraint("shop_id", "name", name="uq_shop_product_name"),
        sa.CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        sa.CheckConstraint("min_stock >= 0", name="ck_product_min_stock_non_negative"),
    )

    # CUSTOMERS
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("landmark", sa.String(), nullable=True),
        sa.Column("whatsapp_number", sa.String(), nullable=True),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        sa.Column("credit_limit", sa.Numeric(10, 2), nullable=False),
        sa.Column("outstanding_amount", sa.Numeric(10, 2), nullable=False),
        _timestamp("created_at"),
    )
    op.create_index("ix_customers_shop_phone", "customers", ["shop_id", "phone"])

    # ORDERS
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("order_number", sa.String(), nullable=False),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=True, index=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("payment_status", sa.String(), nullable=False),
        sa.Column("payment_method", sa.String(), nullable=True),
        sa.Column("upi_app", sa.String(), nullable=True),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("paid_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("discount_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("gst_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("delivery_address", sa.String(), nullable=True),
        sa.Column("delivery_landmark", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("is_offline_order", sa.Boolean(), nullable=False),
        _timestamp("created_at", index=True),
        _timestamp("updated_at"),
        sa.CheckConstraint(
            "status IN ('pending', 'completed', 'cancelled')",
            name="ck_order_status_valid",
        ),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'paid', 'partial')",
            name="ck_order_payment_status_valid",
        ),
    )
    op.create_index("ix_orders_shop_created", "orders", ["shop_id", "created_at"])

    # ORDER ITEMS
    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "order_id",
            sa.Integer(),
            sa.ForeignKey("orders.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False, index=True),
        sa.Column("quantity", sa.Numeric(10, 3), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("gst_rate", sa.Numeric(5, 2), nullable=False),
    )

    # STOCK MOVEMENTS
    op.create_table(
        "stock_movements",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False, index=True),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id"), nullable=True, index=True),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("quantity", sa.Numeric(10, 3), nullable=False),
        sa.Column("reason", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        _timestamp("created_at"),
        sa.CheckConstraint(
            "type IN ('in', 'out', 'adjustment')",
            name="ck_stock_movement_type_valid",
        ),
        sa.CheckConstraint(
            "reason IS NULL OR reason IN ('sale', 'purchase', 'return', 'damage', 'adjustment')",
            name="ck_stock_movement_reason_valid",
        ),
    )

    # TRANSACTIONS (ledger)
    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("shop_id", sa.Integer(), sa.ForeignKey("shops.id"), nullable=False, index=True),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id"), nullable=True, index=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=True, index=True),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_method", sa.String(), nullable=False),
        sa.Column("upi_app", sa.String(), nullable=True),
        sa.Column("upi_transaction_id", sa.String(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("is_offline_transaction", sa.Boolean(), nullable=False),
        _timestamp("created_at", index=True),
        sa.CheckConstraint(
            "type IN ('sale', 'purchase', 'credit_payment', 'expense')",
            name="ck_transaction_type_valid",
        ),
    )
    op.create_index(
        "ix_transactions_shop_type_created",
        "transactions",
        ["shop_id", "type", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_transactions_shop_type_created", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("stock_movements")
    op.drop_table("order_items")
    op.drop_index("ix_orders_shop_created", table_name="orders")
    op.drop_table("orders")
    op.drop_index("ix_customers_shop_phone", table_name="customers")
    op.drop_table("customers")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("shops")
