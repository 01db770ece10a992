# backend/models/triggers.py
# Quantity maintenance lives in the database: every insert into stock_entries
# adds to products.quantity, every insert into sales subtracts from it.
from sqlalchemy import DDL, event

STOCK_ENTRY_TRIGGER = {
    "sqlite": [
        """
        CREATE TRIGGER IF NOT EXISTS trigger_update_quantity_on_stock
        AFTER INSERT ON stock_entries
        FOR EACH ROW
        BEGIN
            UPDATE products SET quantity = quantity + NEW.quantity WHERE id = NEW.product_id;
        END
        """,
    ],
    "postgresql": [
        """
        CREATE OR REPLACE FUNCTION update_product_quantity_on_stock()
        RETURNS TRIGGER AS $$
        BEGIN
            UPDATE products SET quantity = quantity + NEW.quantity WHERE id = NEW.product_id;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
        """,
        """
        CREATE TRIGGER trigger_update_quantity_on_stock
        AFTER INSERT ON stock_entries
        FOR EACH ROW
        EXECUTE FUNCTION update_product_quantity_on_stock()
        """,
    ],
}

SALE_TRIGGER = {
    "sqlite": [
        """
        CREATE TRIGGER IF NOT EXISTS trigger_decrease_quantity_on_sale
        AFTER INSERT ON sales
        FOR EACH ROW
        BEGIN
            UPDATE products SET quantity = quantity - NEW.quantity WHERE id = NEW.product_id;
        END
        """,
    ],
    "postgresql": [
        """
        CREATE OR REPLACE FUNCTION decrease_product_quantity_on_sale()
        RETURNS TRIGGER AS $$
        BEGIN
            UPDATE products SET quantity = quantity - NEW.quantity WHERE id = NEW.product_id;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
        """,
        """
        CREATE TRIGGER trigger_decrease_quantity_on_sale
        AFTER INSERT ON sales
        FOR EACH ROW
        EXECUTE FUNCTION decrease_product_quantity_on_sale()
        """,
    ],
}


def attach(table, trigger):
    """Install the trigger right after `table` is created (per dialect)."""
    for dialect, statements in trigger.items():
        for sql in statements:
            event.listen(table, "after_create", DDL(sql).execute_if(dialect=dialect))
