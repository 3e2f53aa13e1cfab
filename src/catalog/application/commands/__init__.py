"""
Catalog Commands
"""
from catalog.application.commands.apply_product_discount_command import (
    ApplyProductDiscountCommand,
    ApplyProductDiscountHandler,
)
from catalog.application.commands.create_product_command import (
    CreateProductCommand,
    CreateProductHandler,
)
from catalog.application.commands.delete_product_command import (
    DeleteProductCommand,
    DeleteProductHandler,
    RestoreProductCommand,
    RestoreProductHandler,
)
from catalog.application.commands.product_category_commands import (
    AddProductCategoriesCommand,
    AddProductCategoriesHandler,
    RemoveProductCategoryCommand,
    RemoveProductCategoryHandler,
)
from catalog.application.commands.update_product_command import (
    UpdateProductCommand,
    UpdateProductHandler,
)
from catalog.application.commands.update_product_price_command import (
    UpdateProductPriceCommand,
    UpdateProductPriceHandler,
)
from catalog.application.commands.update_product_stock_command import (
    UpdateProductStockCommand,
    UpdateProductStockHandler,
)

__all__ = [
    "ApplyProductDiscountCommand",
    "ApplyProductDiscountHandler",
    "AddProductCategoriesCommand",
    "AddProductCategoriesHandler",
    "CreateProductCommand",
    "CreateProductHandler",
    "DeleteProductCommand",
    "DeleteProductHandler",
    "RemoveProductCategoryCommand",
    "RemoveProductCategoryHandler",
    "RestoreProductCommand",
    "RestoreProductHandler",
    "UpdateProductCommand",
    "UpdateProductHandler",
    "UpdateProductPriceCommand",
    "UpdateProductPriceHandler",
    "UpdateProductStockCommand",
    "UpdateProductStockHandler",
]
