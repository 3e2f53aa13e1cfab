from catalog.application.queries.get_product_by_id_query import GetProductByIdHandler, GetProductByIdQuery
from catalog.application.queries.get_products_query import GetProductsHandler, GetProductsQuery

__all__ = [
    "GetProductByIdQuery",
    "GetProductByIdHandler",
    "GetProductsQuery",
    "GetProductsHandler",
]
