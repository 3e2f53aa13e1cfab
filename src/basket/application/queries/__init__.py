from basket.application.queries.get_basket_query import (
    GetBasketHandler,
    GetBasketQuery,
    GetBasketsForUserHandler,
    GetBasketsForUserQuery,
)
from basket.application.queries.get_baskets_by_product_query import (
    GetBasketsByProductHandler,
    GetBasketsByProductQuery,
)

__all__ = [
    "GetBasketQuery",
    "GetBasketHandler",
    "GetBasketsByProductQuery",
    "GetBasketsByProductHandler",
    "GetBasketsForUserQuery",
    "GetBasketsForUserHandler",
]
