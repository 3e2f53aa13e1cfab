from basket.api.routes.carts import router

__all__ = ["router"]
