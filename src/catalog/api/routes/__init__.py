from catalog.api.routes.products import router

__all__ = ["router"]
