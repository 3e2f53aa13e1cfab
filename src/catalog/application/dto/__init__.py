from catalog.application.dto.product_dto import ProductDTO, ProductPageDTO

__all__ = ["ProductDTO", "ProductPageDTO"]
