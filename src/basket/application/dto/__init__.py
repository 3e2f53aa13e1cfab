from basket.application.dto.cart_dto import CartDiscountDTO, CartDTO, CartItemDTO, CartLineDTO

__all__ = ["CartDiscountDTO", "CartDTO", "CartItemDTO", "CartLineDTO"]
