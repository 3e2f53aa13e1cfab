"""
Basket Application Layer
Commands, queries and the consumer of catalog price changes
"""
from basket.application.dto.cart_dto import CartDTO, CartItemDTO, CartLineDTO

__all__ = ["CartDTO", "CartItemDTO", "CartLineDTO"]
