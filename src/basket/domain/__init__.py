"""
Basket Domain Layer
ShoppingCart aggregate, its events and exceptions
"""
