"""
Basket Module
Shopping carts holding denormalized copies of catalog prices and names
"""
