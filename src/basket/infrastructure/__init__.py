"""
Basket Infrastructure Layer
Persistence for the basket schema
"""
