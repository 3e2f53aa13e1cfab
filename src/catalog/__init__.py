"""
Catalog Module
Products, prices and categories; source of the price-changed integration event
"""
