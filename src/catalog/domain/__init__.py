"""
Catalog Domain Layer
Product aggregate, its events and exceptions
"""
