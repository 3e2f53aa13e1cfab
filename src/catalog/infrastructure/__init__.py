"""
Catalog Infrastructure Layer
Persistence for the catalog schema
"""
