"""
Catalog API Layer
"""
