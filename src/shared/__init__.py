"""
Shared Kernel
Domain contracts, application layer, infrastructure and API utilities
"""
