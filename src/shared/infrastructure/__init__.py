"""
Shared Infrastructure Layer
Database, messaging, and observability
"""
