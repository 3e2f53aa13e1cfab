"""
Catalog Application Layer
Commands, queries and in-process event handlers
"""
