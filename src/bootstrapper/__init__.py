"""
Bootstrapper
Composition root: settings, logging, persistence, messaging and module registration
"""
