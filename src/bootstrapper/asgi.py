"""
ASGI entry point: ``uvicorn bootstrapper.asgi:app``
"""
from __future__ import annotations

from bootstrapper.main import create_app

app = create_app()
