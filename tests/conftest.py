"""
Pytest configuration to ensure the project root is on sys.path for imports.
"""

import sys
from pathlib import Path

import pytest
from fastapi import FastAPI

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def app() -> FastAPI:
    """Fresh application built from the default configuration."""
    from src.main import create_app

    return create_app()
