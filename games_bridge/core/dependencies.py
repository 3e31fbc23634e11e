"""Dependency injection utilities for FastAPI"""

from fastapi import Request

from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Shared AppState attached by create_app"""
    return request.app.state.cache
