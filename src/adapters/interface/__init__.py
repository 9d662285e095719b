"""User interface adapters package."""

__all__ = []
