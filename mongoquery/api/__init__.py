"""API module for mongoquery: the Mongo database wrapper and the Query component."""

__all__ = []
