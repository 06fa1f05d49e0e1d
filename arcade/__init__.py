"""
Arcade asset server.

A CRUD service for the items, links, players and rooms of a text adventure,
backed by PostgreSQL and served over HTTP with FastAPI.
"""

__version__ = "0.1.0"
