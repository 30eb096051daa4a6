"""Persistence layer for ledgerstats.

- Owns the SQLAlchemy schema, engine and session factory
- Repository functions return domain dataclasses, never ORM rows
"""
