"""API module for ledgerstats.

- Read-only: exposes the statistics queries over HTTP
- Forbidden: writes to the transaction store
"""
