"""Ledgerstats: aggregate statistics over stored financial transactions."""

__version__ = "0.1.0"
