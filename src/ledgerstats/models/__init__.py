"""Domain entities and pydantic types for ledgerstats."""
