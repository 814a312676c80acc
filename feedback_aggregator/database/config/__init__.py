"""
The `config` package provides the two building blocks for reaching the feedback store.

Contents:
    - config: strongly typed app settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: SQLAlchemy bootstrap that builds a connection URL from those settings and creates the Engine, shared MetaData, and the declarative base for ORM models
"""
