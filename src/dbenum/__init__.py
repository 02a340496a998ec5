"""dbenum — SQLAlchemy column types for Python enums."""

__version__ = "0.3.0"
