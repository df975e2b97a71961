"""Load interbank transactions from CSV, summarise them and look them up by ID."""

__version__ = "0.1.0"
__all__ = ["__version__"]