"""Prime counting benchmark: sequential pass versus chunked parallel pass."""

__version__ = "0.1.0"
