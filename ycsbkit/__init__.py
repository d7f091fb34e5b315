"""Building blocks for key-value benchmark harnesses: dynamic strings, hashed keys and latency reports."""

__version__ = "0.1.0"
__all__ = ["sds", "sdsutil", "hashstring", "latency"]