"""A printf-style formatter with C-width integers and binary, ROT13, reversed and escaped-string conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "integers", "strings", "radix", "registry", "formatter"]