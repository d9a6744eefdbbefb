"""Identifiers, API models, request-path parsing and multistatus XML for a read-only WebDAV view of a DANDI Archive instance."""

__version__ = "0.1.0"

__all__ = [
    "consts",
    "ids",
    "models",
    "davutil",
    "xmlprops",
    "davpath",
]