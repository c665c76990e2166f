"""Exceptions raised while talking to the catalog."""


class CatalogError(Exception):
    """Base class for catalog lookup failures."""


class ValidationError(CatalogError):
    """Input rejected before any request was made."""


class TransportError(CatalogError):
    """Non-success status or network-level failure."""
    
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(CatalogError):
    """Response body was not the JSON shape we expected."""
