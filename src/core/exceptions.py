class DomainError(Exception):
    """Base class for domain-specific errors."""

    pass


class CatalogUnavailableError(DomainError):
    """Raised when the persisted destination catalog cannot be queried."""

    pass
