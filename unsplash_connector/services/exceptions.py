"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class ValidationError(ServiceError):
    """The search request cannot be sent (e.g. empty query text)."""


class TransportError(ServiceError):
    """Network, timeout or HTTP status failure talking to the provider."""


class ParseError(ServiceError):
    """The provider answered with something that is not the expected JSON."""


class SearchError(ServiceError):
    pass


class ResolutionError(ServiceError):
    pass


class ConfigurationError(ServiceError):
    pass


__all__ = [
    "ServiceError",
    "ValidationError",
    "TransportError",
    "ParseError",
    "SearchError",
    "ResolutionError",
    "ConfigurationError",
]
