"""
Resolver Exceptions

Every failure of a resolve call surfaces as one of these. None of them are
retried internally.
"""

from typing import List, Optional


class LGResolverError(Exception):
    """Base class for all resolver errors"""
    pass


class InvalidConfigurationError(LGResolverError):
    """Raised when endpoint credentials or identifiers are missing"""
    pass


class InvalidArgumentError(LGResolverError):
    """Raised when resolve() is called with an unusable argument"""
    pass


class AuthenticationError(LGResolverError):
    """Raised when the token service or the LG service rejects the credential"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ServiceError(LGResolverError):
    """Raised on any non-auth transport or HTTP failure from the LG service"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UnsupportedValueTypeError(LGResolverError):
    """Raised when an entity value cannot be encoded as a wire value"""
    pass


class MalformedWireValueError(LGResolverError):
    """Raised when a wire value from the service cannot be decoded"""
    pass


class IncompleteResolutionError(LGResolverError):
    """Raised when a discovered template reference has no resolution"""

    def __init__(self, missing: List[str]):
        super().__init__(f"No resolution returned for: {', '.join(missing)}")
        self.missing = missing
