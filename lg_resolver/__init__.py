"""
LG Resolver

Resolves bracketed template references in conversational activities using a
language generation service.
"""

from lg_resolver.activity import Activity, CardAction, SuggestedActions
from lg_resolver.config import LGEndpoint, LGOptions, load_config
from lg_resolver.exceptions import (
    LGResolverError,
    InvalidConfigurationError,
    InvalidArgumentError,
    AuthenticationError,
    ServiceError,
    UnsupportedValueTypeError,
    MalformedWireValueError,
    IncompleteResolutionError,
)
from lg_resolver.patterns import PatternRecognizer
from lg_resolver.resolver import LGResolver

__all__ = [
    'Activity',
    'CardAction',
    'SuggestedActions',
    'LGEndpoint',
    'LGOptions',
    'load_config',
    'LGResolver',
    'PatternRecognizer',
    'LGResolverError',
    'InvalidConfigurationError',
    'InvalidArgumentError',
    'AuthenticationError',
    'ServiceError',
    'UnsupportedValueTypeError',
    'MalformedWireValueError',
    'IncompleteResolutionError',
]
__version__ = '0.1.0'
