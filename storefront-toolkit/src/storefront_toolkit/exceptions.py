"""
Typed errors raised by the storefront toolkit.

Every failure the core reports to its caller is one of the three kinds below.
The HTTP layer ('storefront_toolkit.api.server') maps them to 400, 404 and 500
responses; in-process callers can catch the base 'StorefrontError' or a
specific subclass. The standard-library bases ('ValueError', 'LookupError',
'RuntimeError') are kept so generic handlers still recognise them.
"""


class StorefrontError(Exception):
    """Base class for all errors surfaced by the toolkit."""


class ValidationError(StorefrontError, ValueError):
    """The request was rejected before any state was touched (e.g. an empty chat message)."""


class NotFoundError(StorefrontError, LookupError):
    """The requested record does not exist or is not owned by the requesting user."""


class InternalError(StorefrontError, RuntimeError):
    """An unexpected failure while classifying, selecting or composing a reply."""
