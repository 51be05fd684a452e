"""Domain-level exceptions.

Every failure the storefront reports on purpose is a DomainException
subclass, so the CLI layer can catch them uniformly and show a clean
message.  Storage errors are not wrapped and propagate as-is.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Bad input, or a business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(DomainException):
    """The user has no cart, or the cart holds no items."""


class InsufficientStockError(DomainException):
    """A stock reservation failed; the order was rolled back and cancelled."""


class NotificationError(DomainException):
    """A notification could not be delivered.

    Raised by senders and always caught by the dispatcher.
    """
