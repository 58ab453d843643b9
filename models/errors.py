class BalanceError(Exception):
    """Base class for balance pipeline errors."""


class TransportError(BalanceError):
    """The token list source or the chain RPC endpoint could not be reached."""


class DecodeError(BalanceError):
    """A raw chain value is not a well-formed non-negative integer."""


class InvalidInputError(BalanceError):
    """The planner was given an empty or malformed address list."""
