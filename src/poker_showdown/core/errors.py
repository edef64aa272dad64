"""Errors raised while turning raw card tokens into hands."""


class HandParseError(ValueError):
    """Base class for malformed card or hand input."""

    pass


class InvalidRank(HandParseError):
    """Raised when a rank character is not one of 2-9, T, J, Q, K, A."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid rank: {token!r}")


class InvalidSuit(HandParseError):
    """Raised when a suit character is not one of c, d, h, s."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid suit: {token!r}")


class InvalidHand(HandParseError):
    """Raised when a hand does not consist of exactly five well-formed cards."""

    pass
