"""
Error types raised while assembling tile features and collections.

All errors abort the current run; only the command line entry point catches
them. Errors pickle by their structured fields, so process pool workers
return them intact.
"""


class TileCollectError(ValueError):
    """Base class for bad pipeline input."""


class InvalidQuadkey(TileCollectError):
    """Quadkey is empty or not a base-4 digit string."""

    def __init__(self, quadkey: str, reason: str = "not a base-4 digit string"):
        self.quadkey = quadkey
        self.reason = reason
        super().__init__(f"Invalid quadkey {quadkey!r}: {reason}")

    def __reduce__(self):
        return (type(self), (self.quadkey, self.reason))


class MalformedFragment(TileCollectError):
    """A serialized fragment is not valid JSON."""

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        self.reason = reason
        preview = fragment if len(fragment) <= 80 else fragment[:77] + "..."
        super().__init__(f"Malformed fragment {preview!r}: {reason}")

    def __reduce__(self):
        return (type(self), (self.fragment, self.reason))


class MalformedBagSyntax(TileCollectError):
    """Bag literal or tile record does not match '{(a),(b),...}'."""
