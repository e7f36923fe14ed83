"""Exception hierarchy for the sunburst chart package."""


class SunburstError(Exception):
    """Base class for all errors raised by sunburstchart."""


class LayoutError(SunburstError, ValueError):
    """Raised when layout parameters (ring count, radii) are unusable."""


class TreeFormatError(SunburstError, ValueError):
    """Raised when serialized input does not describe a tree or an issue list."""
