"""Error taxonomy for the divider search engine."""


class DividerError(ValueError):
    """Base class for all engine errors."""


class UnknownSeries(DividerError):
    """Series name is not one of the known E-series tables."""


class DegenerateArm(DividerError):
    """An arm reduces to zero, negative or infinite resistance."""


class InvalidTarget(DividerError):
    """Target voltage is zero, negative or not finite."""
