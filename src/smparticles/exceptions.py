"""Errors raised when a particle would end up in a physically invalid state."""


class ValidationError(ValueError):
    """Base class for hard validation failures.

    Operations that raise a `ValidationError` leave the object they were
    called on unchanged.
    """


class FourMomentumError(ValidationError):
    pass


class DecayError(ValidationError):
    pass


class ColourChargeError(ValidationError):
    pass
