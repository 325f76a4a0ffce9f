class KundaliError(Exception):
    """
    Base exception for all kundali-related domain errors.
    """
    pass


class InvalidBirthDataError(KundaliError):
    """
    Raised when birth inputs are missing, malformed or out of range.

    Always raised before any astronomical computation starts.
    """
    pass


class UnsupportedAyanamsaError(InvalidBirthDataError):
    """
    Raised when an unsupported ayanamsa is requested.
    """
    pass


class EphemerisError(KundaliError):
    """
    Raised by an ephemeris adapter that cannot produce a position
    or a sidereal time.

    Never escapes the strategy selection; it turns into a fallback.
    """
    pass


class CalculationError(KundaliError):
    """
    Raised when astronomical calculation fails.

    The original exception is chained as ``__cause__``.
    """
    pass
