"""
Exceptions and warnings raised by standard atmosphere calculations.
"""


# ======================================================================

class InvalidAltitudeError(ValueError):
    """
    Raised when an altitude cannot be used at all, e.g. it is not a
    finite number or it makes the geopotential / geometric conversion
    singular (``H == radius``).
    """
    pass


# ----------------------------------------------------------------------

class DomainError(ArithmeticError):
    """
    Raised when a formula would leave its numeric domain, for example a
    negative base raised to a fractional power in the barotropic
    pressure equation or a non-positive absolute temperature.  Rather
    than returning NaN or a complex result, the calculation is stopped.

    Additional information (optional) is attached as attributes and
    listed beneath the main message.
    """

    def __init__(self, *args, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `ArithmeticError`.
        kwargs :
            Additional attributes added to the object, e.g. ``H=...``,
            ``layer=...``.
        """
        super().__init__(*args)
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class AltitudeRangeWarning(UserWarning):
    """
    Issued when an altitude lies outside the tabulated layers.  The
    result is still computed by extrapolating the nearest layer, but the
    standard does not define the atmosphere there.
    """
    pass
