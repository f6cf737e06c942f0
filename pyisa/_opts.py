from __future__ import annotations

from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class AtmosphereOptions:
    """
    Dataclass that holds option flags for atmosphere calculations.  See
    `get_options` and `set_options` for full details.
    """
    warn_out_of_range: bool

    def __post_init__(self):
        if not isinstance(self.warn_out_of_range, bool):
            raise TypeError("Require 'warn_out_of_range' to be a bool.")


# Create single instance and set defaults.
_options = AtmosphereOptions(
    warn_out_of_range=True
)


# ----------------------------------------------------------------------

def get_options() -> AtmosphereOptions:
    """
    Returns
    -------
    options : AtmosphereOptions
        A copy of the current options.  For a full description of each
        option, see `set_options`.
    """
    return replace(_options)


# noinspection PyIncorrectDocstring
def set_options(**kwargs):
    """
    Set the current atmosphere options.  Options only change advisory
    behaviour; computed values are never affected.

    Parameters
    ----------
    warn_out_of_range : bool, default = True
        If `True`, an `AltitudeRangeWarning` is issued whenever an
        altitude outside the tabulated layers is evaluated (the result
        is extrapolated from the nearest layer).  If `False` no warning
        is given.

    Raises
    ------
    TypeError
        If an unknown option or an invalid value is given.
    """
    global _options
    _options = replace(_options, **kwargs)
