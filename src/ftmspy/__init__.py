"""Analysis tools for Fourier-transform mass spectrometry data."""

from .calc import calc_dbe, compound_calcs
from .core.enums import ColumnRole, DataKind, Element
from .core.exceptions import InvalidArgument
from .core.models import FTMSData
from .core.operators import Pipeline

__all__ = [
    "ColumnRole",
    "DataKind",
    "Element",
    "FTMSData",
    "InvalidArgument",
    "Pipeline",
    "calc_dbe",
    "compound_calcs",
]
