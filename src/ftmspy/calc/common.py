"""Shared validation and column extraction for compound calculations."""

from __future__ import annotations

from logging import getLogger

import numpy

from ..core.enums import ELEMENT_ROLES, DataKind, Element
from ..core.exceptions import InvalidArgument
from ..core.models import FTMSData
from ..utils.numpy import FloatArray1D

logger = getLogger(__name__)

ACCEPTED_KINDS = frozenset({DataKind.PEAK, DataKind.COMPOUND})
"""Data kinds with per-row elemental composition."""


def check_ftms_data(data: FTMSData) -> None:
    """Raise an exception if the data is not peak-level or compound-level FTMS data.

    :raises InvalidArgument: if `data` is not an :py:class:`FTMSData` instance or if its kind is not
        accepted by compound calculations.

    """
    if not isinstance(data, FTMSData):
        raise InvalidArgument(f"data must be an FTMSData instance, got {type(data).__name__}.")

    if data.kind not in ACCEPTED_KINDS:
        msg = f"data must be of kind 'peak' or 'compound', got '{data.kind.value}'."
        raise InvalidArgument(msg)


def get_element_counts(data: FTMSData) -> dict[Element, FloatArray1D]:
    """Retrieve the count of each element.

    Elements without a count column in the metadata are assumed to have a zero count in all rows. Values
    are not validated.

    """
    counts = dict()
    for element, role in ELEMENT_ROLES.items():
        if not data.has_column(role):
            logger.debug(f"No `{role.value}` column found in metadata. Using zero {element.value} counts.")
        counts[element] = data.get_column(role, default=0.0)
    return counts


def mask_unassigned(data: FTMSData, *columns: FloatArray1D) -> int:
    """Set values in rows without a molecular formula to NaN.

    Arrays are modified in place.

    :param data: the data used to compute the columns
    :param columns: float arrays with one value per row in the data
    :return: the number of masked rows

    """
    unassigned = ~data.is_assigned()
    for col in columns:
        col[unassigned] = numpy.nan
    return int(unassigned.sum())
