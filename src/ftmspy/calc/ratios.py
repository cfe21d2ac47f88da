"""Elemental ratio calculation."""

from __future__ import annotations

from collections.abc import Sequence
from logging import getLogger

from ..core.enums import ColumnRole, Element
from ..core.exceptions import InvalidArgument
from ..core.models import FTMSData
from ..utils.numpy import safe_divide
from .common import check_ftms_data, get_element_counts, mask_unassigned

logger = getLogger(__name__)

RATIOS: dict[str, tuple[Element, Element, ColumnRole]] = {
    "O:C": (Element.O, Element.C, ColumnRole.OC_RATIO),
    "H:C": (Element.H, Element.C, ColumnRole.HC_RATIO),
    "N:C": (Element.N, Element.C, ColumnRole.NC_RATIO),
    "P:C": (Element.P, Element.C, ColumnRole.PC_RATIO),
    "N:P": (Element.N, Element.P, ColumnRole.NP_RATIO),
}
"""Map ratio names to the numerator element, denominator element and column role."""

DEFAULT_RATIOS = ("O:C", "H:C", "N:C", "P:C", "N:P")


def calc_element_ratios(data: FTMSData, ratios: Sequence[str] = DEFAULT_RATIOS) -> FTMSData:
    """Compute elemental ratios for each row.

    Each ratio is stored in a metadata column with the ratio name, e.g. ``"O:C"``. Rows with a zero
    denominator count and rows without a molecular formula are set to NaN.

    :param data: peak or compound data
    :param ratios: the ratios to compute. Available ratios are ``"O:C"``, ``"H:C"``, ``"N:C"``, ``"P:C"``
        and ``"N:P"``.
    :return: a copy of `data` with a new column for each ratio.
    :raises InvalidArgument: if `data` is not peak or compound data or if an unknown ratio is requested.

    """
    check_ftms_data(data)
    unknown = [x for x in ratios if x not in RATIOS]
    if unknown:
        raise InvalidArgument(f"Unknown ratios {unknown}. Valid ratios are {list(RATIOS)}.")

    counts = get_element_counts(data)
    columns = dict()
    for name in ratios:
        num, den, role = RATIOS[name]
        columns[role] = (name, safe_divide(counts[num], counts[den]))

    n_masked = mask_unassigned(data, *(values for _, values in columns.values()))
    logger.info(f"Computed {list(ratios)} ratios for {data.get_n_rows()} rows ({n_masked} without molecular formula).")
    return data.with_columns(columns)
