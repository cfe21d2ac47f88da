"""Nominal oxidation state of carbon and Gibbs free energy calculation."""

from __future__ import annotations

from logging import getLogger

from ..core.enums import ColumnRole
from ..core.models import FTMSData
from ..utils.numpy import FloatArray1D, safe_divide
from .common import check_ftms_data, get_element_counts, mask_unassigned

logger = getLogger(__name__)

NOSC_COLUMN = "NOSC"
GFE_COLUMN = "GFE"


def _compute_nosc(data: FTMSData) -> FloatArray1D:
    counts = get_element_counts(data)
    C, H, N, O, S, P = counts.values()  # noqa: E741
    return 4.0 - safe_divide(4 * C + H - 3 * N - 2 * O + 5 * P - 2 * S, C)


def calc_nosc(data: FTMSData) -> FTMSData:
    r"""Compute the nominal oxidation state of carbon (NOSC) of each row.

    .. math::

        \textrm{NOSC} = 4 - \frac{4C + H - 3N - 2O + 5P - 2S}{C}

    Rows with a zero carbon count or without a molecular formula are set to NaN.

    :param data: peak or compound data
    :return: a copy of `data` with a ``NOSC`` column.
    :raises InvalidArgument: if `data` is not peak or compound data.

    """
    check_ftms_data(data)
    nosc = _compute_nosc(data)
    n_masked = mask_unassigned(data, nosc)
    logger.info(f"Computed NOSC for {data.get_n_rows()} rows ({n_masked} without molecular formula).")
    return data.with_columns({ColumnRole.NOSC: (NOSC_COLUMN, nosc)})


def calc_gibbs(data: FTMSData) -> FTMSData:
    r"""Compute the Gibbs free energy of carbon oxidation of each row.

    Uses the relation from LaRowe, D. E., & Van Cappellen, P. (2011). Degradation of natural organic matter:
    a thermodynamic analysis. Geochimica et Cosmochimica Acta, 75(8), 2030-2042:

    .. math::

        \Delta G^{0}_{\textrm{Cox}} = 60.3 - 28.5 \, \textrm{NOSC}

    in kJ per mol of carbon. The NOSC column is used if it already exists. Otherwise, it is computed and
    added to the metadata.

    :param data: peak or compound data
    :return: a copy of `data` with a ``GFE`` column.
    :raises InvalidArgument: if `data` is not peak or compound data.

    """
    check_ftms_data(data)
    if not data.has_column(ColumnRole.NOSC):
        data = calc_nosc(data)

    gfe = 60.3 - 28.5 * data.get_column(ColumnRole.NOSC)
    n_masked = mask_unassigned(data, gfe)
    logger.info(f"Computed Gibbs free energy for {data.get_n_rows()} rows ({n_masked} without molecular formula).")
    return data.with_columns({ColumnRole.GFE: (GFE_COLUMN, gfe)})
