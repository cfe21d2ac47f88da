r"""Double bond equivalent calculation.

References
----------
Koch, B. P., & Dittmar, T. (2006). From mass to structure: an aromaticity index for high-resolution mass
data of natural organic matter. Rapid communications in mass spectrometry, 20(5), 926-932.

Koch, B. P., & Dittmar, T. (2016). Errata. Rapid communications in mass spectrometry, 30(1), 250.
DOI: 10.1002/rcm.7433

"""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from numbers import Real

from ..core.enums import ColumnRole, Element
from ..core.exceptions import InvalidArgument
from ..core.models import FTMSData
from .common import check_ftms_data, get_element_counts, mask_unassigned

logger = getLogger(__name__)

DEFAULT_DBE_COEFFICIENTS: dict[Element, int] = {
    Element.C: 2,
    Element.H: -1,
    Element.N: 1,
    Element.O: 0,
    Element.S: 0,
    Element.P: 1,
}
"""Coefficients equal to the valence minus two for C=4, H=1, N=3, O=2, S=2 and P=3."""

MISSING_VALENCE_COEFFICIENT = 2
"""Coefficient used for elements not included in a valence mapping (i.e. a valence of 4)."""

DBE_COLUMN = "DBE"
DBE_O_COLUMN = "DBE_O"
DBE_AI_COLUMN = "DBE_AI"


def resolve_dbe_coefficients(valences: Mapping[str, int] | None = None) -> dict[Element, int]:
    """Compute the coefficient that multiplies each element count in the DBE equation.

    :param valences: map element symbols to their valence. If ``None``, the default coefficients are
        used. Otherwise, each coefficient is equal to the valence minus two. Elements not included in the
        mapping are assigned a coefficient of ``2``.
    :return: a dictionary that maps elements to coefficients
    :raises InvalidArgument: if `valences` is not a mapping or if it contains keys other than
        ``'C'``, ``'H'``, ``'N'``, ``'O'``, ``'S'`` or ``'P'``, or non-numeric valences.

    """
    if valences is None:
        return DEFAULT_DBE_COEFFICIENTS.copy()

    valid_symbols = {x.value for x in Element}
    is_valid = isinstance(valences, Mapping) and set(valences).issubset(valid_symbols)
    if not is_valid or not all(isinstance(v, Real) and not isinstance(v, bool) for v in valences.values()):
        msg = (
            "valences must be a mapping with keys 'C', 'H', 'N', 'O', 'S' or 'P' and numeric values "
            "representing the valence of each element."
        )
        raise InvalidArgument(msg)

    coefficients = dict()
    for element in Element:
        if element.value in valences:
            coefficients[element] = valences[element.value] - 2
        else:
            coefficients[element] = MISSING_VALENCE_COEFFICIENT
    return coefficients


def calc_dbe(data: FTMSData, valences: Mapping[str, int] | None = None) -> FTMSData:
    r"""Compute the double bond equivalent (DBE), DBE-O and DBE-AI of each row.

    The DBE is computed as:

    .. math::

        \textrm{DBE} = 1 + \frac{1}{2} \sum_{i} N_{i} (V_{i} - 2)

    where :math:`N_{i}` and :math:`V_{i}` are the element counts and valences. Using the default valences
    this is equivalent to :math:`1 + \frac{1}{2}(2C - H + N + P)`. DBE-O and DBE-AI are always computed
    with fixed equations and do not depend on `valences`:

    .. math::

        \textrm{DBE-O} = 1 + \frac{1}{2}(2C - H + N + P) - O

        \textrm{DBE-AI} = 1 + C - O - S - \frac{1}{2}(N + P + H)

    Element count columns missing from the metadata are treated as zero counts. Rows without a molecular
    formula are set to NaN in the three columns.

    :param data: peak or compound data
    :param valences: map element symbols to their valence. Elements not included are assumed to have a
        valence of 4. If ``None``, the canonical valences C=4, H=1, N=3, O=2, S=2 and P=3 are used.
    :return: a copy of `data` with ``DBE``, ``DBE_O`` and ``DBE_AI`` columns in the metadata.
    :raises InvalidArgument: if `data` is not peak or compound data, or if `valences` is malformed.

    """
    check_ftms_data(data)
    coefficients = resolve_dbe_coefficients(valences)
    logger.debug(f"Computing DBE using coefficients {({k.value: v for k, v in coefficients.items()})}.")

    counts = get_element_counts(data)
    C, H, N, O, S, P = (counts[x] for x in Element)  # noqa: E741

    dbe = 1.0 + 0.5 * sum(coefficients[x] * counts[x] for x in Element)
    dbe_o = 1.0 + 0.5 * (2 * C - H + N + P) - O
    dbe_ai = 1.0 + C - O - S - 0.5 * (N + P + H)

    n_masked = mask_unassigned(data, dbe, dbe_o, dbe_ai)
    logger.info(f"Computed DBE for {data.get_n_rows()} rows ({n_masked} without molecular formula).")

    columns = {
        ColumnRole.DBE: (DBE_COLUMN, dbe),
        ColumnRole.DBE_O: (DBE_O_COLUMN, dbe_o),
        ColumnRole.DBE_AI: (DBE_AI_COLUMN, dbe_ai),
    }
    return data.with_columns(columns)
