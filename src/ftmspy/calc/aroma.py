r"""Aromaticity index calculation.

The aromaticity index (AI) and modified aromaticity index (AI_Mod) are defined in Koch, B. P., &
Dittmar, T. (2006). Rapid communications in mass spectrometry, 20(5), 926-932, with errata published in
2016 (DOI: 10.1002/rcm.7433).

"""

from __future__ import annotations

from logging import getLogger

from ..core.enums import ColumnRole
from ..core.models import FTMSData
from ..utils.numpy import clip_to_zero, safe_divide
from .common import check_ftms_data, get_element_counts, mask_unassigned

logger = getLogger(__name__)

AI_COLUMN = "AI"
AI_MOD_COLUMN = "AI_Mod"


def calc_aroma(data: FTMSData) -> FTMSData:
    r"""Compute the aromaticity index and the modified aromaticity index of each row.

    .. math::

        \textrm{AI} = \frac{1 + C - O - S - \frac{1}{2}(N + P + H)}{C - O - S - N - P}

        \textrm{AI}_{\textrm{mod}} = \frac{1 + C - \frac{1}{2}O - S - \frac{1}{2}(N + P + H)}
            {C - \frac{1}{2}O - S - N - P}

    Negative values and values with a zero denominator are set to ``0``. Rows without a molecular formula
    are set to NaN.

    :param data: peak or compound data
    :return: a copy of `data` with ``AI`` and ``AI_Mod`` columns.
    :raises InvalidArgument: if `data` is not peak or compound data.

    """
    check_ftms_data(data)
    counts = get_element_counts(data)
    C, H, N, O, S, P = counts.values()  # noqa: E741

    ai = clip_to_zero(safe_divide(1 + C - O - S - 0.5 * (N + P + H), C - O - S - N - P))
    ai_mod = clip_to_zero(safe_divide(1 + C - 0.5 * O - S - 0.5 * (N + P + H), C - 0.5 * O - S - N - P))

    n_masked = mask_unassigned(data, ai, ai_mod)
    logger.info(f"Computed aromaticity index for {data.get_n_rows()} rows ({n_masked} without molecular formula).")

    columns = {ColumnRole.AI: (AI_COLUMN, ai), ColumnRole.AI_MOD: (AI_MOD_COLUMN, ai_mod)}
    return data.with_columns(columns)
