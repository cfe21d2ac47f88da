"""Kendrick mass and Kendrick mass defect calculation."""

from __future__ import annotations

from logging import getLogger

import numpy

from ..core.enums import ColumnRole
from ..core.exceptions import InvalidArgument
from ..core.models import FTMSData
from .common import check_ftms_data

logger = getLogger(__name__)

CH2_MASS = 14.01565
"""Exact mass of the CH2 group."""

KENDRICK_MASS_COLUMN = "kmass"
KENDRICK_DEFECT_COLUMN = "kdefect"


def calc_kendrick(data: FTMSData, base_mass: float = CH2_MASS) -> FTMSData:
    r"""Compute the Kendrick mass and Kendrick mass defect of each row.

    .. math::

        \textrm{KM} = m \frac{\textrm{round}(m_{\textrm{base}})}{m_{\textrm{base}}}

        \textrm{KMD} = \lceil \textrm{KM} \rceil - \textrm{KM}

    Only the observed mass is used, so values are computed for rows without a molecular formula too.

    :param data: peak or compound data
    :param base_mass: the exact mass of the repeating unit. By default, the CH2 mass.
    :return: a copy of `data` with ``kmass`` and ``kdefect`` columns.
    :raises InvalidArgument: if `data` is not peak or compound data or if `base_mass` rounds to zero.
    :raises ColumnNotFound: if the metadata does not contain a mass column.

    """
    check_ftms_data(data)
    if not base_mass > 0.0 or round(base_mass) == 0:
        raise InvalidArgument(f"base_mass must be a number greater than 0.5, got {base_mass}.")

    mass = data.get_column(ColumnRole.MASS)
    kmass = mass * round(base_mass) / base_mass
    kdefect = numpy.ceil(kmass) - kmass
    logger.info(f"Computed Kendrick mass defect for {data.get_n_rows()} rows using base mass {base_mass}.")

    columns = {
        ColumnRole.KENDRICK_MASS: (KENDRICK_MASS_COLUMN, kmass),
        ColumnRole.KENDRICK_DEFECT: (KENDRICK_DEFECT_COLUMN, kdefect),
    }
    return data.with_columns(columns)
