"""Compound calculation operators."""

from __future__ import annotations

from logging import getLogger
from typing import Literal, Sequence

import pydantic

from ..core.models import FTMSData
from ..core.operators import BaseOperator, Pipeline
from ..core.registry import operator_registry
from .aroma import calc_aroma
from .dbe import calc_dbe
from .kendrick import CH2_MASS, calc_kendrick
from .nosc import calc_gibbs, calc_nosc
from .ratios import DEFAULT_RATIOS, calc_element_ratios

logger = getLogger(__name__)

RatioName = Literal["O:C", "H:C", "N:C", "P:C", "N:P"]


@operator_registry.register
class DBECalculator(BaseOperator):
    """Compute DBE, DBE-O and DBE-AI columns.

    Refer to :py:func:`ftmspy.calc.calc_dbe` for details.

    """

    valences: dict[str, int] | None = None
    """Map element symbols to valences. If ``None``, canonical valences are used."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_dbe(data, self.valences)


@operator_registry.register
class ElementRatioCalculator(BaseOperator):
    """Compute elemental ratio columns."""

    ratios: list[RatioName] = list(DEFAULT_RATIOS)
    """The ratios to compute."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_element_ratios(data, self.ratios)


@operator_registry.register
class AromaticityCalculator(BaseOperator):
    """Compute the aromaticity index and modified aromaticity index."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_aroma(data)


@operator_registry.register
class NOSCCalculator(BaseOperator):
    """Compute the nominal oxidation state of carbon."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_nosc(data)


@operator_registry.register
class GibbsCalculator(BaseOperator):
    """Compute the Gibbs free energy of carbon oxidation."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_gibbs(data)


@operator_registry.register
class KendrickCalculator(BaseOperator):
    """Compute the Kendrick mass and Kendrick mass defect."""

    base_mass: float = pydantic.Field(default=CH2_MASS, gt=0.5)
    """The exact mass of the repeating unit. Must round to a non-zero nominal mass."""

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        return calc_kendrick(data, self.base_mass)


def create_default_calculations() -> list[BaseOperator]:
    """Create the default list of compound calculations.

    Includes DBE, elemental ratios, aromaticity index, NOSC and Gibbs free energy. Kendrick mass is not
    included as it requires a mass column.

    """
    return [
        DBECalculator(id="dbe"),
        ElementRatioCalculator(id="ratios"),
        AromaticityCalculator(id="aroma"),
        NOSCCalculator(id="nosc"),
        GibbsCalculator(id="gibbs"),
    ]


def compound_calcs(data: FTMSData, calcs: Sequence[BaseOperator] | None = None) -> FTMSData:
    """Apply multiple compound calculations.

    :param data: peak or compound data
    :param calcs: the operators to apply, in order. If ``None``, the operators created by
        :py:func:`create_default_calculations` are used.
    :return: a copy of `data` with the columns added by each calculation.

    """
    pipe = Pipeline("compound-calcs")
    if calcs is None:
        calcs = create_default_calculations()

    for k, op in enumerate(calcs):
        if not op.id:
            op = op.model_copy(update={"id": f"{op.__class__.__name__}-{k}"})
        pipe.add_operator(op)

    logger.info(f"Applying {len(pipe.operators)} compound calculations.")
    return pipe.apply(data)
