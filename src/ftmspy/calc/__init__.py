"""Compound calculations for FTMS peak and compound data.

Provides:

- double bond equivalent (DBE), DBE-O and DBE-AI.
- elemental ratios.
- aromaticity index and modified aromaticity index.
- nominal oxidation state of carbon and Gibbs free energy of carbon oxidation.
- Kendrick mass and Kendrick mass defect.

All calculations take an :py:class:`~ftmspy.core.models.FTMSData` instance and return a copy with new
metadata columns. Element count columns missing from the metadata are treated as zero counts, and rows
without a molecular formula get NaN values.

"""

from .aroma import calc_aroma
from .dbe import DEFAULT_DBE_COEFFICIENTS, calc_dbe, resolve_dbe_coefficients
from .kendrick import calc_kendrick
from .nosc import calc_gibbs, calc_nosc
from .operators import (
    AromaticityCalculator,
    DBECalculator,
    ElementRatioCalculator,
    GibbsCalculator,
    KendrickCalculator,
    NOSCCalculator,
    compound_calcs,
    create_default_calculations,
)
from .ratios import calc_element_ratios

__all__ = [
    "DEFAULT_DBE_COEFFICIENTS",
    "AromaticityCalculator",
    "DBECalculator",
    "ElementRatioCalculator",
    "GibbsCalculator",
    "KendrickCalculator",
    "NOSCCalculator",
    "calc_aroma",
    "calc_dbe",
    "calc_element_ratios",
    "calc_gibbs",
    "calc_kendrick",
    "calc_nosc",
    "compound_calcs",
    "create_default_calculations",
    "resolve_dbe_coefficients",
]
