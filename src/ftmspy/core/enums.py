"""ftmspy constants."""

import enum


class DataKind(str, enum.Enum):
    """Kinds of FTMS data containers."""

    PEAK = "peak"
    """Peak-level data, one row per observed mass."""

    COMPOUND = "compound"
    """Compound-level data, one row per compound mapped from peaks."""

    GROUP_SUMMARY = "group-summary"
    """Summary of peak or compound data by sample group."""

    COMPARISON_SUMMARY = "comparison-summary"
    """Summary of pairwise comparisons between sample groups."""


class Element(str, enum.Enum):
    """Elements with count columns in the metadata table."""

    C = "C"
    H = "H"
    N = "N"
    O = "O"  # noqa: E741
    S = "S"
    P = "P"


class ColumnRole(str, enum.Enum):
    """Roles of the metadata columns used in compound calculations.

    Calculations look up columns by role, the physical column name is stored in the data container.

    """

    CARBON = "carbon"
    HYDROGEN = "hydrogen"
    NITROGEN = "nitrogen"
    OXYGEN = "oxygen"
    SULFUR = "sulfur"
    PHOSPHORUS = "phosphorus"
    MOLFORM = "molform"
    """Molecular formula. Missing values identify unassigned entries."""

    MASS = "mass"

    DBE = "dbe"
    DBE_O = "dbe_o"
    DBE_AI = "dbe_ai"
    OC_RATIO = "oc_ratio"
    HC_RATIO = "hc_ratio"
    NC_RATIO = "nc_ratio"
    PC_RATIO = "pc_ratio"
    NP_RATIO = "np_ratio"
    AI = "ai"
    AI_MOD = "ai_mod"
    NOSC = "nosc"
    GFE = "gfe"
    KENDRICK_MASS = "kendrick_mass"
    KENDRICK_DEFECT = "kendrick_defect"


ELEMENT_ROLES: dict[Element, ColumnRole] = {
    Element.C: ColumnRole.CARBON,
    Element.H: ColumnRole.HYDROGEN,
    Element.N: ColumnRole.NITROGEN,
    Element.O: ColumnRole.OXYGEN,
    Element.S: ColumnRole.SULFUR,
    Element.P: ColumnRole.PHOSPHORUS,
}
"""Map each element to the role of its count column."""
