"""Helpers classes and functions for unit tests."""

from __future__ import annotations

import numpy
import pandas

from ftmspy.core.enums import ColumnRole, DataKind
from ftmspy.core.models import FTMSData
from ftmspy.core.operators import BaseOperator
from ftmspy.core.registry import operator_registry

ELEMENT_COLUMNS = ["C", "H", "N", "O", "S", "P"]


def create_ftms_data(n_rows: int, kind: DataKind = DataKind.PEAK, n_unassigned: int = 0) -> FTMSData:
    """Create data with random element counts.

    The last `n_unassigned` rows do not have a molecular formula.

    """
    counts = numpy.random.randint(low=0, high=30, size=(n_rows, len(ELEMENT_COLUMNS)))
    counts[:, 0] += 1
    e_meta = pandas.DataFrame(counts, columns=ELEMENT_COLUMNS)
    formulas: list[str | None] = [f"F{k}" for k in range(n_rows)]
    for k in range(n_rows - n_unassigned, n_rows):
        formulas[k] = None
    e_meta["MolForm"] = formulas
    e_meta["Mass"] = numpy.random.uniform(low=100.0, high=1000.0, size=n_rows)
    return FTMSData(e_meta=e_meta, kind=kind)


@operator_registry.register
class DummyMassScaler(BaseOperator):
    """Multiply the mass column by a constant factor."""

    factor: float = 2.0

    def _apply_operator(self, data: FTMSData) -> FTMSData:
        mass = data.get_column(ColumnRole.MASS) * self.factor
        return data.with_columns({ColumnRole.MASS: (data.get_column_name(ColumnRole.MASS), mass)})

    def pre_apply(self):
        """Test pre apply functionality."""
        pass

    def post_apply(self):
        """Test post apply functionality."""
        pass
