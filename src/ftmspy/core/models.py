"""ftmspy core data models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Self

import numpy
import pandas
import pydantic
from pydantic.functional_validators import BeforeValidator

from ..utils.numpy import BoolArray1D, FloatArray1D, constant_array
from . import exceptions
from .enums import ColumnRole, DataKind

DEFAULT_COLUMN_NAMES: dict[ColumnRole, str] = {
    ColumnRole.CARBON: "C",
    ColumnRole.HYDROGEN: "H",
    ColumnRole.NITROGEN: "N",
    ColumnRole.OXYGEN: "O",
    ColumnRole.SULFUR: "S",
    ColumnRole.PHOSPHORUS: "P",
    ColumnRole.MOLFORM: "MolForm",
    ColumnRole.MASS: "Mass",
}
"""Column names used when no name is provided for a role."""


def merge_default_column_names(value: Mapping[ColumnRole | str, str] | None) -> dict[ColumnRole, str]:
    """Complete a role to column name mapping using the default column names."""
    res = DEFAULT_COLUMN_NAMES.copy()
    if value is not None:
        res.update({ColumnRole(k): v for k, v in value.items()})
    return res


class FTMSData(pydantic.BaseModel):
    """Container for FTMS peak or compound data.

    Each row in the metadata table :py:attr:`e_meta` is associated with a peak or a compound. Columns are
    accessed by their role (e.g. the carbon count or the molecular formula) rather than by their name,
    the mapping between roles and physical column names is stored in :py:attr:`column_names`.

    Models are treated as immutable by calculations: new columns are added by creating a new
    instance with :py:meth:`with_columns`.

    """

    e_meta: pandas.DataFrame = pydantic.Field(repr=False)
    """The per-row metadata table."""

    kind: DataKind = DataKind.PEAK
    """The data container kind."""

    column_names: Annotated[dict[ColumnRole, str], BeforeValidator(merge_default_column_names)] = pydantic.Field(
        default_factory=lambda: DEFAULT_COLUMN_NAMES.copy()
    )
    """Map column roles to column names in the metadata table."""

    model_config = pydantic.ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    def get_column_name(self, role: ColumnRole) -> str:
        """Retrieve the name of the column associated with a role.

        :param role: the column role
        :raises ColumnNotFound: if no column name is defined for the role

        """
        if role not in self.column_names:
            raise exceptions.ColumnNotFound(f"No column name defined for role `{role.value}`.")
        return self.column_names[role]

    def set_column_name(self, role: ColumnRole, name: str) -> None:
        """Set the name of the column associated with a role."""
        self.column_names = {**self.column_names, role: name}

    def has_column(self, role: ColumnRole) -> bool:
        """Check if a role has a column name and the column exists in the metadata table."""
        return role in self.column_names and self.column_names[role] in self.e_meta.columns

    def get_n_rows(self) -> int:
        """Retrieve the number of rows in the metadata table."""
        return self.e_meta.shape[0]

    def get_column(self, role: ColumnRole, default: float | None = None) -> FloatArray1D:
        """Retrieve the values of a numeric column as a float array.

        :param role: the column role
        :param default: the value used for all rows if the column is missing. If set to ``None``, a missing
            column raises an error.
        :return: a 1D array with the column values. Missing values are converted to NaN.
        :raises ColumnNotFound: if the column is missing and no default is provided.

        """
        if self.has_column(role):
            return self.e_meta[self.column_names[role]].to_numpy(dtype=float, na_value=numpy.nan)

        if default is None:
            name = self.column_names.get(role)
            raise exceptions.ColumnNotFound(f"Column `{name}` with role `{role.value}` not found in metadata.")
        return constant_array(default, self.get_n_rows())

    def is_assigned(self) -> BoolArray1D:
        """Check which rows have a molecular formula.

        :return: a boolean array that is ``True`` for rows with a non-missing molecular formula. If the
            metadata does not contain a molecular formula column, no row is assigned.

        """
        if not self.has_column(ColumnRole.MOLFORM):
            return numpy.zeros(self.get_n_rows(), dtype=bool)
        return self.e_meta[self.column_names[ColumnRole.MOLFORM]].notna().to_numpy()

    def with_columns(self, columns: Mapping[ColumnRole, tuple[str, Any]]) -> Self:
        """Create a copy of the data with new metadata columns.

        :param columns: map a column role to a tuple of column name and column values. Existing columns with
            the same name are overwritten.
        :return: a new data instance. The metadata table and column names are copies of the original ones.

        """
        e_meta = self.e_meta.copy()
        column_names = self.column_names.copy()
        for role, (name, values) in columns.items():
            e_meta[name] = values
            column_names[role] = name
        return self.model_copy(update={"e_meta": e_meta, "column_names": column_names})

    @classmethod
    def from_records(
        cls, records: list[dict[str, Any]], kind: DataKind = DataKind.PEAK, **column_names: str
    ) -> Self:
        """Create a new instance from a list of row dictionaries.

        :param records: the metadata rows
        :param kind: the data kind
        :param column_names: column names passed as role value keywords, e.g. ``carbon="C_count"``

        """
        return cls(e_meta=pandas.DataFrame.from_records(records), kind=kind, column_names=column_names)
