import numpy
import pandas
import pytest

from ftmspy.calc.ratios import calc_element_ratios
from ftmspy.core.enums import ColumnRole, DataKind
from ftmspy.core.exceptions import InvalidArgument
from ftmspy.core.models import FTMSData


class TestCalcElementRatios:
    def test_default_ratios(self, peak_data: FTMSData):
        actual = calc_element_ratios(peak_data).e_meta
        assert actual["O:C"].iloc[0] == pytest.approx(0.2)
        assert actual["H:C"].iloc[0] == pytest.approx(1.2)
        assert actual["N:C"].iloc[2] == pytest.approx(1 / 3)
        assert actual["P:C"].iloc[0] == 0.0

    def test_column_roles_are_recorded(self, peak_data: FTMSData):
        actual = calc_element_ratios(peak_data)
        assert actual.get_column_name(ColumnRole.OC_RATIO) == "O:C"
        assert actual.get_column_name(ColumnRole.NP_RATIO) == "N:P"

    def test_zero_denominator_is_nan(self, peak_data: FTMSData):
        actual = calc_element_ratios(peak_data).e_meta
        # phosphorus column is missing, all P counts are zero
        assert actual["N:P"].isna().all()

    def test_zero_carbon_count_is_nan(self):
        e_meta = pandas.DataFrame({"C": [0, 2], "O": [1, 1], "MolForm": ["O", "C2O"]})
        actual = calc_element_ratios(FTMSData(e_meta=e_meta), ["O:C"]).e_meta
        assert numpy.isnan(actual["O:C"].iloc[0])
        assert actual["O:C"].iloc[1] == 0.5

    def test_rows_without_formula_are_nan(self, peak_data: FTMSData):
        actual = calc_element_ratios(peak_data).e_meta
        assert actual[["O:C", "H:C", "N:C", "P:C"]].iloc[3].isna().all()

    def test_subset_of_ratios(self, peak_data: FTMSData):
        actual = calc_element_ratios(peak_data, ["H:C"]).e_meta
        assert "H:C" in actual.columns
        assert "O:C" not in actual.columns

    def test_unknown_ratio_raises_error(self, peak_data: FTMSData):
        with pytest.raises(InvalidArgument):
            calc_element_ratios(peak_data, ["C:X"])

    def test_invalid_data_kind_raises_error(self, peak_records):
        data = FTMSData.from_records(peak_records, kind=DataKind.GROUP_SUMMARY)
        with pytest.raises(InvalidArgument):
            calc_element_ratios(data)
