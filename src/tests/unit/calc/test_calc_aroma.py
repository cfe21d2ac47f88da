import numpy
import pandas
import pytest

from ftmspy.calc.aroma import calc_aroma
from ftmspy.calc.dbe import calc_dbe
from ftmspy.core.enums import ColumnRole, DataKind
from ftmspy.core.exceptions import InvalidArgument
from ftmspy.core.models import FTMSData

from .. import helpers


class TestCalcAroma:
    def test_ai_value(self, peak_data: FTMSData):
        actual = calc_aroma(peak_data).e_meta
        # C10H12O2: DBE_AI = 3, C_AI = 10 - 2 = 8
        assert actual["AI"].iloc[0] == pytest.approx(3 / 8)

    def test_ai_mod_value(self, peak_data: FTMSData):
        actual = calc_aroma(peak_data).e_meta
        # C10H12O2: (1 + 10 - 1 - 6) / (10 - 1)
        assert actual["AI_Mod"].iloc[0] == pytest.approx(4 / 9)

    def test_ai_numerator_is_dbe_ai(self):
        data = helpers.create_ftms_data(50)
        aroma = calc_aroma(data).e_meta
        dbe = calc_dbe(data).e_meta
        C, H, N, O, S, P = (data.e_meta[x].to_numpy() for x in helpers.ELEMENT_COLUMNS)  # noqa: E741
        den = C - O - S - N - P
        expected = dbe["DBE_AI"].to_numpy() / numpy.where(den == 0, numpy.nan, den)
        expected = numpy.where(numpy.isfinite(expected) & (expected > 0), expected, 0.0)
        assert numpy.allclose(aroma["AI"], expected)

    def test_negative_values_are_set_to_zero(self, peak_data: FTMSData):
        # C6H12O6 has a negative DBE_AI
        actual = calc_aroma(peak_data).e_meta
        assert actual["AI"].iloc[1] == 0.0

    def test_zero_denominator_is_set_to_zero(self):
        e_meta = pandas.DataFrame({"C": [2], "O": [2], "MolForm": ["C2O2"]})
        actual = calc_aroma(FTMSData(e_meta=e_meta)).e_meta
        assert actual["AI"].iloc[0] == 0.0

    def test_rows_without_formula_are_nan(self, peak_data: FTMSData):
        actual = calc_aroma(peak_data).e_meta
        assert numpy.isnan(actual["AI"].iloc[3])
        assert numpy.isnan(actual["AI_Mod"].iloc[3])

    def test_column_roles_are_recorded(self, peak_data: FTMSData):
        actual = calc_aroma(peak_data)
        assert actual.get_column_name(ColumnRole.AI) == "AI"
        assert actual.get_column_name(ColumnRole.AI_MOD) == "AI_Mod"

    def test_invalid_data_kind_raises_error(self, peak_records):
        data = FTMSData.from_records(peak_records, kind=DataKind.COMPARISON_SUMMARY)
        with pytest.raises(InvalidArgument):
            calc_aroma(data)
