import pytest
from numpy.random import seed

from ftmspy.core.enums import DataKind
from ftmspy.core.models import FTMSData


@pytest.fixture(scope="session", autouse=True)
def random_seed():
    seed(1234)
    return


@pytest.fixture
def peak_records() -> list[dict]:
    return [
        {"Mass": 164.08373, "C": 10, "H": 12, "N": 0, "O": 2, "S": 0, "MolForm": "C10H12O2"},
        {"Mass": 180.06339, "C": 6, "H": 12, "N": 0, "O": 6, "S": 0, "MolForm": "C6H12O6"},
        {"Mass": 121.01975, "C": 3, "H": 7, "N": 1, "O": 2, "S": 1, "MolForm": "C3H7NO2S"},
        {"Mass": 250.12345, "C": 12, "H": 10, "N": 2, "O": 3, "S": 0, "MolForm": None},
    ]


@pytest.fixture
def peak_data(peak_records) -> FTMSData:
    return FTMSData.from_records(peak_records, kind=DataKind.PEAK)


@pytest.fixture
def compound_data(peak_records) -> FTMSData:
    return FTMSData.from_records(peak_records, kind=DataKind.COMPOUND)
