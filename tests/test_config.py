import pytest

from lapbench.config import BenchmarkConfig
from lapbench.data import FIXTURE_KINDS


def test_defaults_and_sizes():
    config = BenchmarkConfig(size=100, doublings=3)
    assert config.sizes == [100, 200, 400]
    assert config.fixtures == list(FIXTURE_KINDS)


def test_to_dict_is_plain():
    data = BenchmarkConfig(algorithm="selection").to_dict()
    assert data["algorithm"] == "selection"
    assert data["fixtures"] == list(FIXTURE_KINDS)
    assert data["save_dir"] is None


@pytest.mark.parametrize(
    "kwargs",
    [{"size": 0}, {"runs": 0}, {"doublings": 0}, {"fixtures": ["ordered", "zigzag"]}],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)


def test_repeated_fixture_kinds_collapse_in_order():
    config = BenchmarkConfig(fixtures=["reverse", "random", "reverse", "random"])
    assert config.fixtures == ["reverse", "random"]
