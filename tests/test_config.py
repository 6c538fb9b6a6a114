import numpy as np
import pytest

from physq import (
    Energy,
    LengthUnit,
    Precision,
    QuantityConfig,
    config_context,
    get_config,
    set_config,
)


@pytest.fixture
def restore_config():
    previous = get_config()
    yield
    set_config(
        default_dtype=previous.default_dtype,
        case_insensitive_parsing=previous.case_insensitive_parsing,
        precision=previous.precision,
    )


class TestConfig:
    def test_defaults(self):
        config = QuantityConfig()
        assert config.default_dtype is np.float64
        assert config.case_insensitive_parsing
        assert config.precision is None

    def test_set_config(self, restore_config):
        config = set_config(precision=Precision.Single)
        assert config.precision is Precision.Single
        assert get_config().precision is Precision.Single
        assert Energy(1.0).print() == "1.000000 J"

    def test_context_restores(self):
        with config_context(precision=Precision.Single) as config:
            assert config.precision is Precision.Single
            assert Energy(1.0).print() == "1.000000 J"
        assert get_config().precision is None
        assert Energy(1.0).print() == "1.000000000000000 J"

    def test_context_restores_after_error(self):
        with pytest.raises(RuntimeError):
            with config_context(case_insensitive_parsing=False):
                raise RuntimeError("failed")
        assert get_config().case_insensitive_parsing

    def test_parsing_toggle(self):
        with config_context(case_insensitive_parsing=False):
            assert LengthUnit.parse("FT") is None
        assert LengthUnit.parse("FT") is LengthUnit.Foot

    def test_explicit_precision_wins(self):
        with config_context(precision=Precision.Single):
            assert Energy(1.0).print(precision=Precision.Double) == "1.000000000000000 J"

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            set_config(colour="blue")
        assert get_config() == QuantityConfig()

    def test_invalid_values(self):
        with pytest.raises(TypeError):
            set_config(default_dtype=np.int64)
        with pytest.raises(TypeError):
            set_config(precision=6)
        assert get_config() == QuantityConfig()
