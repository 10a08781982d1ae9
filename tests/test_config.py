"""Tests for settings and the default random source."""

import pytest
from pydantic import ValidationError

from py_farmsim.config import Settings
from py_farmsim.core.alea_prng import AleaPRNG
from py_farmsim.utils import random as prng_utils


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.soil_noise_probability == 0.2
        assert settings.farm_cell_count == 9

    def test_cors_origins_split(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test,,")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SOIL_NOISE_PROBABILITY", "0.5")
        monkeypatch.setenv("FARM_CELL_COUNT", "4")
        settings = Settings()
        assert settings.soil_noise_probability == 0.5
        assert settings.farm_cell_count == 4

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_invalid_probability(self, value):
        with pytest.raises(ValidationError):
            Settings(soil_noise_probability=value)

    def test_invalid_cell_count(self):
        with pytest.raises(ValidationError):
            Settings(farm_cell_count=0)


class TestDefaultPRNG:

    def test_set_random_seed(self):
        prng = prng_utils.set_random_seed("fixed")
        assert prng_utils.get_prng() is prng
        assert prng.random() == AleaPRNG("fixed").random()

    def test_unseeded_default(self):
        prng = prng_utils.set_random_seed(None)
        assert len(prng.seed) == 8

    def test_prng_for(self):
        default = prng_utils.set_random_seed("default")
        assert prng_utils.prng_for(None) is default
        seeded = prng_utils.prng_for("abc")
        assert seeded is not default
        assert seeded.random() == AleaPRNG("abc").random()
