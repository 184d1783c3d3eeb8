"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from modeltime.config.defaults import default_config
from modeltime.config.schema import ModeltimeConfig
from modeltime.core.modeltime import Modeltime


def _make_config(**overrides: int) -> ModeltimeConfig:
    data = default_config().model_dump()
    data.update(overrides)
    return ModeltimeConfig.model_validate(data)


@pytest.fixture
def make_config() -> Callable[..., ModeltimeConfig]:
    """Factory building a config from the defaults with selected fields replaced."""
    return _make_config


@pytest.fixture
def config() -> ModeltimeConfig:
    """Reference config: 1990/2005/2035/2095, steps 5/5/10, data to 2005 by 5."""
    return default_config()


@pytest.fixture
def modeltime(config: ModeltimeConfig) -> Modeltime:
    return Modeltime.from_config(config)


@pytest.fixture
def uneven_config() -> ModeltimeConfig:
    """First era of 7 years stepped by 5; the other eras divide evenly."""
    return ModeltimeConfig(
        start_year=2000,
        inter_year1=2007,
        inter_year2=2017,
        end_year=2027,
        time_step1=5,
        time_step2=5,
        time_step3=10,
        data_end_year=2005,
        data_time_step=5,
    )
