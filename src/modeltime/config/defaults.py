"""Default configuration values for modeltime."""

from __future__ import annotations

from modeltime.config.schema import ModeltimeConfig

# Reference calendar: 5-year steps to 2035, then 10-year steps to 2095.
DEFAULT_START_YEAR = 1990
DEFAULT_INTER_YEAR1 = 2005
DEFAULT_INTER_YEAR2 = 2035
DEFAULT_END_YEAR = 2095


def default_config() -> ModeltimeConfig:
    """Return the reference period grid with calibration data through 2005."""
    return ModeltimeConfig(
        start_year=DEFAULT_START_YEAR,
        inter_year1=DEFAULT_INTER_YEAR1,
        inter_year2=DEFAULT_INTER_YEAR2,
        end_year=DEFAULT_END_YEAR,
        time_step1=5,
        time_step2=5,
        time_step3=10,
        data_end_year=DEFAULT_INTER_YEAR1,
        data_time_step=5,
    )
