"""Period discretization of the modeled calendar."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import numpy as np
from numpy.typing import NDArray

from modeltime.config.schema import ModeltimeConfig
from modeltime.core.segments import (
    EraSpan,
    build_year_map,
    era_segments,
    expand_segments,
    period_years,
)
from modeltime.utils.exceptions import NotFinalizedError, PeriodError, UnknownYearError

logger = logging.getLogger(__name__)

_ERA_NAMES = ("First", "Second", "Third")


@dataclass(frozen=True, slots=True)
class PeriodLookup:
    """Result of resolving a calendar year to a model period.

    Attributes:
        year: The year that was looked up.
        period: The period representing ``year``, or None if the year lies
            outside the modeled span.
    """

    year: int
    period: int | None

    @property
    def found(self) -> bool:
        return self.period is not None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> int:
        """Return the period, raising UnknownYearError if the lookup missed."""
        if self.period is None:
            raise UnknownYearError(self.year)
        return self.period

    def period_or(self, default: int) -> int:
        """Return the period, or ``default`` if the lookup missed."""
        return default if self.period is None else self.period


def _frozen(array: NDArray[np.int64]) -> NDArray[np.int64]:
    array.setflags(write=False)
    return array


class Modeltime:
    """Maps model periods to calendar years and back.

    Built from a ``ModeltimeConfig``; ``finalize`` computes the period grid,
    the year lookup and the data-period alignment once, after which the
    object is read-only.

    Period 0 is the base period at ``start_year``. Each era then adds its
    whole steps, plus one shorter remainder period when its length does not
    divide evenly, so the last period always lands on ``end_year``.
    """

    def __init__(self, config: ModeltimeConfig, log: logging.Logger | None = None) -> None:
        self._config = config
        self._log = log if log is not None else logger
        self._finalized = False

        self.number_of_periods1 = 0
        self.number_of_periods1a = 0
        self.number_of_periods2 = 0
        self.number_of_periods2a = 0
        self.number_of_periods3 = 0
        self.number_of_periods3a = 0
        self.max_period = 0
        self.max_data_period = 0

        self._period_to_time_step: NDArray[np.int64] = np.empty(0, dtype=np.int64)
        self._model_period_to_year: NDArray[np.int64] = np.empty(0, dtype=np.int64)
        self._year_to_model_period: Mapping[int, int] = MappingProxyType({})
        self._data_offset: NDArray[np.int64] = np.empty(0, dtype=np.int64)
        self._data_period_to_model_period: NDArray[np.int64] = np.empty(0, dtype=np.int64)

    @classmethod
    def from_config(
        cls, config: ModeltimeConfig, log: logging.Logger | None = None
    ) -> Modeltime:
        """Create and finalize a Modeltime."""
        modeltime = cls(config, log=log)
        modeltime.finalize()
        return modeltime

    @property
    def config(self) -> ModeltimeConfig:
        return self._config

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def eras(self) -> list[EraSpan]:
        """Return the three eras in calendar order."""
        cfg = self._config
        return [
            EraSpan(cfg.start_year, cfg.inter_year1, cfg.time_step1),
            EraSpan(cfg.inter_year1, cfg.inter_year2, cfg.time_step2),
            EraSpan(cfg.inter_year2, cfg.end_year, cfg.time_step3),
        ]

    def finalize(self, log: logging.Logger | None = None) -> None:
        """Compute the period grid and all lookup tables.

        Uneven eras get a remainder period and a warning. Calling this again
        on a finalized instance does nothing.

        Args:
            log: Logger receiving the warnings; overrides the one given at
                construction.
        """
        if log is not None:
            self._log = log
        if self._finalized:
            return

        cfg = self._config
        eras = self.eras()
        for name, era in zip(_ERA_NAMES, eras):
            if era.has_remainder:
                self._log.warning(
                    "%s time interval (%d-%d) not divisible by its time step %d; "
                    "adding a %d-year remainder period",
                    name,
                    era.start,
                    era.end,
                    era.step,
                    era.remainder,
                )

        era1, era2, era3 = eras
        self.number_of_periods1 = era1.full_steps
        self.number_of_periods1a = era1.period_count
        self.number_of_periods2 = era2.full_steps
        self.number_of_periods2a = era2.period_count
        self.number_of_periods3 = era3.full_steps
        self.number_of_periods3a = era3.period_count
        self.max_period = (
            1 + self.number_of_periods1a + self.number_of_periods2a + self.number_of_periods3a
        )

        steps = expand_segments(era_segments(eras), base_step=cfg.time_step1)
        years = period_years(cfg.start_year, steps)
        year_map = build_year_map(years)
        self._period_to_time_step = _frozen(steps)
        self._model_period_to_year = _frozen(years)
        self._year_to_model_period = MappingProxyType(year_map)

        self.max_data_period = (cfg.data_end_year - cfg.start_year) // cfg.data_time_step + 1
        data_years = cfg.start_year + cfg.data_time_step * np.arange(
            self.max_data_period, dtype=np.int64
        )
        data_to_model = np.array([year_map[int(y)] for y in data_years], dtype=np.int64)
        if self.max_data_period == self.max_period:
            offsets = np.zeros(self.max_data_period, dtype=np.int64)
        else:
            offsets = cfg.data_time_step // steps[data_to_model]
        self._data_period_to_model_period = _frozen(data_to_model)
        self._data_offset = _frozen(offsets)

        self._finalized = True
        self._log.debug(
            "Modeltime finalized: %d periods (%d/%d/%d per era), %d data periods",
            self.max_period,
            self.number_of_periods1a,
            self.number_of_periods2a,
            self.number_of_periods3a,
            self.max_data_period,
        )

    def _require_finalized(self) -> None:
        if not self._finalized:
            raise NotFinalizedError("Modeltime.finalize() must be called before reading periods")

    def _check_period(self, period: int) -> None:
        self._require_finalized()
        if not 0 <= period < self.max_period:
            raise PeriodError(f"Period {period} out of range [0, {self.max_period})")

    def _check_data_period(self, data_period: int) -> None:
        self._require_finalized()
        if not 0 <= data_period < self.max_data_period:
            raise PeriodError(
                f"Data period {data_period} out of range [0, {self.max_data_period})"
            )

    # --- Read-only tables ---

    @property
    def period_to_time_step(self) -> NDArray[np.int64]:
        self._require_finalized()
        return self._period_to_time_step

    @property
    def model_period_to_year(self) -> NDArray[np.int64]:
        self._require_finalized()
        return self._model_period_to_year

    @property
    def year_to_model_period(self) -> Mapping[int, int]:
        self._require_finalized()
        return self._year_to_model_period

    @property
    def data_offset(self) -> NDArray[np.int64]:
        self._require_finalized()
        return self._data_offset

    @property
    def data_period_to_model_period(self) -> NDArray[np.int64]:
        self._require_finalized()
        return self._data_period_to_model_period

    # --- Accessors ---

    def get_start_year(self) -> int:
        return self._config.start_year

    def get_end_year(self) -> int:
        return self._config.end_year

    def get_base_period(self) -> int:
        """Return the period representing the start year."""
        return self.year_to_period(self._config.start_year).unwrap()

    def get_max_period(self) -> int:
        self._require_finalized()
        return self.max_period

    def get_max_data_period(self) -> int:
        self._require_finalized()
        return self.max_data_period

    def year_to_period(self, year: int) -> PeriodLookup:
        """Resolve a calendar year to the period that represents it.

        A year outside ``[start_year, end_year]`` is logged as an error and
        reported as not found.
        """
        self._require_finalized()
        period = self._year_to_model_period.get(year)
        if period is None:
            self._log.error("Invalid year: %s passed to year_to_period", year)
        return PeriodLookup(year=year, period=period)

    def get_period_to_year(self, period: int) -> int:
        self._check_period(period)
        return int(self._model_period_to_year[period])

    def get_time_step(self, period: int) -> int:
        """Return the number of years ``period`` advances over the previous one."""
        self._check_period(period)
        return int(self._period_to_time_step[period])

    def get_data_offset(self, data_period: int) -> int:
        """Return the number of model periods per step at ``data_period``."""
        self._check_data_period(data_period)
        return int(self._data_offset[data_period])

    def get_data_period_to_model_period(self, data_period: int) -> int:
        self._check_data_period(data_period)
        return int(self._data_period_to_model_period[data_period])

    def describe_period(self, period: int) -> dict[str, Any]:
        """Return configuration and per-period values for debugging output.

        ``data_offset`` is read at the data period whose index equals
        ``period``; the two index spaces are shared here on purpose, matching
        the legacy debug dump. It is None when no such data period exists.
        """
        self._check_period(period)
        record: dict[str, Any] = self._config.model_dump()
        record["period"] = period
        record["period_to_time_step"] = int(self._period_to_time_step[period])
        record["model_period_to_year"] = int(self._model_period_to_year[period])
        record["data_offset"] = (
            int(self._data_offset[period]) if period < self.max_data_period else None
        )
        return record

    def __repr__(self) -> str:
        cfg = self._config
        state = f"{self.max_period} periods" if self._finalized else "not finalized"
        return f"Modeltime({cfg.start_year}-{cfg.end_year}, {state})"
