"""Pydantic v2 configuration model for modeltime."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ModeltimeConfig(BaseModel):
    """Calendar years and step lengths that define the period grid.

    The three eras are ``[start_year, inter_year1]``, ``[inter_year1, inter_year2]``
    and ``[inter_year2, end_year]``, stepped by ``time_step1``, ``time_step2`` and
    ``time_step3``. The data grid runs from ``start_year`` to ``data_end_year``
    every ``data_time_step`` years.

    Each field also accepts the element name used by historical input files
    (``startyear``, ``interyear1``, ``timestep1``, ``dataend``, ...).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_year: int = Field(
        validation_alias=AliasChoices("start_year", "startyear"),
        description="Base year, represented by period 0",
    )
    inter_year1: int = Field(
        validation_alias=AliasChoices("inter_year1", "interyear1"),
        description="Last year of the first era",
    )
    inter_year2: int = Field(
        validation_alias=AliasChoices("inter_year2", "interyear2"),
        description="Last year of the second era",
    )
    end_year: int = Field(
        validation_alias=AliasChoices("end_year", "endyear"),
        description="Last modeled year",
    )
    time_step1: int = Field(
        gt=0,
        validation_alias=AliasChoices("time_step1", "timestep1"),
        description="Nominal step length in the first era (years)",
    )
    time_step2: int = Field(
        gt=0,
        validation_alias=AliasChoices("time_step2", "timestep2"),
        description="Nominal step length in the second era (years)",
    )
    time_step3: int = Field(
        gt=0,
        validation_alias=AliasChoices("time_step3", "timestep3"),
        description="Nominal step length in the third era (years)",
    )
    data_end_year: int = Field(
        validation_alias=AliasChoices("data_end_year", "dataend"),
        description="Last year of the data grid",
    )
    data_time_step: int = Field(
        gt=0,
        validation_alias=AliasChoices("data_time_step", "datatimestep"),
        description="Spacing of the data grid (years)",
    )

    @model_validator(mode="after")
    def _validate_years(self) -> ModeltimeConfig:
        if self.inter_year1 <= self.start_year:
            raise ValueError("inter_year1 must be greater than start_year")
        if self.inter_year2 <= self.inter_year1:
            raise ValueError("inter_year2 must be greater than inter_year1")
        if self.end_year <= self.inter_year2:
            raise ValueError("end_year must be greater than inter_year2")
        if self.data_end_year < self.start_year:
            raise ValueError("data_end_year must not precede start_year")
        if self.data_end_year > self.end_year:
            raise ValueError("data_end_year must not exceed end_year")
        return self
