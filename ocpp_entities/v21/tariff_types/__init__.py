"""
SPDX-License-Identifier: AGPL-3.0-or-later
Copyright (C) 2025 Lappeenrannan-Lahden teknillinen yliopisto LUT
Author: Aleksei Romanenko <aleksei.romanenko@lut.fi>


This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.

Funded by the European Union and UKRI. Views and opinions expressed are however those of the author(s)
only and do not necessarily reflect those of the European Union, CINEA or UKRI. Neither the European
Union nor the granting authority can be held responsible for them.

Tariff and cost structures.

Time-of-day windows are not ordered because a tariff window may wrap past midnight,
dates and the min/max pairs of a condition are.

>>> TariffType(tariff_id="t-1", currency="EUR").validate()
>>> TariffType(tariff_id="t-1", currency="EURO").validate()
Traceback (most recent call last):
...
ocpp_entities.errors.StructureValidationError: OCPP Structure Validation Error: TariffType
"""
from datetime import datetime
from typing import Optional

from ocpp_entities.builder import StructureValidationBuilder, INT32_MAX, FLOAT_MAX
from ocpp_entities.entity import OcppModel
from ocpp_entities.iso.rfc_3339 import validate_rfc3339_24hr_time, validate_rfc3339_date
from ocpp_entities.v21.base_types import MessageContentType
from ocpp_entities.v21.enums import CostDimensionEnumType, DayOfWeekEnumType, EvseKindEnumType, \
    TariffCostEnumType, TariffKindEnumType


class TaxRateType(OcppModel):
    type : str
    tax : float
    stack : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("type", 0, 20, self.type)
        e.check_bounds("tax", 0.0, FLOAT_MAX, self.tax)
        if self.stack is not None:
            e.check_bounds("stack", 0, INT32_MAX, self.stack)
        e.build("TaxRateType")


class PriceType(OcppModel):
    excl_tax : Optional[float] = None
    incl_tax : Optional[float] = None
    tax_rates : Optional[list[TaxRateType]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.excl_tax is None and self.incl_tax is None:
            e.push_relation_error("excl_tax", "incl_tax", "At least one of 'exclTax' or 'inclTax' must be present.")
        if self.tax_rates is not None:
            e.check_cardinality("tax_rates", 0, 5, self.tax_rates)
            e.check_iter_member("tax_rates", self.tax_rates)
        e.build("PriceType")


class TotalPriceType(OcppModel):
    excl_tax : Optional[float] = None
    incl_tax : Optional[float] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.excl_tax is not None:
            e.check_bounds("excl_tax", 0.0, FLOAT_MAX, self.excl_tax)
        if self.incl_tax is not None:
            e.check_bounds("incl_tax", 0.0, FLOAT_MAX, self.incl_tax)
        if self.excl_tax is None and self.incl_tax is None:
            e.push_relation_error("excl_tax", "incl_tax", "At least one of 'exclTax' or 'inclTax' must be present.")
        e.build("TotalPriceType")


def _check_validity_window(e: StructureValidationBuilder, conditions) -> None:
    if conditions.start_time_of_day is not None:
        e.check_iso("start_time_of_day", validate_rfc3339_24hr_time, conditions.start_time_of_day)
    if conditions.end_time_of_day is not None:
        e.check_iso("end_time_of_day", validate_rfc3339_24hr_time, conditions.end_time_of_day)
    if conditions.day_of_week is not None:
        e.check_cardinality("day_of_week", 0, 7, conditions.day_of_week)
    errors_before_dates = e.error_count
    if conditions.valid_from_date is not None:
        e.check_iso("valid_from_date", validate_rfc3339_date, conditions.valid_from_date)
    if conditions.valid_to_date is not None:
        e.check_iso("valid_to_date", validate_rfc3339_date, conditions.valid_to_date)
    # same-width ISO dates order lexically
    if e.error_count == errors_before_dates and conditions.valid_from_date is not None \
            and conditions.valid_to_date is not None and conditions.valid_from_date > conditions.valid_to_date:
        e.push_relation_error("valid_from_date", "valid_to_date", "validFromDate must not be after validToDate.")


def _check_min_max(e: StructureValidationBuilder, conditions, name: str, upper) -> None:
    lower_value = getattr(conditions, f"min_{name}")
    upper_value = getattr(conditions, f"max_{name}")
    if lower_value is not None:
        e.check_bounds(f"min_{name}", 0, upper, lower_value)
    if upper_value is not None:
        e.check_bounds(f"max_{name}", 0, upper, upper_value)
    if lower_value is not None and upper_value is not None and lower_value > upper_value:
        e.push_relation_error(f"min_{name}", f"max_{name}", f"min_{name} must not exceed max_{name}.")


class TariffConditionsType(OcppModel):
    start_time_of_day : Optional[str] = None
    end_time_of_day : Optional[str] = None
    day_of_week : Optional[list[DayOfWeekEnumType]] = None
    valid_from_date : Optional[str] = None
    valid_to_date : Optional[str] = None
    evse_kind : Optional[EvseKindEnumType] = None
    min_energy : Optional[float] = None
    max_energy : Optional[float] = None
    min_current : Optional[float] = None
    max_current : Optional[float] = None
    min_power : Optional[float] = None
    max_power : Optional[float] = None
    min_time : Optional[int] = None
    max_time : Optional[int] = None
    min_charging_time : Optional[int] = None
    max_charging_time : Optional[int] = None
    min_idle_time : Optional[int] = None
    max_idle_time : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        _check_validity_window(e, self)
        for name in ("energy", "current", "power"):
            _check_min_max(e, self, name, FLOAT_MAX)
        for name in ("time", "charging_time", "idle_time"):
            _check_min_max(e, self, name, INT32_MAX)
        e.build("TariffConditionsType")


class TariffConditionsFixedType(OcppModel):
    start_time_of_day : Optional[str] = None
    end_time_of_day : Optional[str] = None
    day_of_week : Optional[list[DayOfWeekEnumType]] = None
    valid_from_date : Optional[str] = None
    valid_to_date : Optional[str] = None
    evse_kind : Optional[EvseKindEnumType] = None
    payment_brand : Optional[str] = None
    payment_recognition : Optional[str] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        _check_validity_window(e, self)
        if self.payment_brand is not None:
            e.check_cardinality("payment_brand", 0, 20, self.payment_brand)
        if self.payment_recognition is not None:
            e.check_cardinality("payment_recognition", 0, 20, self.payment_recognition)
        e.build("TariffConditionsFixedType")


class TariffEnergyPriceType(OcppModel):
    price_kwh : float
    conditions : Optional[TariffConditionsType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("price_kwh", 0.0, FLOAT_MAX, self.price_kwh)
        if self.conditions is not None:
            e.check_member("conditions", self.conditions)
        e.build("TariffEnergyPriceType")


class TariffTimePriceType(OcppModel):
    price_minute : float
    conditions : Optional[TariffConditionsType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("price_minute", 0.0, FLOAT_MAX, self.price_minute)
        if self.conditions is not None:
            e.check_member("conditions", self.conditions)
        e.build("TariffTimePriceType")


class TariffFixedPriceType(OcppModel):
    price_fixed : float
    conditions : Optional[TariffConditionsFixedType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("price_fixed", 0.0, FLOAT_MAX, self.price_fixed)
        if self.conditions is not None:
            e.check_member("conditions", self.conditions)
        e.build("TariffFixedPriceType")


def _check_prices(e: StructureValidationBuilder, prices, tax_rates) -> StructureValidationBuilder:
    e.check_cardinality("prices", 1, INT32_MAX, prices)
    e.check_iter_member("prices", prices)
    if tax_rates is not None:
        e.check_cardinality("tax_rates", 0, 5, tax_rates)
        e.check_iter_member("tax_rates", tax_rates)
    return e


class TariffEnergyType(OcppModel):
    prices : list[TariffEnergyPriceType]
    tax_rates : Optional[list[TaxRateType]] = None

    def validate(self) -> None:
        _check_prices(StructureValidationBuilder(), self.prices, self.tax_rates).build("TariffEnergyType")


class TariffTimeType(OcppModel):
    prices : list[TariffTimePriceType]
    tax_rates : Optional[list[TaxRateType]] = None

    def validate(self) -> None:
        _check_prices(StructureValidationBuilder(), self.prices, self.tax_rates).build("TariffTimeType")


class TariffFixedType(OcppModel):
    prices : list[TariffFixedPriceType]
    tax_rates : Optional[list[TaxRateType]] = None

    def validate(self) -> None:
        _check_prices(StructureValidationBuilder(), self.prices, self.tax_rates).build("TariffFixedType")


class TariffType(OcppModel):
    tariff_id : str
    currency : str
    valid_from : Optional[datetime] = None
    description : Optional[list[MessageContentType]] = None
    energy : Optional[TariffEnergyType] = None
    charging_time : Optional[TariffTimeType] = None
    idle_time : Optional[TariffTimeType] = None
    fixed_fee : Optional[TariffFixedType] = None
    min_cost : Optional[PriceType] = None
    max_cost : Optional[PriceType] = None
    reservation_time : Optional[TariffTimeType] = None
    reservation_fixed : Optional[TariffFixedType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("tariff_id", 0, 60, self.tariff_id)
        e.check_currency("currency", self.currency)
        if self.description is not None:
            e.check_cardinality("description", 0, 10, self.description)
            e.check_iter_member("description", self.description)
        for name in ("energy", "charging_time", "idle_time", "fixed_fee", "min_cost", "max_cost",
                     "reservation_time", "reservation_fixed"):
            member = getattr(self, name)
            if member is not None:
                e.check_member(name, member)
        e.build("TariffType")


class TariffAssignmentType(OcppModel):
    tariff_id : str
    tariff_kind : TariffKindEnumType
    valid_from : Optional[datetime] = None
    evse_ids : Optional[list[int]] = None
    id_tokens : Optional[list[str]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("tariff_id", 0, 60, self.tariff_id)
        for i, evse_id in enumerate(self.evse_ids or []):
            e.check_bounds(f"evse_ids[{i}]", 0, INT32_MAX, evse_id)
        for i, id_token in enumerate(self.id_tokens or []):
            e.check_cardinality(f"id_tokens[{i}]", 0, 255, id_token)
        e.build("TariffAssignmentType")


class CostDimensionType(OcppModel):
    type : CostDimensionEnumType
    volume : float

    def validate(self) -> None:
        StructureValidationBuilder().check_enum("type", CostDimensionEnumType, self.type).build("CostDimensionType")


class ChargingPeriodType(OcppModel):
    tariff_id : Optional[str] = None
    start_period : datetime
    dimensions : Optional[list[CostDimensionType]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.tariff_id is not None:
            e.check_cardinality("tariff_id", 0, 60, self.tariff_id)
        if self.dimensions is not None:
            e.check_iter_member("dimensions", self.dimensions)
        e.build("ChargingPeriodType")


class TotalCostType(OcppModel):
    currency : str
    type_of_cost : TariffCostEnumType
    fixed : Optional[PriceType] = None
    energy : Optional[PriceType] = None
    charging_time : Optional[PriceType] = None
    idle_time : Optional[PriceType] = None
    reservation_time : Optional[PriceType] = None
    reservation_fixed : Optional[PriceType] = None
    total : TotalPriceType

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_currency("currency", self.currency)
        for name in ("fixed", "energy", "charging_time", "idle_time", "reservation_time", "reservation_fixed"):
            member = getattr(self, name)
            if member is not None:
                e.check_member(name, member)
        e.check_member("total", self.total)
        e.build("TotalCostType")


class TotalUsageType(OcppModel):
    energy : float
    charging_time : int
    idle_time : int
    reservation_time : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("energy", 0.0, FLOAT_MAX, self.energy)
        e.check_bounds("charging_time", 0, INT32_MAX, self.charging_time)
        e.check_bounds("idle_time", 0, INT32_MAX, self.idle_time)
        if self.reservation_time is not None:
            e.check_bounds("reservation_time", 0, INT32_MAX, self.reservation_time)
        e.build("TotalUsageType")


class CostDetailsType(OcppModel):
    failure_to_calculate : Optional[bool] = None
    failure_reason : Optional[str] = None
    charging_periods : Optional[list[ChargingPeriodType]] = None
    total_cost : TotalCostType
    total_usage : TotalUsageType

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.failure_reason is not None:
            e.check_cardinality("failure_reason", 0, 500, self.failure_reason)
        if self.charging_periods is not None:
            e.check_iter_member("charging_periods", self.charging_periods)
        e.check_member("total_cost", self.total_cost)
        e.check_member("total_usage", self.total_usage)
        e.build("CostDetailsType")
