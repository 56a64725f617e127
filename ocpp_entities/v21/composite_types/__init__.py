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
"""
from datetime import datetime
from typing import Optional

from ocpp.v201.enums import ChargingRateUnitEnumType, CostKindEnumType, RecurrencyKindEnumType
from pydantic import Field

from ocpp_entities.builder import StructureValidationBuilder, INT32_MAX, FLOAT_MIN
from ocpp_entities.entity import OcppModel
from ocpp_entities.v21.enums import ChargingProfileKindEnumType, ChargingProfilePurposeEnumType, \
    OperationModeEnumType


class RelativeTimeIntervalType(OcppModel):
    start : int
    duration : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("start", 0, INT32_MAX, self.start)
        if self.duration is not None:
            e.check_bounds("duration", 0, INT32_MAX, self.duration)
        e.build("RelativeTimeIntervalType")


class CostType(OcppModel):
    cost_kind : CostKindEnumType
    amount : int
    amount_multiplier : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.amount_multiplier is not None:
            e.check_bounds("amount_multiplier", -3, 3, self.amount_multiplier)
        e.build("CostType")


class ConsumptionCostType(OcppModel):
    start_value : float
    cost : list[CostType]

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("cost", 1, 3, self.cost)
        e.check_iter_member("cost", self.cost)
        e.build("ConsumptionCostType")


class SalesTariffEntryType(OcppModel):
    e_price_level : Optional[int] = None
    relative_time_interval : RelativeTimeIntervalType
    consumption_cost : Optional[list[ConsumptionCostType]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.e_price_level is not None:
            e.check_bounds("e_price_level", 0, INT32_MAX, self.e_price_level)
        e.check_member("relative_time_interval", self.relative_time_interval)
        if self.consumption_cost is not None:
            e.check_cardinality("consumption_cost", 0, 3, self.consumption_cost)
            e.check_iter_member("consumption_cost", self.consumption_cost)
        e.build("SalesTariffEntryType")


class SalesTariffType(OcppModel):
    id : int
    sales_tariff_description : Optional[str] = None
    num_e_price_levels : Optional[int] = None
    sales_tariff_entry : list[SalesTariffEntryType]

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("id", 0, INT32_MAX, self.id)
        if self.sales_tariff_description is not None:
            e.check_cardinality("sales_tariff_description", 0, 32, self.sales_tariff_description)
        if self.num_e_price_levels is not None:
            e.check_bounds("num_e_price_levels", 0, INT32_MAX, self.num_e_price_levels)
        e.check_cardinality("sales_tariff_entry", 1, 1024, self.sales_tariff_entry)
        e.check_iter_member("sales_tariff_entry", self.sales_tariff_entry)
        e.build("SalesTariffType")


class ChargingSchedulePeriodType(OcppModel):
    start_period : int
    limit : Optional[float] = None
    limit_l2 : Optional[float] = None
    limit_l3 : Optional[float] = None
    number_phases : Optional[int] = None
    phase_to_use : Optional[int] = None
    discharge_limit : Optional[float] = None
    discharge_limit_l2 : Optional[float] = None
    discharge_limit_l3 : Optional[float] = None
    setpoint : Optional[float] = None
    setpoint_l2 : Optional[float] = None
    setpoint_l3 : Optional[float] = None
    setpoint_reactive : Optional[float] = None
    setpoint_reactive_l2 : Optional[float] = None
    setpoint_reactive_l3 : Optional[float] = None
    precondition_request : Optional[bool] = None
    evse_sleep : Optional[bool] = None
    v2x_baseline : Optional[float] = None
    operation_mode : Optional[OperationModeEnumType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.number_phases is not None:
            e.check_bounds("number_phases", 1, 3, self.number_phases)
        if self.phase_to_use is not None:
            e.check_bounds("phase_to_use", 1, 3, self.phase_to_use)
        # discharging limits are expressed as negative values
        for name in ("discharge_limit", "discharge_limit_l2", "discharge_limit_l3"):
            value = getattr(self, name)
            if value is not None:
                e.check_bounds(name, FLOAT_MIN, 0.0, value)
        e.build("ChargingSchedulePeriodType")


class ChargingScheduleType(OcppModel):
    id : int
    start_schedule : Optional[datetime] = None
    duration : Optional[int] = None
    charging_rate_unit : ChargingRateUnitEnumType
    min_charging_rate : Optional[float] = None
    power_tolerance : Optional[float] = None
    signature_id : Optional[int] = None
    digest_value : Optional[str] = None
    use_local_time : Optional[bool] = None
    randomized_delay : Optional[int] = None
    charging_schedule_period : list[ChargingSchedulePeriodType]
    sales_tariff : Optional[SalesTariffType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.signature_id is not None:
            e.check_bounds("signature_id", 0, INT32_MAX, self.signature_id)
        if self.digest_value is not None:
            e.check_cardinality("digest_value", 0, 88, self.digest_value)
        if self.randomized_delay is not None:
            e.check_bounds("randomized_delay", 0, INT32_MAX, self.randomized_delay)
        e.check_cardinality("charging_schedule_period", 1, 1024, self.charging_schedule_period)
        e.check_iter_member("charging_schedule_period", self.charging_schedule_period)
        if self.sales_tariff is not None:
            e.check_member("sales_tariff", self.sales_tariff)
        e.build("ChargingScheduleType")


class ChargingProfileType(OcppModel):
    id : int
    stack_level : int
    charging_profile_purpose : ChargingProfilePurposeEnumType
    charging_profile_kind : ChargingProfileKindEnumType
    recurrency_kind : Optional[RecurrencyKindEnumType] = None
    valid_from : Optional[datetime] = None
    valid_to : Optional[datetime] = None
    transaction_id : Optional[str] = None
    max_offline_duration : Optional[int] = None
    invalid_after_offline_duration : Optional[bool] = None
    dyn_update_interval : Optional[int] = None
    dyn_update_time : Optional[datetime] = None
    price_schedule_signature : Optional[str] = None
    charging_schedule : list[ChargingScheduleType] = Field(default_factory=list)

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("stack_level", 0, INT32_MAX, self.stack_level)
        if self.transaction_id is not None:
            e.check_cardinality("transaction_id", 0, 36, self.transaction_id)
            if self.charging_profile_purpose != ChargingProfilePurposeEnumType.tx_profile:
                e.push_relation_error("transaction_id", "charging_profile_purpose",
                                      "transaction_id SHALL only be included if ChargingProfilePurpose is set to "
                                      "TxProfile in a SetChargingProfileRequest.")
        if self.max_offline_duration is not None:
            e.check_bounds("max_offline_duration", 0, INT32_MAX, self.max_offline_duration)
        if self.price_schedule_signature is not None:
            e.check_cardinality("price_schedule_signature", 0, 256, self.price_schedule_signature)
        e.check_cardinality("charging_schedule", 1, 3, self.charging_schedule)
        e.check_iter_member("charging_schedule", self.charging_schedule)
        e.build("ChargingProfileType")


class ChargingProfileCriterionType(OcppModel):
    charging_profile_purpose : Optional[ChargingProfilePurposeEnumType] = None
    stack_level : Optional[int] = None
    charging_profile_id : Optional[list[int]] = None
    charging_limit_source : Optional[list[str]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.stack_level is not None:
            e.check_bounds("stack_level", 0, INT32_MAX, self.stack_level)
        if self.charging_limit_source is not None:
            e.check_cardinality("charging_limit_source", 0, 4, self.charging_limit_source)
            for i, source in enumerate(self.charging_limit_source):
                e.check_cardinality(f"charging_limit_source[{i}]", 0, 20, source)
        e.build("ChargingProfileCriterionType")


class ClearChargingProfileType(OcppModel):
    evse_id : Optional[int] = None
    charging_profile_purpose : Optional[ChargingProfilePurposeEnumType] = None
    stack_level : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.evse_id is not None:
            e.check_bounds("evse_id", 0, INT32_MAX, self.evse_id)
        if self.stack_level is not None:
            e.check_bounds("stack_level", 0, INT32_MAX, self.stack_level)
        e.build("ClearChargingProfileType")


class ChargingLimitType(OcppModel):
    charging_limit_source : str
    is_local_generation : Optional[bool] = None
    is_grid_critical : Optional[bool] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("charging_limit_source", 0, 20, self.charging_limit_source)
        e.build("ChargingLimitType")
