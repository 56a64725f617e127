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
import pytest

from ocpp_entities.errors import FieldRelationshipError, StructureValidationError
from ocpp_entities.test.helpers import assert_invalid_fields, assert_num_field_errors, assert_valid
from ocpp_entities.v21.composite_types import ChargingLimitType, ChargingProfileCriterionType, ChargingProfileType, \
    ChargingSchedulePeriodType, ChargingScheduleType, ClearChargingProfileType, ConsumptionCostType, CostType, \
    RelativeTimeIntervalType, SalesTariffEntryType, SalesTariffType


def make_schedule(**kwargs) -> ChargingScheduleType:
    fields = dict(id=1, charging_rate_unit="W",
                  charging_schedule_period=[ChargingSchedulePeriodType(start_period=0, limit=4000.0)])
    fields.update(kwargs)
    return ChargingScheduleType(**fields)


def make_profile(**kwargs) -> ChargingProfileType:
    fields = dict(id=1, stack_level=0, charging_profile_purpose="TxDefaultProfile", charging_profile_kind="Absolute",
                  charging_schedule=[make_schedule()])
    fields.update(kwargs)
    return ChargingProfileType(**fields)


def test_schedule_period():
    assert_valid(ChargingSchedulePeriodType(start_period=0, number_phases=3, phase_to_use=1,
                                            discharge_limit=-11000.0, operation_mode="CentralSetpoint"))
    assert_invalid_fields(ChargingSchedulePeriodType(start_period=0, number_phases=4, phase_to_use=0,
                                                     discharge_limit=1.0, discharge_limit_l3=0.5),
                          ["number_phases", "phase_to_use", "discharge_limit", "discharge_limit_l3"])


def test_schedule():
    assert_valid(make_schedule())
    assert_invalid_fields(make_schedule(charging_schedule_period=[], digest_value="d" * 89, randomized_delay=-1),
                          ["charging_schedule_period", "digest_value", "randomized_delay"])


def test_schedule_lifts_period_errors():
    error = assert_num_field_errors(make_schedule(charging_schedule_period=[
        ChargingSchedulePeriodType(start_period=0), ChargingSchedulePeriodType(start_period=60, number_phases=0)]), 1)
    assert error.related[0].related[0].field == "charging_schedule_period[1]"


def test_profile():
    assert_valid(make_profile())
    assert_invalid_fields(make_profile(stack_level=-1, charging_schedule=[]), ["stack_level", "charging_schedule"])


def test_transaction_id_only_with_tx_profile():
    assert_valid(make_profile(charging_profile_purpose="TxProfile", transaction_id="tx-1"))
    error = assert_num_field_errors(make_profile(transaction_id="tx-1"), 1)
    relation = error.errors_for("transaction_id")[0].related[0]
    assert isinstance(relation, FieldRelationshipError)
    assert relation.field_b == "charging_profile_purpose"


def test_profile_accepts_2_1_purposes():
    assert_valid(make_profile(charging_profile_purpose="PriorityCharging", charging_profile_kind="Dynamic"))


def test_profile_nests_three_levels():
    profile = make_profile(charging_schedule=[make_schedule(charging_schedule_period=[
        ChargingSchedulePeriodType(start_period=0, phase_to_use=5)])])
    error = assert_num_field_errors(profile, 1)
    schedule = error.related[0].related[0]
    assert schedule.field == "charging_schedule[0]"
    assert schedule.structure == "ChargingScheduleType"
    period = schedule.related[0].related[0]
    assert period.field == "charging_schedule_period[0]"
    assert period.related[0].field == "phase_to_use"


def test_profile_criterion():
    assert_valid(ChargingProfileCriterionType(charging_limit_source=["EMS", "CSO"]))
    assert_invalid_fields(ChargingProfileCriterionType(stack_level=-1, charging_limit_source=["x" * 21]),
                          ["stack_level", "charging_limit_source[0]"])
    assert_invalid_fields(ChargingProfileCriterionType(charging_limit_source=["EMS"] * 5), ["charging_limit_source"])


def test_clear_profile_and_limit():
    assert_valid(ClearChargingProfileType(evse_id=0, stack_level=0))
    assert_invalid_fields(ClearChargingProfileType(evse_id=-1, stack_level=-1), ["evse_id", "stack_level"])
    assert_valid(ChargingLimitType(charging_limit_source="EMS"))
    assert_invalid_fields(ChargingLimitType(charging_limit_source="x" * 21), ["charging_limit_source"])


def test_sales_tariff():
    cost = CostType(cost_kind="CarbonDioxideEmission", amount=5, amount_multiplier=3)
    entry = SalesTariffEntryType(relative_time_interval=RelativeTimeIntervalType(start=0, duration=3600),
                                 consumption_cost=[ConsumptionCostType(start_value=0.0, cost=[cost])])
    assert_valid(SalesTariffType(id=1, sales_tariff_entry=[entry]))
    assert_invalid_fields(SalesTariffType(id=-1, sales_tariff_description="d" * 33, sales_tariff_entry=[]),
                          ["id", "sales_tariff_description", "sales_tariff_entry"])


def test_sales_tariff_entry_costs():
    bad_cost = CostType(cost_kind="RelativePricePercentage", amount=1, amount_multiplier=4)
    entry = SalesTariffEntryType(e_price_level=-1, relative_time_interval=RelativeTimeIntervalType(start=-1),
                                 consumption_cost=[ConsumptionCostType(start_value=0.0, cost=[])] * 4
                                                  + [ConsumptionCostType(start_value=1.0, cost=[bad_cost])])
    error = assert_invalid_fields(entry, ["e_price_level", "relative_time_interval", "consumption_cost",
                                          "consumption_cost"])
    cardinality, members = error.errors_for("consumption_cost")
    assert [e.field for e in members.related] == ["consumption_cost[0]", "consumption_cost[1]", "consumption_cost[2]",
                                                  "consumption_cost[3]", "consumption_cost[4]"]


@pytest.mark.parametrize("model, data, missing", [
    (RelativeTimeIntervalType, {"duration": 60}, ["start"]),
    (ChargingSchedulePeriodType, {"limit": 16.0}, ["startPeriod"]),
])
def test_required_fields_must_be_present(model, data, missing):
    with pytest.raises(StructureValidationError) as e:
        model.from_json_dict(data)
    assert e.value.field_names() == missing
