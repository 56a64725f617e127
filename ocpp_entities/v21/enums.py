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

OCPP 2.1 enumerations that are missing from, or were extended since, ``ocpp.v201.enums``.

>>> parse_enum(TariffCostEnumType, "MinCost")
<TariffCostEnumType.min_cost: 'MinCost'>
>>> parse_enum(DayOfWeekEnumType, "Funday")
Traceback (most recent call last):
...
ocpp_entities.errors.InvalidEnumValueError: Invalid Enum Value: Funday not in DayOfWeekEnumType
"""
from enum import Enum

from ocpp_entities.entity import parse_enum  # noqa: F401


class ChargingProfileKindEnumType(str, Enum):
    absolute = "Absolute"
    recurring = "Recurring"
    relative = "Relative"
    dynamic = "Dynamic"


class ChargingProfilePurposeEnumType(str, Enum):
    charging_station_external_constraints = "ChargingStationExternalConstraints"
    charging_station_max_profile = "ChargingStationMaxProfile"
    tx_default_profile = "TxDefaultProfile"
    tx_profile = "TxProfile"
    priority_charging = "PriorityCharging"
    local_generation = "LocalGeneration"


class CostDimensionEnumType(str, Enum):
    energy = "Energy"
    max_current = "MaxCurrent"
    min_current = "MinCurrent"
    max_power = "MaxPower"
    min_power = "MinPower"
    idle_time = "IdleTime"
    charging_time = "ChargingTime"


class DayOfWeekEnumType(str, Enum):
    monday = "Monday"
    tuesday = "Tuesday"
    wednesday = "Wednesday"
    thursday = "Thursday"
    friday = "Friday"
    saturday = "Saturday"
    sunday = "Sunday"


class EnergyTransferModeEnumType(str, Enum):
    ac_single_phase = "AC_single_phase"
    ac_two_phase = "AC_two_phase"
    ac_three_phase = "AC_three_phase"
    dc = "DC"
    ac_bpt = "AC_BPT"
    ac_bpt_der = "AC_BPT_DER"
    ac_der = "AC_DER"
    dc_bpt = "DC_BPT"
    dc_acdp = "DC_ACDP"
    dc_acdp_bpt = "DC_ACDP_BPT"
    wpt = "WPT"


class EvseKindEnumType(str, Enum):
    ac = "AC"
    dc = "DC"


class MessageFormatEnumType(str, Enum):
    ascii = "ASCII"
    html = "HTML"
    uri = "URI"
    utf8 = "UTF8"
    qrcode = "QRCODE"


class OperationModeEnumType(str, Enum):
    idle = "Idle"
    charging_only = "ChargingOnly"
    central_setpoint = "CentralSetpoint"
    external_setpoint = "ExternalSetpoint"
    external_limits = "ExternalLimits"
    central_frequency = "CentralFrequency"
    local_frequency = "LocalFrequency"
    local_load_balancing = "LocalLoadBalancing"


class TariffChangeStatusEnumType(str, Enum):
    accepted = "Accepted"
    rejected = "Rejected"
    too_many_elements = "TooManyElements"
    condition_not_supported = "ConditionNotSupported"
    tx_not_found = "TxNotFound"
    no_currency_change = "NoCurrencyChange"


class TariffCostEnumType(str, Enum):
    normal_cost = "NormalCost"
    min_cost = "MinCost"
    max_cost = "MaxCost"


class TariffGetStatusEnumType(str, Enum):
    accepted = "Accepted"
    rejected = "Rejected"
    no_tariff = "NoTariff"


class TariffKindEnumType(str, Enum):
    default_tariff = "DefaultTariff"
    driver_tariff = "DriverTariff"
