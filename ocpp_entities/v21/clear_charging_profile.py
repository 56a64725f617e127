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
from typing import Optional

from ocpp.v201.enums import ClearChargingProfileStatusEnumType

from ocpp_entities.builder import StructureValidationBuilder
from ocpp_entities.entity import OcppModel, register_message
from ocpp_entities.v21.base_types import StatusInfoType
from ocpp_entities.v21.composite_types import ClearChargingProfileType


class ClearChargingProfileRequest(OcppModel):
    charging_profile_id : Optional[int] = None
    charging_profile_criteria : Optional[ClearChargingProfileType] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        if self.charging_profile_criteria is not None:
            b.check_member("charging_profile_criteria", self.charging_profile_criteria)
        b.build("ClearChargingProfileRequest")


class ClearChargingProfileResponse(OcppModel):
    status : ClearChargingProfileStatusEnumType
    status_info : Optional[StatusInfoType] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        if self.status_info is not None:
            b.check_member("status_info", self.status_info)
        b.build("ClearChargingProfileResponse")


ClearChargingProfile = register_message("ClearChargingProfile", ClearChargingProfileRequest,
                                        ClearChargingProfileResponse,
                                        response_defaults={"status": ClearChargingProfileStatusEnumType.accepted})
