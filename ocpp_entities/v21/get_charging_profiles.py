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

from ocpp.v201.enums import GetChargingProfileStatusEnumType

from ocpp_entities.builder import StructureValidationBuilder, INT32_MAX
from ocpp_entities.entity import OcppModel, register_message
from ocpp_entities.v21.base_types import StatusInfoType
from ocpp_entities.v21.composite_types import ChargingProfileCriterionType


class GetChargingProfilesRequest(OcppModel):
    request_id : int
    evse_id : Optional[int] = None
    charging_profile : ChargingProfileCriterionType

    def validate(self) -> None:
        b = StructureValidationBuilder()
        b.check_bounds("request_id", 0, INT32_MAX, self.request_id)
        if self.evse_id is not None:
            b.check_bounds("evse_id", 0, INT32_MAX, self.evse_id)
        b.check_member("charging_profile", self.charging_profile)
        b.build("GetChargingProfilesRequest")


class GetChargingProfilesResponse(OcppModel):
    status : GetChargingProfileStatusEnumType
    status_info : Optional[StatusInfoType] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        if self.status_info is not None:
            b.check_member("status_info", self.status_info)
        b.build("GetChargingProfilesResponse")


GetChargingProfiles = register_message("GetChargingProfiles", GetChargingProfilesRequest,
                                       GetChargingProfilesResponse)
