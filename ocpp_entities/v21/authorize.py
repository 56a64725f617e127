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

from ocpp.v201.enums import AuthorizeCertificateStatusEnumType

from ocpp_entities.builder import StructureValidationBuilder
from ocpp_entities.entity import OcppModel, register_message
from ocpp_entities.v21.base_types import IdTokenType, IdTokenInfoType, OCSPRequestDataType
from ocpp_entities.v21.enums import EnergyTransferModeEnumType
from ocpp_entities.v21.tariff_types import TariffType


class AuthorizeRequest(OcppModel):
    certificate : Optional[str] = None
    id_token : IdTokenType
    iso15118_certificate_hash_data : Optional[list[OCSPRequestDataType]] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        if self.certificate is not None:
            b.check_cardinality("certificate", 0, 10000, self.certificate)
        b.check_member("id_token", self.id_token)
        if self.iso15118_certificate_hash_data is not None:
            b.check_cardinality("iso15118_certificate_hash_data", 0, 4, self.iso15118_certificate_hash_data)
            b.check_iter_member("iso15118_certificate_hash_data", self.iso15118_certificate_hash_data)
        b.build("AuthorizeRequest")


class AuthorizeResponse(OcppModel):
    certificate_status : Optional[AuthorizeCertificateStatusEnumType] = None
    allowed_energy_transfer : Optional[list[EnergyTransferModeEnumType]] = None
    id_token_info : IdTokenInfoType
    tariff : Optional[TariffType] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        b.check_member("id_token_info", self.id_token_info)
        if self.tariff is not None:
            b.check_member("tariff", self.tariff)
        b.build("AuthorizeResponse")


Authorize = register_message("Authorize", AuthorizeRequest, AuthorizeResponse)
