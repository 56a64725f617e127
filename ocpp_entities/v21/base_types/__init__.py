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

Leaf structures shared by most messages.

>>> IdTokenType(id_token="04A2B3C4D5", type="ISO14443").validate()
"""
from datetime import datetime
from typing import Optional

from ocpp.v201.enums import AuthorizationStatusEnumType, HashAlgorithmEnumType

from ocpp_entities.builder import StructureValidationBuilder, INT32_MAX
from ocpp_entities.entity import OcppModel
from ocpp_entities.v21.enums import MessageFormatEnumType


class StatusInfoType(OcppModel):
    reason_code : str
    additional_info : Optional[str] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("reason_code", 0, 20, self.reason_code)
        if self.additional_info is not None:
            e.check_cardinality("additional_info", 0, 1024, self.additional_info)
        e.build("StatusInfoType")


class EVSEType(OcppModel):
    id : int
    connector_id : Optional[int] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_bounds("id", 1, INT32_MAX, self.id)
        if self.connector_id is not None:
            e.check_bounds("connector_id", 0, INT32_MAX, self.connector_id)
        e.build("EVSEType")


class ComponentType(OcppModel):
    name : str
    instance : Optional[str] = None
    evse : Optional[EVSEType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("name", 0, 50, self.name)
        if self.instance is not None:
            e.check_cardinality("instance", 0, 50, self.instance)
        if self.evse is not None:
            e.check_member("evse", self.evse)
        e.build("ComponentType")


class VariableType(OcppModel):
    name : str
    instance : Optional[str] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("name", 1, 50, self.name)
        if self.instance is not None:
            e.check_cardinality("instance", 0, 50, self.instance)
        e.build("VariableType")


class ModemType(OcppModel):
    iccid : Optional[str] = None
    imsi : Optional[str] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.iccid is not None:
            e.check_cardinality("iccid", 0, 20, self.iccid)
        if self.imsi is not None:
            e.check_cardinality("imsi", 0, 20, self.imsi)
        e.build("ModemType")


class ChargingStationType(OcppModel):
    serial_number : Optional[str] = None
    model : str
    vendor_name : str
    firmware_version : Optional[str] = None
    modem : Optional[ModemType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.serial_number is not None:
            e.check_cardinality("serial_number", 0, 25, self.serial_number)
        e.check_cardinality("model", 0, 20, self.model)
        e.check_cardinality("vendor_name", 0, 50, self.vendor_name)
        if self.firmware_version is not None:
            e.check_cardinality("firmware_version", 0, 50, self.firmware_version)
        if self.modem is not None:
            e.check_member("modem", self.modem)
        e.build("ChargingStationType")


class AdditionalInfoType(OcppModel):
    additional_id_token : str
    type : str

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("additional_id_token", 0, 255, self.additional_id_token)
        e.check_cardinality("type", 0, 50, self.type)
        e.build("AdditionalInfoType")


class IdTokenType(OcppModel):
    id_token : str
    type : str
    additional_info : Optional[list[AdditionalInfoType]] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("id_token", 0, 255, self.id_token)
        e.check_cardinality("type", 0, 20, self.type)
        if self.additional_info is not None:
            e.check_iter_member("additional_info", self.additional_info)
        e.build("IdTokenType")


class MessageContentType(OcppModel):
    format : MessageFormatEnumType
    language : Optional[str] = None
    content : str

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.language is not None:
            e.check_cardinality("language", 0, 8, self.language)
        e.check_cardinality("content", 0, 1024, self.content)
        e.build("MessageContentType")


class IdTokenInfoType(OcppModel):
    status : AuthorizationStatusEnumType
    cache_expiry_date_time : Optional[datetime] = None
    charging_priority : Optional[int] = None
    language1 : Optional[str] = None
    language2 : Optional[str] = None
    evse_id : Optional[list[int]] = None
    group_id_token : Optional[IdTokenType] = None
    personal_message : Optional[MessageContentType] = None

    def validate(self) -> None:
        e = StructureValidationBuilder()
        if self.charging_priority is not None:
            e.check_bounds("charging_priority", -9, 9, self.charging_priority)
        if self.language1 is not None:
            e.check_cardinality("language1", 0, 8, self.language1)
        if self.language2 is not None:
            e.check_cardinality("language2", 0, 8, self.language2)
        if self.evse_id is not None:
            e.check_cardinality("evse_id", 0, 8, self.evse_id)
            for i, evse_id in enumerate(self.evse_id):
                e.check_bounds(f"evse_id[{i}]", 0, INT32_MAX, evse_id)
        if self.group_id_token is not None:
            e.check_member("group_id_token", self.group_id_token)
        if self.personal_message is not None:
            e.check_member("personal_message", self.personal_message)
        e.build("IdTokenInfoType")


class OCSPRequestDataType(OcppModel):
    hash_algorithm : HashAlgorithmEnumType
    issuer_name_hash : str
    issuer_key_hash : str
    serial_number : str
    responder_url : str

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_cardinality("issuer_name_hash", 0, 128, self.issuer_name_hash)
        e.check_cardinality("issuer_key_hash", 0, 128, self.issuer_key_hash)
        e.check_cardinality("serial_number", 0, 40, self.serial_number)
        e.check_cardinality("responder_url", 0, 2000, self.responder_url)
        e.build("OCSPRequestDataType")
