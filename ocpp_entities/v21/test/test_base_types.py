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

from ocpp_entities.errors import FieldBoundsError, FieldCardinalityError, StructureValidationError
from ocpp_entities.test.helpers import assert_invalid_fields, assert_num_field_errors, assert_valid
from ocpp_entities.v21.base_types import AdditionalInfoType, ChargingStationType, ComponentType, EVSEType, \
    IdTokenInfoType, IdTokenType, MessageContentType, ModemType, OCSPRequestDataType, StatusInfoType, VariableType


def test_status_info():
    assert_valid(StatusInfoType(reason_code=""))
    assert_valid(StatusInfoType(reason_code="x" * 20, additional_info="y" * 1024))
    assert_invalid_fields(StatusInfoType(reason_code="x" * 21, additional_info="y" * 1025),
                          ["reason_code", "additional_info"])


def test_evse():
    assert_valid(EVSEType(id=1, connector_id=0))
    error = assert_invalid_fields(EVSEType(id=0, connector_id=-1), ["id", "connector_id"])
    assert error.errors_for("id")[0].related == [FieldBoundsError(value=0, lower=1, upper=2147483647)]


def test_component_and_variable():
    assert_valid(ComponentType(name="EVSE", evse=EVSEType(id=2)))
    assert_invalid_fields(ComponentType(name="c" * 51, instance="i" * 51, evse=EVSEType(id=0)),
                          ["name", "instance", "evse"])
    assert_valid(VariableType(name="Available"))
    assert_invalid_fields(VariableType(name=""), ["name"])


def test_charging_station_with_modem():
    station = ChargingStationType(model="SingleSocketCharger", vendor_name="VendorX",
                                  modem=ModemType(iccid="1" * 21, imsi="2" * 21))
    error = assert_num_field_errors(station, 1)
    assert error.related[0].field == "modem"
    assert error.related[0].structure == "ModemType"
    assert len(error.related[0].related) == 2


def test_id_token_additional_info_is_indexed():
    token = IdTokenType(id_token="04A2B3", type="ISO14443", additional_info=[
        AdditionalInfoType(additional_id_token="ok", type="Something"),
        AdditionalInfoType(additional_id_token="x" * 256, type="Something"),
    ])
    error = assert_invalid_fields(token, ["additional_info"])
    assert [e.field for e in error.related[0].related] == ["additional_info[1]"]


def test_id_token_info():
    assert_valid(IdTokenInfoType(status="Accepted", charging_priority=-9, evse_id=[0, 1]))
    info = IdTokenInfoType(status="Accepted", charging_priority=10, language1="x" * 9, evse_id=[1] * 9,
                           personal_message=MessageContentType(format="UTF8", content="z" * 1025))
    error = assert_invalid_fields(info, ["charging_priority", "language1", "evse_id", "personal_message"])
    assert error.errors_for("evse_id")[0].related == [FieldCardinalityError(cardinality=9, lower=0, upper=8)]


def test_id_token_info_indexes_evse_ids():
    assert_invalid_fields(IdTokenInfoType(status="Blocked", evse_id=[1, -1]), ["evse_id[1]"])


def make_ocsp_request_data(**kwargs) -> OCSPRequestDataType:
    fields = dict(hash_algorithm="SHA256", issuer_name_hash="a1" * 32, issuer_key_hash="b2" * 32,
                  serial_number="01", responder_url="http://ocsp.example.com")
    fields.update(kwargs)
    return OCSPRequestDataType(**fields)


def test_ocsp_request_data():
    assert_valid(make_ocsp_request_data())
    assert_invalid_fields(make_ocsp_request_data(serial_number="s" * 41, responder_url="u" * 2001),
                          ["serial_number", "responder_url"])


def test_camel_case_json():
    info = IdTokenInfoType.from_json_dict({"status": "Accepted", "chargingPriority": 3,
                                           "groupIdToken": {"idToken": "abc", "type": "Central"}})
    assert info.group_id_token.id_token == "abc"
    assert info.to_json_dict() == {"status": "Accepted", "chargingPriority": 3,
                                   "groupIdToken": {"idToken": "abc", "type": "Central"}}


@pytest.mark.parametrize("model, missing", [
    (StatusInfoType, ["reasonCode"]),
    (EVSEType, ["id"]),
    (MessageContentType, ["format", "content"]),
    (OCSPRequestDataType, ["hashAlgorithm", "issuerNameHash", "issuerKeyHash", "serialNumber", "responderUrl"]),
])
def test_required_fields_must_be_present(model, missing):
    with pytest.raises(StructureValidationError) as e:
        model.from_json_dict({})
    assert e.value.structure == model.__name__
    assert sorted(e.value.field_names()) == sorted(missing)
