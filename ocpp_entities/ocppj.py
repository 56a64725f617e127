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

OCPP-J RPC frames: ``[2, id, action, payload]``, ``[3, id, payload]`` and ``[4, id, code, description, details]``.

>>> frame = parse_frame([2, "19223201", "GetTariffs", {"evseId": 1}])
>>> frame.action, frame.payload.evse_id
('GetTariffs', 1)
>>> MessageTypeId.from_wire_name("CALLERROR")
<MessageTypeId.CALLERROR: 4>
"""
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

from beartype import beartype

from ocpp_entities.entity import OcppModel, get_message


class OcppFrameError(ValueError):
    pass


class UnknownActionError(OcppFrameError):
    pass


class MessageTypeId(IntEnum):
    CALL = 2
    CALLRESULT = 3
    CALLERROR = 4
    CALLRESULTERROR = 5
    SEND = 6

    @property
    def wire_name(self) -> str:
        return self.name

    @classmethod
    def from_wire_name(cls, name: str) -> "MessageTypeId":
        try:
            return cls[name]
        except KeyError:
            raise OcppFrameError(f"Unknown message type {name!r}") from None

    @classmethod
    def from_int(cls, value: int) -> "MessageTypeId":
        try:
            return cls(value)
        except ValueError:
            raise OcppFrameError(f"Unknown message type id {value!r}") from None


def new_message_id() -> str:
    return str(uuid.uuid4())


@dataclass
class RpcCall:
    action: str
    payload: OcppModel
    message_id: str = field(default_factory=new_message_id)
    message_type_id: MessageTypeId = MessageTypeId.CALL

    def validate(self) -> None:
        self.payload.validate()

    def to_list(self) -> list[Any]:
        return [int(self.message_type_id), self.message_id, self.action, self.payload.to_json_dict()]


@dataclass
class RpcCallResult:
    message_id: str
    payload: OcppModel
    message_type_id: MessageTypeId = MessageTypeId.CALLRESULT

    def validate(self) -> None:
        self.payload.validate()

    def to_list(self) -> list[Any]:
        return [int(self.message_type_id), self.message_id, self.payload.to_json_dict()]


@dataclass
class RpcCallError:
    message_id: str
    error_code: str
    error_description: str = ""
    error_details: Any = field(default_factory=dict)
    message_type_id: MessageTypeId = MessageTypeId.CALLERROR

    def validate(self) -> None:
        return None

    def to_list(self) -> list[Any]:
        return [int(self.message_type_id), self.message_id, self.error_code, self.error_description,
                self.error_details]


RpcFrame = Union[RpcCall, RpcCallResult, RpcCallError]


def _payload_type(action: str, response: bool) -> type[OcppModel]:
    message = get_message(action)
    if message is None:
        raise UnknownActionError(f"Unknown action {action!r}")
    return message.payload_type(response)


def _expect_length(data: list, lengths: tuple[int, ...], kind: MessageTypeId):
    if len(data) not in lengths:
        raise OcppFrameError(f"{kind.wire_name} frame must have {' or '.join(map(str, lengths))} elements, "
                             f"got {len(data)}")


@beartype
def parse_frame(data: list, action: Optional[str] = None) -> RpcFrame:
    """Build a frame from its decoded JSON array.

    The payload of a CALLRESULT does not name its action, pass ``action`` to parse it.
    Payload parse failures propagate as ``StructureValidationError``.
    """
    if not data or not isinstance(data[0], int) or isinstance(data[0], bool):
        raise OcppFrameError(f"Frame must start with an integer message type id, got {data[:1]!r}")
    kind = MessageTypeId.from_int(data[0])
    if len(data) < 2 or not isinstance(data[1], str):
        raise OcppFrameError("Frame message id must be a string")
    message_id = data[1]
    if kind in (MessageTypeId.CALL, MessageTypeId.SEND):
        _expect_length(data, (4,), kind)
        if not isinstance(data[2], str):
            raise OcppFrameError(f"{kind.wire_name} action must be a string, got {data[2]!r}")
        payload = _payload_type(data[2], response=False).from_json_dict(data[3])
        return RpcCall(action=data[2], payload=payload, message_id=message_id, message_type_id=kind)
    if kind == MessageTypeId.CALLRESULT:
        _expect_length(data, (3,), kind)
        if action is None:
            raise OcppFrameError("CALLRESULT payload can not be parsed without its action")
        payload = _payload_type(action, response=True).from_json_dict(data[2])
        return RpcCallResult(message_id=message_id, payload=payload)
    _expect_length(data, (4, 5), kind)
    if not isinstance(data[2], str) or not isinstance(data[3], str):
        raise OcppFrameError(f"{kind.wire_name} error code and description must be strings")
    return RpcCallError(message_id=message_id, error_code=data[2], error_description=data[3],
                        error_details=data[4] if len(data) == 5 else {}, message_type_id=kind)
