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

Entity contract, the pydantic base of all shipped structures and the message registry.

>>> from ocpp_entities.v21.clear_cache import ClearCacheRequest
>>> get_message("ClearCache").request() == ClearCacheRequest()
True
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from logging import getLogger
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from beartype import beartype
from camel_converter import to_camel
from pydantic import BaseModel, ConfigDict, ValidationError

from ocpp_entities.errors import FieldValidationError, FieldValueError, InvalidEnumValueError, \
    StructureValidationError

logger = getLogger(__name__)
logger.setLevel(logging.DEBUG)

E = TypeVar("E", bound=Enum)


def parse_enum(enum_type: type[E], value: Any) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(getattr(value, "value", value))
    except ValueError:
        raise InvalidEnumValueError(enum_name=enum_type.__name__, value=str(getattr(value, "value", value))) from None


@runtime_checkable
class OcppEntity(Protocol):

    def validate(self) -> None:
        """Raise ``StructureValidationError`` holding every violated constraint, return ``None`` otherwise."""
        ...


class OcppModel(BaseModel):
    """Base of every OCPP structure and message payload.

    Attributes are snake_case, the JSON names are the camelCase ones OCPP uses.
    Constraints that OCPP puts on values are not encoded as pydantic types so that
    out-of-range objects can still be built and then reported by ``validate``.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def validate(self) -> None:
        return None

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_json_dict(cls, data: Any):
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise StructureValidationError(structure=cls.__name__, related=[
                FieldValidationError(field=".".join(str(part) for part in error["loc"]) or cls.__name__,
                                     related=[FieldValueError(value=error.get("input"))])
                for error in e.errors()
            ]) from e


@dataclass(frozen=True)
class OcppMessage:
    """Payload types of one action.

    Payload fields that OCPP requires carry no default, ``request()`` and ``response()``
    fill them from the defaults given at registration.
    """
    action: str
    request_type: type[OcppModel]
    response_type: type[OcppModel]
    request_defaults: dict[str, Any] = field(default_factory=dict, hash=False)
    response_defaults: dict[str, Any] = field(default_factory=dict, hash=False)

    def request(self) -> OcppModel:
        return self.request_type(**self.request_defaults)

    def response(self) -> OcppModel:
        return self.response_type(**self.response_defaults)

    def payload_type(self, response: bool = False) -> type[OcppModel]:
        return self.response_type if response else self.request_type


_MESSAGES: dict[str, OcppMessage] = {}


@beartype
def register_message(action: str, request_type: type[OcppModel], response_type: type[OcppModel],
                     request_defaults: Optional[dict] = None, response_defaults: Optional[dict] = None) -> OcppMessage:
    message = OcppMessage(action, request_type, response_type, dict(request_defaults or {}),
                          dict(response_defaults or {}))
    if action in _MESSAGES and _MESSAGES[action] != message:
        logger.warning(f"Message {action} registered twice, keeping the latest definition")
    _MESSAGES[action] = message
    return message


def _load_messages():
    import ocpp_entities.v21.messages  # noqa: F401


def get_message(action: str) -> Optional[OcppMessage]:
    _load_messages()
    return _MESSAGES.get(action)


def registered_actions() -> list[str]:
    _load_messages()
    return sorted(_MESSAGES)
