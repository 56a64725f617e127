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

The error tree produced by structural validation.

Leaves describe a single violation, ``FieldValidationError`` hangs leaves (or
the lifted errors of a nested structure) under a field name, and
``StructureValidationError`` is what a failing ``validate()`` raises.

>>> err = FieldBoundsError(value=12, lower=-9, upper=9).to_field_validation_error("charging_priority")
>>> str(err)
'OCPP Field Validation Error: charging_priority'
>>> print(StructureValidationError(structure="IdTokenInfoType", related=[err]).render())
OCPP Structure Validation Error: IdTokenInfoType
└── OCPP Field Validation Error: charging_priority
    └── Field Bound Error: 12 not in range -9..9
"""
import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, Optional


class OcppError(Exception):
    template: ClassVar[str] = "OCPP Error"

    def __post_init__(self):
        super().__init__(str(self))

    def __str__(self):
        return self.template.format(**self._payload())

    def help_text(self) -> Optional[str]:
        return None

    @property
    def children(self) -> list["OcppError"]:
        return []

    def _payload(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self) if f.name != "related"}

    def to_field_validation_error(self, field_name: str) -> "FieldValidationError":
        """Wrap this error under ``field_name`` of the structure being validated."""
        return FieldValidationError(field=field_name, related=[self])

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"error": type(self).__name__, "description": str(self)}
        result.update({k: v for k, v in self._payload().items() if v is not None})
        if self.children:
            result["related"] = [child.to_dict() for child in self.children]
        return result

    def render(self) -> str:
        lines = [str(self)]
        self._render_children(lines, "")
        return "\n".join(lines)

    def _render_children(self, lines: list[str], prefix: str):
        children = self.children
        for i, child in enumerate(children):
            last = i == len(children) - 1
            lines.append(f"{prefix}{'└── ' if last else '├── '}{child}")
            child_prefix = prefix + ("    " if last else "│   ")
            if child.help_text() is not None:
                lines.append(f"{child_prefix}help: {child.help_text()}")
            child._render_children(lines, child_prefix)


@dataclass(eq=True)
class InvalidEnumValueError(OcppError):
    template: ClassVar[str] = "Invalid Enum Value: {value} not in {enum_name}"

    enum_name: str
    value: str


@dataclass(eq=True)
class FieldCardinalityError(OcppError):
    template: ClassVar[str] = "Field Cardinality Error: {cardinality} not in range {lower}..{upper}"

    cardinality: int
    lower: int
    upper: int


@dataclass(eq=True)
class FieldBoundsError(OcppError):
    template: ClassVar[str] = "Field Bound Error: {value} not in range {lower}..{upper}"

    value: Any
    lower: Any
    upper: Any


@dataclass(eq=True)
class FieldValueError(OcppError):
    template: ClassVar[str] = "Field Value Error: {value} is not a valid value"

    value: Any


@dataclass(eq=True)
class FieldISOError(OcppError):
    template: ClassVar[str] = "Field ISO Error: {value} does not comply with ISO {iso}"

    value: str
    iso: str


@dataclass(eq=True)
class FieldRelationshipError(OcppError):
    template: ClassVar[str] = "Field Relationship Error: {field_a} is invalid in relation to {field_b}"

    field_a: str
    field_b: str
    message: str = ""

    def help_text(self) -> Optional[str]:
        return self.message or None


@dataclass(eq=True)
class FieldValidationError(OcppError):
    template: ClassVar[str] = "OCPP Field Validation Error: {field}"

    field: str
    related: list[OcppError] = dataclasses.field(default_factory=list)
    # name of the nested structure whose errors were lifted into this wrapper
    structure: Optional[str] = None

    @property
    def children(self) -> list[OcppError]:
        return list(self.related)


@dataclass(eq=True)
class StructureValidationError(OcppError):
    template: ClassVar[str] = "OCPP Structure Validation Error: {structure}"

    structure: str
    related: list[OcppError] = dataclasses.field(default_factory=list)

    @property
    def children(self) -> list[OcppError]:
        return list(self.related)

    def field_names(self) -> list[str]:
        return [e.field for e in self.related if isinstance(e, FieldValidationError)]

    def errors_for(self, field_name: str) -> list[FieldValidationError]:
        return [e for e in self.related if isinstance(e, FieldValidationError) and e.field == field_name]
