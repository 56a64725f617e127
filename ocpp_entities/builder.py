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

Accumulating validator used by every ``validate()`` implementation.

>>> b = StructureValidationBuilder()
>>> b.check_bounds("stack_level", 0, INT32_MAX, -1).check_cardinality("transaction_id", 0, 36, "x" * 40).error_count
2
>>> try:
...     b.build("ChargingProfileType")
... except StructureValidationError as e:
...     e.field_names()
['stack_level', 'transaction_id']
"""
import logging
import sys
from logging import getLogger

from beartype import beartype
from beartype.typing import Any, Callable, Iterable

from ocpp_entities.config import current_config
from ocpp_entities.entity import OcppEntity, parse_enum
from ocpp_entities.errors import OcppError, FieldBoundsError, FieldCardinalityError, FieldRelationshipError, \
    FieldValidationError, StructureValidationError, FieldISOError, InvalidEnumValueError
from ocpp_entities.iso.iso_4217 import get_currency_registry, ISO_4217

logger = getLogger(__name__)
logger.setLevel(logging.DEBUG)

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
FLOAT_MAX = sys.float_info.max
FLOAT_MIN = -sys.float_info.max
UNBOUNDED = sys.maxsize


def _count(collection: Any) -> int:
    try:
        return len(collection)
    except TypeError:
        return sum(1 for _ in collection)


class StructureValidationBuilder:
    """Collects field violations of one structure and turns them into a single error.

    Each ``check_*`` call appends at most one ``FieldValidationError`` and returns the
    builder so checks can be chained. ``build`` raises a ``StructureValidationError``
    holding everything collected, or returns ``None`` when nothing was.
    """

    def __init__(self):
        self.errors: list[OcppError] = []

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def push(self, error: OcppError) -> "StructureValidationBuilder":
        self.errors.append(error)
        return self

    @beartype
    def check_bounds(self, field: str, lower: Any, upper: Any, value: Any) -> "StructureValidationBuilder":
        if value < lower or value > upper:
            self.errors.append(FieldBoundsError(value=value, lower=lower, upper=upper)
                               .to_field_validation_error(field))
        return self

    @beartype
    def check_cardinality(self, field: str, lower: int, upper: int, collection: Any) -> "StructureValidationBuilder":
        """Check the element count of ``collection``, strings count characters.

        Iterators without ``len`` are counted by exhausting them.
        """
        cardinality = _count(collection)
        if cardinality < lower or cardinality > upper:
            self.errors.append(FieldCardinalityError(cardinality=cardinality, lower=lower, upper=upper)
                               .to_field_validation_error(field))
        return self

    @beartype
    def check_member(self, field: str, member: OcppEntity) -> "StructureValidationBuilder":
        error = self._member_error(field, member)
        if error is not None:
            self.errors.append(error)
        return self

    @beartype
    def check_iter_member(self, field: str, members: Iterable) -> "StructureValidationBuilder":
        failed = []
        for i, member in enumerate(members):
            error = self._member_error(f"{field}[{i}]", member)
            if error is not None:
                failed.append(error)
        if failed:
            self.errors.append(FieldValidationError(field=field, related=failed))
        return self

    @beartype
    def check_iso(self, field: str, validator: Callable[[str], None], value: str) -> "StructureValidationBuilder":
        try:
            validator(value)
        except OcppError as e:
            self.errors.append(e.to_field_validation_error(field))
        return self

    @beartype
    def check_currency(self, field: str, code: str) -> "StructureValidationBuilder":
        if not get_currency_registry().is_valid_code(code):
            self.errors.append(FieldISOError(value=code, iso=ISO_4217).to_field_validation_error(field))
        return self

    @beartype
    def check_enum(self, field: str, enum_type: type, value: Any) -> "StructureValidationBuilder":
        try:
            parse_enum(enum_type, value)
        except InvalidEnumValueError as e:
            self.errors.append(e.to_field_validation_error(field))
        return self

    @beartype
    def push_relation_error(self, field_a: str, field_b: str, message: str) -> "StructureValidationBuilder":
        self.errors.append(FieldRelationshipError(field_a=field_a, field_b=field_b, message=message)
                           .to_field_validation_error(field_a))
        return self

    @beartype
    def build(self, structure: str) -> None:
        if not self.errors:
            return None
        if current_config().log_validation_failures:
            logger.debug(f"{structure} failed validation on fields "
                         f"{[e.field for e in self.errors if isinstance(e, FieldValidationError)]}")
        raise StructureValidationError(structure=structure, related=list(self.errors))

    @staticmethod
    def _member_error(field: str, member: OcppEntity) -> FieldValidationError | None:
        try:
            member.validate()
        except StructureValidationError as e:
            return FieldValidationError(field=field, related=list(e.related), structure=e.structure)
        except OcppError as e:
            return e.to_field_validation_error(field)
        return None
