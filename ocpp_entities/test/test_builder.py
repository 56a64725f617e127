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
import logging
import warnings
from dataclasses import dataclass
from enum import Enum

import pytest
from beartype import beartype
from beartype.roar import BeartypeCallHintParamViolation, BeartypeDecorHintPep585DeprecationWarning

from ocpp_entities.builder import StructureValidationBuilder, INT32_MAX
from ocpp_entities.config import EntitiesConfig, EntitiesConfigurator
from ocpp_entities.entity import parse_enum
from ocpp_entities.errors import FieldBoundsError, FieldCardinalityError, FieldISOError, FieldRelationshipError, \
    FieldValidationError, InvalidEnumValueError, StructureValidationError
from ocpp_entities.iso.rfc_3339 import validate_rfc3339_24hr_time
from ocpp_entities.test.helpers import assert_num_field_errors, assert_valid, validation_error_of, clean_config
from ocpp_entities.v21 import enums
from ocpp_entities.v21.enums import DayOfWeekEnumType


@dataclass
class Leg:
    name: str
    distance: int

    def validate(self) -> None:
        StructureValidationBuilder() \
            .check_cardinality("name", 1, 10, self.name) \
            .check_bounds("distance", 0, 100, self.distance) \
            .build("Leg")


@dataclass
class Trip:
    first: Leg
    legs: list

    def validate(self) -> None:
        StructureValidationBuilder() \
            .check_member("first", self.first) \
            .check_iter_member("legs", self.legs) \
            .build("Trip")


@dataclass
class Window:
    start_time_of_day: str
    end_time_of_day: str

    def validate(self) -> None:
        e = StructureValidationBuilder()
        e.check_iso("start_time_of_day", validate_rfc3339_24hr_time, self.start_time_of_day)
        e.check_iso("end_time_of_day", validate_rfc3339_24hr_time, self.end_time_of_day)
        if e.error_count == 0 and self.start_time_of_day > self.end_time_of_day:
            e.push_relation_error("start_time_of_day", "end_time_of_day",
                                  "start_time_of_day must not be after end_time_of_day")
        e.build("Window")


def test_empty_builder_succeeds():
    assert StructureValidationBuilder().build("Nothing") is None


def test_bounds_are_inclusive():
    b = StructureValidationBuilder()
    b.check_bounds("at_lower", -9, 9, -9).check_bounds("at_upper", -9, 9, 9).check_bounds("inside", -9, 9, 0)
    assert b.error_count == 0
    b.check_bounds("below", -9, 9, -10).check_bounds("above", -9, 9, 10)
    assert b.error_count == 2
    with pytest.raises(StructureValidationError) as e:
        b.build("Bounds")
    assert e.value.field_names() == ["below", "above"]
    assert e.value.related[0].related == [FieldBoundsError(value=-10, lower=-9, upper=9)]


def test_bounds_on_floats():
    b = StructureValidationBuilder().check_bounds("tax", 0.0, 100.0, 0.0).check_bounds("price", 0.0, 100.0, -0.01)
    assert b.error_count == 1


def test_cardinality_boundaries():
    b = StructureValidationBuilder()
    b.check_cardinality("empty", 0, 3, "").check_cardinality("full", 0, 3, "abc").check_cardinality("list", 1, 3, [1])
    assert b.error_count == 0
    b.check_cardinality("too_long", 0, 3, "abcd").check_cardinality("too_few", 1, 3, [])
    with pytest.raises(StructureValidationError) as e:
        b.build("Holder")
    error = e.value
    assert error.errors_for("too_long")[0].related == [FieldCardinalityError(cardinality=4, lower=0, upper=3)]
    assert error.errors_for("too_few")[0].related == [FieldCardinalityError(cardinality=0, lower=1, upper=3)]


def test_cardinality_counts_iterators():
    b = StructureValidationBuilder().check_cardinality("days", 0, 2, iter(["Monday", "Tuesday", "Friday"]))
    assert b.errors[0].related == [FieldCardinalityError(cardinality=3, lower=0, upper=2)]


def test_cardinality_counts_characters_not_bytes():
    b = StructureValidationBuilder().check_cardinality("name", 0, 7, "Curaçao")
    assert b.error_count == 0


def test_nested_errors_are_lifted_under_the_field():
    trip = Trip(first=Leg(name="", distance=101), legs=[])
    error = assert_num_field_errors(trip, 1)
    wrapper = error.related[0]
    assert wrapper.field == "first"
    assert wrapper.structure == "Leg"
    assert len(wrapper.related) == 2, f"{wrapper.related}"
    assert [e.field for e in wrapper.related] == ["name", "distance"]


def test_iterable_members_are_indexed():
    trip = Trip(first=Leg(name="home", distance=1),
                legs=[Leg(name="a", distance=1), Leg(name="b", distance=-1), Leg(name="", distance=1)])
    error = assert_num_field_errors(trip, 1)
    legs = error.errors_for("legs")[0]
    assert [e.field for e in legs.related] == ["legs[1]", "legs[2]"]
    assert all(e.structure == "Leg" for e in legs.related)
    assert legs.related[0].related == [FieldBoundsError(value=-1, lower=0, upper=100)
                                       .to_field_validation_error("distance")]


def test_valid_members_add_nothing():
    assert_valid(Trip(first=Leg(name="home", distance=1), legs=[Leg(name="a", distance=2)]))


def test_relationship_violation():
    error = assert_num_field_errors(Window(start_time_of_day="10:30", end_time_of_day="09:00"), 1)
    assert error.related[0] == FieldValidationError(field="start_time_of_day", related=[
        FieldRelationshipError(field_a="start_time_of_day", field_b="end_time_of_day",
                               message="start_time_of_day must not be after end_time_of_day")])


def test_relationship_holds():
    assert_valid(Window(start_time_of_day="09:00", end_time_of_day="10:30"))


def test_iso_errors_are_wrapped():
    error = assert_num_field_errors(Window(start_time_of_day="24:00", end_time_of_day="12:60"), 2)
    assert error.errors_for("start_time_of_day")[0].related == [FieldISOError(value="24:00", iso="8601 (RFC-3339)")]


def test_currency_check():
    b = StructureValidationBuilder().check_currency("currency", "EUR").check_currency("price_currency", "eur")
    assert b.error_count == 1
    assert b.errors[0] == FieldISOError(value="eur", iso="4217").to_field_validation_error("price_currency")


def test_enum_check():
    b = StructureValidationBuilder()
    b.check_enum("day", DayOfWeekEnumType, "Monday").check_enum("day", DayOfWeekEnumType, DayOfWeekEnumType.sunday)
    assert b.error_count == 0
    b.check_enum("day", DayOfWeekEnumType, "Funday")
    assert b.errors[0].related == [InvalidEnumValueError(enum_name="DayOfWeekEnumType", value="Funday")]


class Colour(str, Enum):
    red = "Red"


def test_enum_check_on_any_enum():
    assert parse_enum(Colour, "Red") is Colour.red
    assert enums.parse_enum is parse_enum
    b = StructureValidationBuilder().check_enum("colour", Colour, "Blue")
    assert b.errors[0].related == [InvalidEnumValueError(enum_name="Colour", value="Blue")]


def test_push_keeps_order():
    first = FieldBoundsError(value=1, lower=2, upper=3).to_field_validation_error("a")
    b = StructureValidationBuilder().push(first).check_bounds("b", 0, 0, 1)
    assert b.errors[0] is first
    assert b.errors[1].field == "b"


def test_additivity():
    single_a = validation_error_of(Leg(name="", distance=1))
    single_b = validation_error_of(Leg(name="x", distance=-1))
    both = validation_error_of(Leg(name="", distance=-1))
    assert len(both.related) == len(single_a.related) + len(single_b.related)


def test_idempotence():
    trip = Trip(first=Leg(name="", distance=101), legs=[Leg(name="b", distance=-1)])
    assert validation_error_of(trip) == validation_error_of(trip)


def test_int32_upper_bound():
    b = StructureValidationBuilder().check_bounds("id", 0, INT32_MAX, INT32_MAX).check_bounds("id", 0, INT32_MAX,
                                                                                              INT32_MAX + 1)
    assert b.error_count == 1


def test_misuse_is_rejected():
    with pytest.raises(BeartypeCallHintParamViolation):
        StructureValidationBuilder().check_bounds(1, 0, 1, 0)


def test_failures_are_logged_when_enabled(clean_config, caplog):
    EntitiesConfigurator.set_global_config(EntitiesConfig(log_validation_failures=True))
    caplog.set_level(logging.DEBUG, logger="ocpp_entities.builder")
    validation_error_of(Leg(name="", distance=1))
    assert "Leg failed validation on fields ['name']" in caplog.text


def test_failures_are_quiet_by_default(clean_config, caplog):
    caplog.set_level(logging.DEBUG, logger="ocpp_entities.builder")
    validation_error_of(Leg(name="", distance=1))
    assert "failed validation" not in caplog.text


def test_builder_hints_decorate_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", BeartypeDecorHintPep585DeprecationWarning)
        beartype(StructureValidationBuilder.check_iso.__wrapped__)
        beartype(StructureValidationBuilder.check_iter_member.__wrapped__)
