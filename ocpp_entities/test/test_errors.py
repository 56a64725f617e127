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
from ocpp_entities.errors import FieldBoundsError, FieldCardinalityError, FieldISOError, FieldRelationshipError, \
    FieldValidationError, FieldValueError, InvalidEnumValueError, OcppError, StructureValidationError


def sample_tree() -> StructureValidationError:
    return StructureValidationError(structure="TariffType", related=[
        FieldCardinalityError(cardinality=61, lower=0, upper=60).to_field_validation_error("tariff_id"),
        FieldValidationError(field="min_cost", structure="PriceType", related=[
            FieldRelationshipError(field_a="excl_tax", field_b="incl_tax",
                                   message="At least one must be present.").to_field_validation_error("excl_tax"),
        ]),
    ])


def test_messages():
    assert str(InvalidEnumValueError(enum_name="DayOfWeekEnumType", value="Funday")) == \
           "Invalid Enum Value: Funday not in DayOfWeekEnumType"
    assert str(FieldCardinalityError(cardinality=4, lower=0, upper=3)) == \
           "Field Cardinality Error: 4 not in range 0..3"
    assert str(FieldBoundsError(value=-1, lower=0, upper=10)) == "Field Bound Error: -1 not in range 0..10"
    assert str(FieldValueError(value="x")) == "Field Value Error: x is not a valid value"
    assert str(FieldISOError(value="EURO", iso="4217")) == "Field ISO Error: EURO does not comply with ISO 4217"
    assert str(FieldRelationshipError(field_a="a", field_b="b", message="m")) == \
           "Field Relationship Error: a is invalid in relation to b"
    assert str(FieldValidationError(field="evse")) == "OCPP Field Validation Error: evse"
    assert str(StructureValidationError(structure="EVSEType")) == "OCPP Structure Validation Error: EVSEType"


def test_errors_are_exceptions():
    error = FieldBoundsError(value=12, lower=-9, upper=9)
    assert isinstance(error, OcppError)
    assert isinstance(error, Exception)
    assert error.args == ("Field Bound Error: 12 not in range -9..9",)


def test_wrap_under_field():
    leaf = FieldISOError(value="24:00", iso="8601 (RFC-3339)")
    wrapped = leaf.to_field_validation_error("start_time_of_day")
    assert wrapped.field == "start_time_of_day"
    assert wrapped.related == [leaf]
    assert wrapped.structure is None


def test_equality():
    assert sample_tree() == sample_tree()
    assert FieldBoundsError(value=1, lower=0, upper=0) != FieldBoundsError(value=2, lower=0, upper=0)
    assert FieldValueError(value=1) != FieldBoundsError(value=1, lower=0, upper=0)


def test_field_names():
    tree = sample_tree()
    assert tree.field_names() == ["tariff_id", "min_cost"]
    assert tree.errors_for("min_cost")[0].structure == "PriceType"
    assert tree.errors_for("currency") == []


def test_to_dict():
    as_dict = sample_tree().to_dict()
    assert as_dict["error"] == "StructureValidationError"
    assert as_dict["structure"] == "TariffType"
    assert as_dict["related"][0] == {
        "error": "FieldValidationError",
        "description": "OCPP Field Validation Error: tariff_id",
        "field": "tariff_id",
        "related": [{
            "error": "FieldCardinalityError",
            "description": "Field Cardinality Error: 61 not in range 0..60",
            "cardinality": 61,
            "lower": 0,
            "upper": 60,
        }],
    }
    assert as_dict["related"][1]["structure"] == "PriceType"


def test_render():
    assert sample_tree().render().splitlines() == [
        "OCPP Structure Validation Error: TariffType",
        "├── OCPP Field Validation Error: tariff_id",
        "│   └── Field Cardinality Error: 61 not in range 0..60",
        "└── OCPP Field Validation Error: min_cost",
        "    └── OCPP Field Validation Error: excl_tax",
        "        └── Field Relationship Error: excl_tax is invalid in relation to incl_tax",
        "            help: At least one must be present.",
    ]


def test_relationship_help_is_optional():
    assert FieldRelationshipError(field_a="a", field_b="b").help_text() is None
    assert FieldRelationshipError(field_a="a", field_b="b", message="why").help_text() == "why"
