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

RFC-3339 grammars for the time-of-day and date fields of tariff conditions.

Both checks are purely lexical, ``2023-02-30`` is accepted.

>>> validate_rfc3339_24hr_time("23:59")
>>> validate_rfc3339_24hr_time("24:00")
Traceback (most recent call last):
...
ocpp_entities.errors.FieldISOError: Field ISO Error: 24:00 does not comply with ISO 8601 (RFC-3339)
"""
import re

from beartype import beartype

from ocpp_entities.errors import FieldISOError

ISO_8601_RFC_3339 = "8601 (RFC-3339)"

RFC_3339_24_TIME_REGEX = re.compile(r"^([0-1][0-9]|2[0-3]):[0-5][0-9]$")
RFC_3339_DATE_REGEX = re.compile(r"^([12][0-9]{3})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$")


@beartype
def validate_rfc3339_24hr_time(value: str) -> None:
    if RFC_3339_24_TIME_REGEX.fullmatch(value) is None:
        raise FieldISOError(value=value, iso=ISO_8601_RFC_3339)


@beartype
def validate_rfc3339_date(value: str) -> None:
    if RFC_3339_DATE_REGEX.fullmatch(value) is None:
        raise FieldISOError(value=value, iso=ISO_8601_RFC_3339)
