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

from ocpp_entities.builder import StructureValidationBuilder
from ocpp_entities.entity import OcppModel, register_message
from ocpp_entities.v21.base_types import StatusInfoType
from ocpp_entities.v21.enums import TariffChangeStatusEnumType
from ocpp_entities.v21.tariff_types import TariffType


class ChangeTransactionTariffRequest(OcppModel):
    transaction_id : str
    tariff : TariffType

    def validate(self) -> None:
        b = StructureValidationBuilder()
        b.check_cardinality("transaction_id", 0, 36, self.transaction_id)
        b.check_member("tariff", self.tariff)
        b.build("ChangeTransactionTariffRequest")


class ChangeTransactionTariffResponse(OcppModel):
    status : TariffChangeStatusEnumType
    status_info : Optional[StatusInfoType] = None

    def validate(self) -> None:
        b = StructureValidationBuilder()
        if self.status_info is not None:
            b.check_member("status_info", self.status_info)
        b.build("ChangeTransactionTariffResponse")


ChangeTransactionTariff = register_message("ChangeTransactionTariff", ChangeTransactionTariffRequest,
                                           ChangeTransactionTariffResponse)
