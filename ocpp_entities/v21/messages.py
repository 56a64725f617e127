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
from ocpp_entities.v21.authorize import Authorize
from ocpp_entities.v21.boot_notification import BootNotification
from ocpp_entities.v21.cancel_reservation import CancelReservation
from ocpp_entities.v21.change_transaction_tariff import ChangeTransactionTariff
from ocpp_entities.v21.clear_cache import ClearCache
from ocpp_entities.v21.clear_charging_profile import ClearChargingProfile
from ocpp_entities.v21.cost_updated import CostUpdated
from ocpp_entities.v21.data_transfer import DataTransfer
from ocpp_entities.v21.get_charging_profiles import GetChargingProfiles
from ocpp_entities.v21.get_local_list_version import GetLocalListVersion
from ocpp_entities.v21.get_tariffs import GetTariffs

ALL_MESSAGES = [Authorize, BootNotification, CancelReservation, ChangeTransactionTariff, ClearCache,
                ClearChargingProfile, CostUpdated, DataTransfer, GetChargingProfiles, GetLocalListVersion, GetTariffs]
