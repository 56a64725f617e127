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
import json
import logging
import sys
from argparse import ArgumentParser
from logging import getLogger
from typing import Any, Optional

from cachetools import cached

from ocpp_entities.config import EntitiesConfig, EntitiesConfigurator, current_config
from ocpp_entities.entity import get_message, registered_actions
from ocpp_entities.errors import StructureValidationError
from ocpp_entities.iso.iso_4217 import get_currency_by_code
from ocpp_entities.ocppj import OcppFrameError, UnknownActionError, parse_frame
from ocpp_entities.util import setup_logging

logger = getLogger(__name__)
logger.setLevel(logging.DEBUG)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="ocpp-entities", description="Structural validation of OCPP 2.1 messages.",
                            epilog="""
    Copyright (C) 2025 Lappeenrannan-Lahden teknillinen yliopisto LUT
    Author: Aleksei Romanenko <aleksei.romanenko@lut.fi>

    Funded by the European Union and UKRI. Views and opinions expressed are however those of the author(s) only and do 
    not necessarily reflect those of the European Union, CINEA or UKRI. Neither the European Union nor the granting authority 
    can be held responsible for them.""")
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, default="WARNING",
                        help="Level of the ocpp_entities loggers.")
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Validate an OCPP-J frame or a bare message payload.")
    check.add_argument("input_filename", type=str, help="JSON file to validate, '-' reads stdin.")
    check.add_argument("--action", type=str, default=None,
                       help="Action of a bare payload, or of the request a CALLRESULT frame answers.")
    check.add_argument("--response", action="store_true", help="Treat a bare payload as the response of --action.")
    check.add_argument("--format", type=str, choices=["tree", "json"], default=None,
                       help="Rendering of validation errors.")

    commands.add_parser("actions", help="List the actions with a registered message definition.")

    currency = commands.add_parser("currency", help="Show the ISO 4217 entry of a currency code.")
    currency.add_argument("code", type=str)
    return parser


@cached(cache={})
def get_app_args(argv: Optional[tuple[str, ...]] = None):
    return build_parser().parse_args(list(argv) if argv is not None else None)


def load_config(args) -> EntitiesConfig:
    settings = {"log_level": args.log_level, "log_validation_failures": args.log_level == "DEBUG"}
    if getattr(args, "format", None) is not None:
        settings["output_format"] = args.format
    if not EntitiesConfigurator.is_ready():
        EntitiesConfigurator.set_global_config(EntitiesConfig(**settings))
    else:
        config = EntitiesConfigurator.get_global_config()
        for key, value in settings.items():
            setattr(config, key, value)
    return current_config()


def _read_json(filename: str) -> Any:
    if filename == "-":
        return json.load(sys.stdin)
    with open(filename) as f:
        return json.load(f)


def report_error(error: StructureValidationError):
    if current_config().output_format == "json":
        print(json.dumps(error.to_dict(), indent=2, default=str))
    else:
        print(error.render())


def check(args) -> int:
    try:
        data = _read_json(args.input_filename)
    except (OSError, ValueError) as e:
        print(f"Can not read {args.input_filename}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    try:
        if isinstance(data, list):
            entity = parse_frame(data, action=args.action)
        elif isinstance(data, dict):
            if args.action is None:
                print("A bare payload needs --action", file=sys.stderr)
                return EXIT_BAD_INPUT
            message = get_message(args.action)
            if message is None:
                raise UnknownActionError(f"Unknown action {args.action!r}")
            entity = message.payload_type(args.response).from_json_dict(data)
        else:
            raise OcppFrameError(f"Expected a JSON array or object, got {type(data).__name__}")
        entity.validate()
    except StructureValidationError as e:
        logger.info(f"{args.input_filename} is invalid")
        report_error(e)
        return EXIT_INVALID
    except OcppFrameError as e:
        print(str(e), file=sys.stderr)
        return EXIT_BAD_INPUT
    print("valid")
    return EXIT_VALID


def list_actions(args) -> int:
    for action in registered_actions():
        print(action)
    return EXIT_VALID


def show_currency(args) -> int:
    currency = get_currency_by_code(args.code)
    if currency is None:
        print(f"{args.code} is not an ISO 4217 currency code", file=sys.stderr)
        return EXIT_INVALID
    print(currency)
    print(f"numeric: {currency.numeric:03d}")
    print(f"minor units: {currency.decimal_places}")
    print(f"active: {'yes' if currency.is_active else 'no'}")
    print(f"countries: {', '.join(currency.countries)}")
    return EXIT_VALID


COMMANDS = {
    "check": check,
    "actions": list_actions,
    "currency": show_currency,
}


def main(argv: Optional[list[str]] = None) -> int:
    args = get_app_args(tuple(argv) if argv is not None else None)
    config = load_config(args)
    setup_logging("ocpp_entities", getattr(logging, config.log_level))
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
