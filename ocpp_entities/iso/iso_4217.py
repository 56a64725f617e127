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

ISO 4217 currency table and the registry used to validate tariff currencies.

>>> registry = get_currency_registry()
>>> registry.is_valid_code("EUR"), registry.is_valid_code("eur"), registry.is_valid_code("XXY")
(True, False, False)
>>> str(registry.get_by_numeric(978))
'EUR (Euro)'
>>> get_currency_by_code("KWD").decimal_places
3
"""
import re
from dataclasses import dataclass

from beartype import beartype
from beartype.typing import Iterator, Optional
from cachetools import cached

from ocpp_entities.errors import FieldISOError

ISO_4217 = "4217"

CODE_FORMAT = re.compile(r"^[A-Z]{3}$")

PRECIOUS_METALS = frozenset({"XAU", "XAG", "XPT", "XPD"})
SUPRANATIONAL = frozenset({"XCD", "XAF", "XOF", "XPF", "XDR", "EUR"})
SPECIAL_PURPOSE = frozenset({"XTS", "XXX"})
MAJOR_CURRENCIES = frozenset({"USD", "EUR", "GBP", "JPY", "CHF", "CAD", "AUD", "CNY", "SEK", "NOK", "NZD", "HKD",
                              "SGD"})


@dataclass(frozen=True)
class Currency:
    code: str
    numeric: int
    minor_units: Optional[int]
    name: str
    countries: tuple[str, ...]
    is_active: bool

    def __str__(self):
        return f"{self.code} ({self.name})"

    @property
    def has_minor_units(self) -> bool:
        return bool(self.minor_units)

    @property
    def decimal_places(self) -> int:
        return self.minor_units or 0

    @property
    def is_precious_metal(self) -> bool:
        return self.code in PRECIOUS_METALS

    @property
    def is_supranational(self) -> bool:
        return self.code in SUPRANATIONAL

    @property
    def is_special_purpose(self) -> bool:
        return self.code in SPECIAL_PURPOSE

    @property
    def is_major_currency(self) -> bool:
        return self.code in MAJOR_CURRENCIES

    @property
    def uses_three_decimals(self) -> bool:
        return self.minor_units == 3

    @property
    def is_whole_unit_currency(self) -> bool:
        return not self.minor_units


ALL_CURRENCIES: tuple[Currency, ...] = (
    Currency("AED", 784, 2, "UAE Dirham", ("United Arab Emirates",), True),
    Currency("AFN", 971, 2, "Afghani", ("Afghanistan",), True),
    Currency("ALL", 8, 2, "Lek", ("Albania",), True),
    Currency("AMD", 51, 2, "Armenian Dram", ("Armenia",), True),
    Currency("ANG", 532, 2, "Netherlands Antillean Guilder", ("Curaçao", "Sint Maarten",), True),
    Currency("AOA", 973, 2, "Kwanza", ("Angola",), True),
    Currency("ARS", 32, 2, "Argentine Peso", ("Argentina",), True),
    Currency("AUD", 36, 2, "Australian Dollar", ("Australia", "Christmas Island", "Cocos Islands", "Heard Island and McDonald Islands", "Kiribati", "Nauru", "Norfolk Island", "Tuvalu",), True),
    Currency("AWG", 533, 2, "Aruban Florin", ("Aruba",), True),
    Currency("AZN", 944, 2, "Azerbaijan Manat", ("Azerbaijan",), True),
    Currency("BAM", 977, 2, "Convertible Mark", ("Bosnia and Herzegovina",), True),
    Currency("BBD", 52, 2, "Barbados Dollar", ("Barbados",), True),
    Currency("BDT", 50, 2, "Taka", ("Bangladesh",), True),
    Currency("BGN", 975, 2, "Bulgarian Lev", ("Bulgaria",), True),
    Currency("BHD", 48, 3, "Bahraini Dinar", ("Bahrain",), True),
    Currency("BIF", 108, 0, "Burundi Franc", ("Burundi",), True),
    Currency("BMD", 60, 2, "Bermudian Dollar", ("Bermuda",), True),
    Currency("BND", 96, 2, "Brunei Dollar", ("Brunei Darussalam",), True),
    Currency("BOB", 68, 2, "Boliviano", ("Bolivia",), True),
    Currency("BOV", 984, 2, "Mvdol", ("Bolivia",), True),
    Currency("BRL", 986, 2, "Brazilian Real", ("Brazil",), True),
    Currency("BSD", 44, 2, "Bahamian Dollar", ("Bahamas",), True),
    Currency("BTN", 64, 2, "Ngultrum", ("Bhutan",), True),
    Currency("BWP", 72, 2, "Pula", ("Botswana",), True),
    Currency("BYN", 933, 2, "Belarusian Ruble", ("Belarus",), True),
    Currency("BZD", 84, 2, "Belize Dollar", ("Belize",), True),
    Currency("CAD", 124, 2, "Canadian Dollar", ("Canada",), True),
    Currency("CDF", 976, 2, "Congolese Franc", ("Democratic Republic of the Congo",), True),
    Currency("CHE", 947, 2, "WIR Euro", ("Switzerland",), True),
    Currency("CHF", 756, 2, "Swiss Franc", ("Switzerland", "Liechtenstein",), True),
    Currency("CHW", 948, 2, "WIR Franc", ("Switzerland",), True),
    Currency("CLF", 990, 4, "Unidad de Fomento", ("Chile",), True),
    Currency("CLP", 152, 0, "Chilean Peso", ("Chile",), True),
    Currency("CNY", 156, 2, "Yuan Renminbi", ("China",), True),
    Currency("COP", 170, 2, "Colombian Peso", ("Colombia",), True),
    Currency("COU", 970, 2, "Unidad de Valor Real", ("Colombia",), True),
    Currency("CRC", 188, 2, "Costa Rican Colon", ("Costa Rica",), True),
    Currency("CUC", 931, 2, "Peso Convertible", ("Cuba",), True),
    Currency("CUP", 192, 2, "Cuban Peso", ("Cuba",), True),
    Currency("CVE", 132, 2, "Cabo Verde Escudo", ("Cabo Verde",), True),
    Currency("CZK", 203, 2, "Czech Koruna", ("Czech Republic",), True),
    Currency("DJF", 262, 0, "Djibouti Franc", ("Djibouti",), True),
    Currency("DKK", 208, 2, "Danish Krone", ("Denmark", "Faroe Islands", "Greenland",), True),
    Currency("DOP", 214, 2, "Dominican Peso", ("Dominican Republic",), True),
    Currency("DZD", 12, 2, "Algerian Dinar", ("Algeria",), True),
    Currency("EGP", 818, 2, "Egyptian Pound", ("Egypt",), True),
    Currency("ERN", 232, 2, "Nakfa", ("Eritrea",), True),
    Currency("ETB", 230, 2, "Ethiopian Birr", ("Ethiopia",), True),
    Currency("EUR", 978, 2, "Euro", ("Austria", "Belgium", "Cyprus", "Estonia", "Finland", "France", "Germany", "Greece", "Ireland", "Italy", "Latvia", "Lithuania", "Luxembourg", "Malta", "Netherlands", "Portugal", "Slovakia", "Slovenia", "Spain", "Andorra", "Monaco", "San Marino", "Vatican City", "Kosovo", "Montenegro",), True),
    Currency("FJD", 242, 2, "Fiji Dollar", ("Fiji",), True),
    Currency("FKP", 238, 2, "Falkland Islands Pound", ("Falkland Islands",), True),
    Currency("GBP", 826, 2, "Pound Sterling", ("United Kingdom", "Isle of Man", "Jersey", "Guernsey",), True),
    Currency("GEL", 981, 2, "Lari", ("Georgia",), True),
    Currency("GGP", 0, 2, "Guernsey Pound", ("Guernsey",), False),  # no ISO numeric code
    Currency("GHS", 936, 2, "Ghana Cedi", ("Ghana",), True),
    Currency("GIP", 292, 2, "Gibraltar Pound", ("Gibraltar",), True),
    Currency("GMD", 270, 2, "Dalasi", ("Gambia",), True),
    Currency("GNF", 324, 0, "Guinean Franc", ("Guinea",), True),
    Currency("GTQ", 320, 2, "Quetzal", ("Guatemala",), True),
    Currency("GYD", 328, 2, "Guyana Dollar", ("Guyana",), True),
    Currency("HKD", 344, 2, "Hong Kong Dollar", ("Hong Kong",), True),
    Currency("HNL", 340, 2, "Lempira", ("Honduras",), True),
    Currency("HTG", 332, 2, "Gourde", ("Haiti",), True),
    Currency("HUF", 348, 2, "Forint", ("Hungary",), True),
    Currency("IDR", 360, 2, "Rupiah", ("Indonesia",), True),
    Currency("ILS", 376, 2, "New Israeli Sheqel", ("Israel",), True),
    Currency("IMP", 0, 2, "Isle of Man Pound", ("Isle of Man",), False),  # no ISO numeric code
    Currency("INR", 356, 2, "Indian Rupee", ("India", "Bhutan",), True),
    Currency("IQD", 368, 3, "Iraqi Dinar", ("Iraq",), True),
    Currency("IRR", 364, 2, "Iranian Rial", ("Iran",), True),
    Currency("ISK", 352, 0, "Iceland Krona", ("Iceland",), True),
    Currency("JEP", 0, 2, "Jersey Pound", ("Jersey",), False),  # no ISO numeric code
    Currency("JMD", 388, 2, "Jamaican Dollar", ("Jamaica",), True),
    Currency("JOD", 400, 3, "Jordanian Dinar", ("Jordan",), True),
    Currency("JPY", 392, 0, "Yen", ("Japan",), True),
    Currency("KES", 404, 2, "Kenyan Shilling", ("Kenya",), True),
    Currency("KGS", 417, 2, "Som", ("Kyrgyzstan",), True),
    Currency("KHR", 116, 2, "Riel", ("Cambodia",), True),
    Currency("KMF", 174, 0, "Comorian Franc", ("Comoros",), True),
    Currency("KPW", 408, 2, "North Korean Won", ("North Korea",), True),
    Currency("KRW", 410, 0, "Won", ("South Korea",), True),
    Currency("KWD", 414, 3, "Kuwaiti Dinar", ("Kuwait",), True),
    Currency("KYD", 136, 2, "Cayman Islands Dollar", ("Cayman Islands",), True),
    Currency("KZT", 398, 2, "Tenge", ("Kazakhstan",), True),
    Currency("LAK", 418, 2, "Lao Kip", ("Laos",), True),
    Currency("LBP", 422, 2, "Lebanese Pound", ("Lebanon",), True),
    Currency("LKR", 144, 2, "Sri Lanka Rupee", ("Sri Lanka",), True),
    Currency("LRD", 430, 2, "Liberian Dollar", ("Liberia",), True),
    Currency("LSL", 426, 2, "Loti", ("Lesotho",), True),
    Currency("LYD", 434, 3, "Libyan Dinar", ("Libya",), True),
    Currency("MAD", 504, 2, "Moroccan Dirham", ("Morocco", "Western Sahara",), True),
    Currency("MDL", 498, 2, "Moldovan Leu", ("Moldova",), True),
    Currency("MGA", 969, 2, "Malagasy Ariary", ("Madagascar",), True),
    Currency("MKD", 807, 2, "Denar", ("North Macedonia",), True),
    Currency("MMK", 104, 2, "Kyat", ("Myanmar",), True),
    Currency("MNT", 496, 2, "Tugrik", ("Mongolia",), True),
    Currency("MOP", 446, 2, "Pataca", ("Macao",), True),
    Currency("MRU", 929, 2, "Ouguiya", ("Mauritania",), True),
    Currency("MUR", 480, 2, "Mauritius Rupee", ("Mauritius",), True),
    Currency("MVR", 462, 2, "Rufiyaa", ("Maldives",), True),
    Currency("MWK", 454, 2, "Malawi Kwacha", ("Malawi",), True),
    Currency("MXN", 484, 2, "Mexican Peso", ("Mexico",), True),
    Currency("MXV", 979, 2, "Mexican Unidad de Inversion", ("Mexico",), True),
    Currency("MYR", 458, 2, "Malaysian Ringgit", ("Malaysia",), True),
    Currency("MZN", 943, 2, "Mozambique Metical", ("Mozambique",), True),
    Currency("NAD", 516, 2, "Namibia Dollar", ("Namibia",), True),
    Currency("NGN", 566, 2, "Naira", ("Nigeria",), True),
    Currency("NIO", 558, 2, "Cordoba Oro", ("Nicaragua",), True),
    Currency("NOK", 578, 2, "Norwegian Krone", ("Norway", "Bouvet Island", "Svalbard and Jan Mayen",), True),
    Currency("NPR", 524, 2, "Nepalese Rupee", ("Nepal",), True),
    Currency("NZD", 554, 2, "New Zealand Dollar", ("New Zealand", "Cook Islands", "Niue", "Pitcairn", "Tokelau",), True),
    Currency("OMR", 512, 3, "Rial Omani", ("Oman",), True),
    Currency("PAB", 590, 2, "Balboa", ("Panama",), True),
    Currency("PEN", 604, 2, "Sol", ("Peru",), True),
    Currency("PGK", 598, 2, "Kina", ("Papua New Guinea",), True),
    Currency("PHP", 608, 2, "Philippine Peso", ("Philippines",), True),
    Currency("PKR", 586, 2, "Pakistan Rupee", ("Pakistan",), True),
    Currency("PLN", 985, 2, "Zloty", ("Poland",), True),
    Currency("PYG", 600, 0, "Guarani", ("Paraguay",), True),
    Currency("QAR", 634, 2, "Qatari Rial", ("Qatar",), True),
    Currency("RON", 946, 2, "Romanian Leu", ("Romania",), True),
    Currency("RSD", 941, 2, "Serbian Dinar", ("Serbia",), True),
    Currency("RUB", 643, 2, "Russian Ruble", ("Russia",), True),
    Currency("RWF", 646, 0, "Rwanda Franc", ("Rwanda",), True),
    Currency("SAR", 682, 2, "Saudi Riyal", ("Saudi Arabia",), True),
    Currency("SBD", 90, 2, "Solomon Islands Dollar", ("Solomon Islands",), True),
    Currency("SCR", 690, 2, "Seychelles Rupee", ("Seychelles",), True),
    Currency("SDG", 938, 2, "Sudanese Pound", ("Sudan",), True),
    Currency("SEK", 752, 2, "Swedish Krona", ("Sweden",), True),
    Currency("SGD", 702, 2, "Singapore Dollar", ("Singapore",), True),
    Currency("SHP", 654, 2, "Saint Helena Pound", ("Saint Helena", "Ascension and Tristan da Cunha",), True),
    Currency("SLE", 925, 2, "Leone", ("Sierra Leone",), True),
    Currency("SLL", 694, 2, "Leone", ("Sierra Leone",), False),
    Currency("SOS", 706, 2, "Somali Shilling", ("Somalia",), True),
    Currency("SRD", 968, 2, "Suriname Dollar", ("Suriname",), True),
    Currency("SSP", 728, 2, "South Sudanese Pound", ("South Sudan",), True),
    Currency("STN", 930, 2, "Dobra", ("Sao Tome and Principe",), True),
    Currency("SVC", 222, 2, "El Salvador Colon", ("El Salvador",), False),
    Currency("SYP", 760, 2, "Syrian Pound", ("Syria",), True),
    Currency("SZL", 748, 2, "Lilangeni", ("Eswatini",), True),
    Currency("THB", 764, 2, "Baht", ("Thailand",), True),
    Currency("TJS", 972, 2, "Somoni", ("Tajikistan",), True),
    Currency("TMT", 934, 2, "Turkmenistan New Manat", ("Turkmenistan",), True),
    Currency("TND", 788, 3, "Tunisian Dinar", ("Tunisia",), True),
    Currency("TOP", 776, 2, "Pa'anga", ("Tonga",), True),
    Currency("TRY", 949, 2, "Turkish Lira", ("Turkey",), True),
    Currency("TTD", 780, 2, "Trinidad and Tobago Dollar", ("Trinidad and Tobago",), True),
    Currency("TVD", 0, 2, "Tuvalu Dollar", ("Tuvalu",), False),  # no ISO numeric code
    Currency("TWD", 901, 2, "New Taiwan Dollar", ("Taiwan",), True),
    Currency("TZS", 834, 2, "Tanzanian Shilling", ("Tanzania",), True),
    Currency("UAH", 980, 2, "Hryvnia", ("Ukraine",), True),
    Currency("UGX", 800, 0, "Uganda Shilling", ("Uganda",), True),
    Currency("USD", 840, 2, "US Dollar", ("United States", "American Samoa", "British Indian Ocean Territory", "Ecuador", "El Salvador", "Guam", "Marshall Islands", "Micronesia", "Northern Mariana Islands", "Palau", "Panama", "Puerto Rico", "Timor-Leste", "Turks and Caicos Islands", "US Virgin Islands", "Wake Island",), True),
    Currency("USN", 997, 2, "US Dollar (Next day)", ("United States",), True),
    Currency("UYI", 940, 0, "Uruguay Peso en Unidades Indexadas", ("Uruguay",), True),
    Currency("UYU", 858, 2, "Peso Uruguayo", ("Uruguay",), True),
    Currency("UYW", 927, 4, "Unidad Previsional", ("Uruguay",), True),
    Currency("UZS", 860, 2, "Uzbekistan Sum", ("Uzbekistan",), True),
    Currency("VED", 926, 2, "Bolívar Soberano", ("Venezuela",), False),
    Currency("VES", 928, 2, "Bolívar Soberano", ("Venezuela",), True),
    Currency("VND", 704, 0, "Dong", ("Vietnam",), True),
    Currency("VUV", 548, 0, "Vatu", ("Vanuatu",), True),
    Currency("WST", 882, 2, "Tala", ("Samoa",), True),
    Currency("XAF", 950, 0, "CFA Franc BEAC", ("Cameroon", "Central African Republic", "Chad", "Republic of the Congo", "Equatorial Guinea", "Gabon",), True),
    Currency("XAG", 961, 2, "Silver", ("International",), True),
    Currency("XAU", 959, 2, "Gold", ("International",), True),
    Currency("XBA", 955, 2, "Bond Markets Unit European Composite Unit", ("International",), True),
    Currency("XBB", 956, 2, "Bond Markets Unit European Monetary Unit", ("International",), True),
    Currency("XBC", 957, 2, "Bond Markets Unit European Unit of Account 9", ("International",), True),
    Currency("XBD", 958, 2, "Bond Markets Unit European Unit of Account 17", ("International",), True),
    Currency("XCD", 951, 2, "East Caribbean Dollar", ("Anguilla", "Antigua and Barbuda", "Dominica", "Grenada", "Montserrat", "Saint Kitts and Nevis", "Saint Lucia", "Saint Vincent and the Grenadines",), True),
    Currency("XDR", 960, 2, "SDR (Special Drawing Right)", ("International Monetary Fund",), True),
    Currency("XOF", 952, 0, "CFA Franc BCEAO", ("Benin", "Burkina Faso", "Côte d'Ivoire", "Guinea-Bissau", "Mali", "Niger", "Senegal", "Togo",), True),
    Currency("XPD", 964, 2, "Palladium", ("International",), True),
    Currency("XPF", 953, 0, "CFP Franc", ("French Polynesia", "New Caledonia", "Wallis and Futuna",), True),
    Currency("XPT", 962, 2, "Platinum", ("International",), True),
    Currency("XSU", 994, 2, "Sucre", ("Sistema Unitario de Compensacion Regional de Pagos SUCRE",), True),
    Currency("XTS", 963, 2, "Codes specifically reserved for testing purposes", ("Testing",), True),
    Currency("XUA", 965, 2, "ADB Unit of Account", ("African Development Bank",), True),
    Currency("XXX", 999, None, "The codes assigned for transactions where no currency is involved", ("No currency",), True),
    Currency("YER", 886, 2, "Yemeni Rial", ("Yemen",), True),
    Currency("ZAR", 710, 2, "Rand", ("South Africa", "Lesotho", "Namibia",), True),
    Currency("ZMW", 967, 2, "Zambian Kwacha", ("Zambia",), True),
    Currency("ZWL", 932, 2, "Zimbabwe Dollar", ("Zimbabwe",), False),
    Currency("HRK", 191, 2, "Kuna", ("Croatia",), False),
)


def _has_code_format(code: str) -> bool:
    return CODE_FORMAT.fullmatch(code) is not None


def _has_numeric_range(numeric: int) -> bool:
    return 0 < numeric <= 999


class CurrencyRegistry:
    """Read-only index over ``ALL_CURRENCIES``.

    Lookups by code and numeric are dictionary hits, everything else scans the table.
    Codes without an ISO numeric (numeric ``0``) are only reachable by code.
    """

    def __init__(self, currencies: tuple[Currency, ...] = ALL_CURRENCIES):
        self._currencies = currencies
        self._by_code = {c.code: c for c in currencies}
        self._by_numeric = {c.numeric: c for c in currencies if _has_numeric_range(c.numeric)}

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def all(self) -> tuple[Currency, ...]:
        return self._currencies

    @beartype
    def is_valid_code(self, code: str) -> bool:
        return _has_code_format(code) and code in self._by_code

    @beartype
    def is_valid_numeric(self, numeric: int) -> bool:
        return _has_numeric_range(numeric) and numeric in self._by_numeric

    @beartype
    def get_by_code(self, code: str) -> Optional[Currency]:
        if not _has_code_format(code):
            return None
        return self._by_code.get(code)

    @beartype
    def get_by_numeric(self, numeric: int) -> Optional[Currency]:
        if not _has_numeric_range(numeric):
            return None
        return self._by_numeric.get(numeric)

    def active_currencies(self) -> list[Currency]:
        return [c for c in self._currencies if c.is_active]

    def find_by_country_exact(self, country: str) -> list[Currency]:
        return [c for c in self._currencies if country in c.countries]

    def find_by_country(self, country: str) -> list[Currency]:
        """Case-insensitive substring match against the countries of each currency."""
        needle = country.lower()
        return [c for c in self._currencies if any(needle in name.lower() for name in c.countries)]

    def precious_metals(self) -> list[Currency]:
        return [c for c in self._currencies if c.is_precious_metal]

    def supranational_currencies(self) -> list[Currency]:
        return [c for c in self._currencies if c.is_supranational]


@cached(cache={})
def get_currency_registry() -> CurrencyRegistry:
    return CurrencyRegistry()


def is_valid_currency_code(code: str) -> bool:
    return get_currency_registry().is_valid_code(code)


def is_valid_currency_numeric(numeric: int) -> bool:
    return get_currency_registry().is_valid_numeric(numeric)


def get_currency_by_code(code: str) -> Optional[Currency]:
    return get_currency_registry().get_by_code(code)


def get_currency_by_numeric(numeric: int) -> Optional[Currency]:
    return get_currency_registry().get_by_numeric(numeric)


def get_active_currencies() -> list[Currency]:
    return get_currency_registry().active_currencies()


def get_precious_metal_currencies() -> list[Currency]:
    return get_currency_registry().precious_metals()


def get_supranational_currencies() -> list[Currency]:
    return get_currency_registry().supranational_currencies()


def validate_currency_code(code: str) -> None:
    if not is_valid_currency_code(code):
        raise FieldISOError(value=code, iso=ISO_4217)
