"""Property parameters: splitting, per-type validation and rendering.

A parameter segment is everything between a property's keyword and the
first ':' of its line, e.g. ``TYPE=HOME;PREF=1``. Items are kept in the
order they were written and repeated names are preserved.
"""

import re
from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional

from .exceptions import ParameterError
from .types import PropertyType


@unique
class ParameterType(Enum):
    """Known parameter names (RFC 6350 5, RFC 6474, RFC 6715, RFC 8605)."""

    LANGUAGE = "LANGUAGE"
    VALUE = "VALUE"
    PREF = "PREF"
    ALTID = "ALTID"
    PID = "PID"
    TYPE = "TYPE"
    MEDIATYPE = "MEDIATYPE"
    CALSCALE = "CALSCALE"
    SORT_AS = "SORT-AS"
    GEO = "GEO"
    TZ = "TZ"
    LABEL = "LABEL"
    LEVEL = "LEVEL"
    INDEX = "INDEX"
    CC = "CC"


_BY_NAME: dict[str, ParameterType] = {p.value: p for p in ParameterType}

P = ParameterType

# Parameters shared by most "communication" style properties
_COMMON = frozenset({P.VALUE, P.PID, P.PREF, P.TYPE, P.ALTID})
_MEDIA = _COMMON | {P.MEDIATYPE}
_TEXTUAL = _COMMON | {P.LANGUAGE}
_DATED = frozenset({P.VALUE, P.ALTID, P.CALSCALE, P.LANGUAGE})
_PERSONAL = frozenset({P.LEVEL, P.INDEX, P.LANGUAGE, P.PREF, P.ALTID, P.TYPE})

ALLOWED_PARAMETERS: dict[PropertyType, frozenset[ParameterType]] = {
    PropertyType.SOURCE: frozenset({P.VALUE, P.PID, P.PREF, P.ALTID, P.MEDIATYPE}),
    PropertyType.KIND: frozenset({P.VALUE}),
    PropertyType.XML: frozenset({P.VALUE, P.ALTID}),
    PropertyType.FN: _TEXTUAL,
    PropertyType.N: frozenset({P.VALUE, P.SORT_AS, P.LANGUAGE, P.ALTID}),
    PropertyType.NICKNAME: _TEXTUAL,
    PropertyType.PHOTO: _MEDIA,
    PropertyType.BDAY: _DATED,
    PropertyType.ANNIVERSARY: _DATED,
    PropertyType.GENDER: frozenset({P.VALUE}),
    PropertyType.BIRTHPLACE: frozenset({P.VALUE, P.ALTID, P.LANGUAGE}),
    PropertyType.DEATHPLACE: frozenset({P.VALUE, P.ALTID, P.LANGUAGE}),
    PropertyType.DEATHDATE: _DATED,
    PropertyType.ADR: _TEXTUAL | {P.LABEL, P.GEO, P.TZ, P.CC},
    PropertyType.TEL: _COMMON,
    PropertyType.EMAIL: _COMMON,
    PropertyType.IMPP: _MEDIA,
    PropertyType.LANG: _COMMON,
    PropertyType.CONTACT_URI: frozenset({P.VALUE, P.PREF}),
    PropertyType.TZ: _MEDIA,
    PropertyType.GEO: _MEDIA,
    PropertyType.TITLE: _TEXTUAL,
    PropertyType.ROLE: _TEXTUAL,
    PropertyType.LOGO: _MEDIA | {P.LANGUAGE},
    PropertyType.ORG: _TEXTUAL | {P.SORT_AS},
    PropertyType.MEMBER: frozenset({P.VALUE, P.PID, P.PREF, P.ALTID, P.MEDIATYPE}),
    PropertyType.RELATED: _MEDIA | {P.LANGUAGE},
    PropertyType.ORG_DIRECTORY: frozenset({P.PREF, P.INDEX, P.LANGUAGE, P.PID, P.ALTID, P.TYPE}),
    PropertyType.EXPERTISE: _PERSONAL,
    PropertyType.HOBBY: _PERSONAL,
    PropertyType.INTEREST: _PERSONAL,
    PropertyType.CATEGORIES: _COMMON,
    PropertyType.NOTE: _TEXTUAL,
    PropertyType.PRODID: frozenset({P.VALUE}),
    PropertyType.REV: frozenset({P.VALUE}),
    PropertyType.SOUND: _MEDIA | {P.LANGUAGE},
    PropertyType.UID: frozenset({P.VALUE}),
    PropertyType.CLIENTPIDMAP: frozenset(),
    PropertyType.URL: _MEDIA,
    PropertyType.VERSION: frozenset(),
    PropertyType.KEY: _MEDIA,
    PropertyType.FBURL: _MEDIA,
    PropertyType.CALADRURI: _MEDIA,
    PropertyType.CALURI: _MEDIA,
}

LEVELS: dict[PropertyType, frozenset[str]] = {
    PropertyType.EXPERTISE: frozenset({"beginner", "average", "expert"}),
    PropertyType.HOBBY: frozenset({"high", "medium", "low"}),
    PropertyType.INTEREST: frozenset({"high", "medium", "low"}),
}

# Value type names accepted by VALUE= (RFC 6350 4)
VALUE_TYPE_NAMES = frozenset({
    "text", "uri", "date", "time", "date-time", "date-and-or-time",
    "timestamp", "boolean", "integer", "float", "utc-offset", "language-tag",
})

_PID_RE = re.compile(r"^\d+(\.\d+)?(,\d+(\.\d+)?)*$")
_MEDIATYPE_RE = re.compile(r"^[A-Za-z0-9!#$&^_.+-]+/[A-Za-z0-9!#$&^_.+-]+(;.*)?$")
_X_NAME_RE = re.compile(r"^X-[A-Za-z0-9-]+$", re.IGNORECASE)


@dataclass(frozen=True)
class Parameter:
    """A single NAME=value parameter.

    ``name`` is the canonical uppercase name for known parameters and the
    name as written for extension (X-) parameters. ``value`` is the raw
    value text, quotes included.
    """

    name: str
    value: str

    @property
    def parameter_type(self) -> Optional[ParameterType]:
        return _BY_NAME.get(self.name)

    @property
    def values(self) -> list[str]:
        """Comma-separated items of the value, with surrounding quotes removed."""
        return [_unquote(item) for item in _split_unquoted(self.value, ",")]

    def to_text(self) -> str:
        return f"{self.name}={self.value}"

    def __str__(self) -> str:
        return self.to_text()


def build_parameters(property_type: PropertyType, text: Optional[str]) -> list[Parameter]:
    """Parse and validate the parameter segment of a property line.

    Args:
        property_type: The resolved type of the owning property
        text: Everything between the keyword's ';' and the line's first ':',
              or None when the line has no parameters

    Returns:
        Parameters in the order they were written

    Raises:
        ParameterError: On a malformed item, a name not allowed on
            ``property_type`` or a value that breaks that parameter's rules
    """
    if text is None:
        return []

    allowed = ALLOWED_PARAMETERS[property_type]
    parameters = []
    for item in _split_unquoted(text, ";"):
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ParameterError(item, "expected NAME=VALUE")

        if _X_NAME_RE.match(name):
            parameters.append(Parameter(name, value))
            continue

        parameter_type = _BY_NAME.get(name.upper()) if name.isascii() else None
        if parameter_type is None:
            raise ParameterError(item, f"unknown parameter {name!r}")
        if parameter_type not in allowed:
            raise ParameterError(item, f"not allowed on {property_type.value}")

        _validate(property_type, parameter_type, item, value)
        parameters.append(Parameter(parameter_type.value, value))

    return parameters


def _validate(property_type: PropertyType, parameter_type: ParameterType, item: str, value: str) -> None:
    """Check a known parameter's value against that parameter's rules."""
    if value == "":
        raise ParameterError(item, "empty value")

    if parameter_type is P.PREF:
        if not _is_number(value) or not 1 <= int(value) <= 100:
            raise ParameterError(item, "PREF must be an integer between 1 and 100")

    elif parameter_type is P.INDEX:
        if not _is_number(value) or int(value) < 1:
            raise ParameterError(item, "INDEX must be a positive integer")

    elif parameter_type is P.PID:
        if not _PID_RE.match(value):
            raise ParameterError(item, "PID must be digits with an optional .digits suffix")

    elif parameter_type is P.VALUE:
        lowered = value.lower()
        if lowered not in VALUE_TYPE_NAMES and not lowered.startswith("x-"):
            raise ParameterError(item, f"unknown value type {value!r}")

    elif parameter_type is P.MEDIATYPE:
        if not _MEDIATYPE_RE.match(_unquote(value)):
            raise ParameterError(item, "MEDIATYPE must look like type/subtype")

    elif parameter_type is P.LEVEL:
        if value.lower() not in LEVELS[property_type]:
            choices = ", ".join(sorted(LEVELS[property_type]))
            raise ParameterError(item, f"LEVEL must be one of: {choices}")

    elif parameter_type is P.CALSCALE:
        if value.lower() != "gregorian" and not value.lower().startswith("x-"):
            raise ParameterError(item, "CALSCALE must be 'gregorian' or an x-name")

    elif parameter_type is P.CC:
        if len(value) != 2 or not (value.isascii() and value.isalpha()):
            raise ParameterError(item, "CC must be a two-letter country code")


def _is_number(value: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return value.isascii() and value.isdecimal()


def _split_unquoted(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` except inside double quotes."""
    parts = []
    current = []
    quoted = False
    for ch in text:
        if ch == '"':
            quoted = not quoted
        if ch == separator and not quoted:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value
