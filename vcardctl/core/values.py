"""Typed property values.

Every property type has a default value kind, and some accept alternative
kinds selected with a VALUE= parameter (RFC 6350 5.2). Values keep their
escaped wire form, so rendering a parsed value gives back the exact text it
was parsed from; decoded views are available as properties.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Sequence

from .exceptions import PropertyValueError
from .parameter import Parameter, ParameterType
from .types import PropertyType


class ValueKind(Enum):
    """Value grammars a property value can be parsed with."""

    TEXT = "text"
    TEXT_LIST = "text-list"
    URI = "uri"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date-time"
    DATE_AND_OR_TIME = "date-and-or-time"
    TIMESTAMP = "timestamp"
    UTC_OFFSET = "utc-offset"
    LANGUAGE_TAG = "language-tag"
    STRUCTURED = "structured"
    GENDER = "gender"
    KIND = "kind"
    CLIENTPIDMAP = "clientpidmap"
    VERSION = "version"


K = ValueKind

_TEXT = {"text": K.TEXT}
_URI = {"uri": K.URI}
_TEXT_OR_URI = {"text": K.TEXT, "uri": K.URI}
_DATED = {
    "date-and-or-time": K.DATE_AND_OR_TIME,
    "date": K.DATE,
    "time": K.TIME,
    "date-time": K.DATE_TIME,
    "text": K.TEXT,
}

# property type -> (default kind, VALUE= name -> kind)
VALUE_RULES: dict[PropertyType, tuple[ValueKind, dict[str, ValueKind]]] = {
    PropertyType.SOURCE: (K.URI, _URI),
    PropertyType.KIND: (K.KIND, {"text": K.KIND}),
    PropertyType.XML: (K.TEXT, _TEXT),
    PropertyType.FN: (K.TEXT, _TEXT),
    PropertyType.N: (K.STRUCTURED, {"text": K.STRUCTURED}),
    PropertyType.NICKNAME: (K.TEXT_LIST, {"text": K.TEXT_LIST}),
    PropertyType.PHOTO: (K.URI, _URI),
    PropertyType.BDAY: (K.DATE_AND_OR_TIME, _DATED),
    PropertyType.ANNIVERSARY: (K.DATE_AND_OR_TIME, _DATED),
    PropertyType.GENDER: (K.GENDER, {"text": K.GENDER}),
    PropertyType.BIRTHPLACE: (K.TEXT, _TEXT_OR_URI),
    PropertyType.DEATHPLACE: (K.TEXT, _TEXT_OR_URI),
    PropertyType.DEATHDATE: (K.DATE_AND_OR_TIME, _DATED),
    PropertyType.ADR: (K.STRUCTURED, {"text": K.STRUCTURED}),
    PropertyType.TEL: (K.TEXT, _TEXT_OR_URI),
    PropertyType.EMAIL: (K.TEXT, _TEXT),
    PropertyType.IMPP: (K.URI, _URI),
    PropertyType.LANG: (K.LANGUAGE_TAG, {"language-tag": K.LANGUAGE_TAG}),
    PropertyType.CONTACT_URI: (K.URI, _URI),
    PropertyType.TZ: (K.TEXT, {"text": K.TEXT, "uri": K.URI, "utc-offset": K.UTC_OFFSET}),
    PropertyType.GEO: (K.URI, _URI),
    PropertyType.TITLE: (K.TEXT, _TEXT),
    PropertyType.ROLE: (K.TEXT, _TEXT),
    PropertyType.LOGO: (K.URI, _URI),
    PropertyType.ORG: (K.STRUCTURED, {"text": K.STRUCTURED}),
    PropertyType.MEMBER: (K.URI, _URI),
    PropertyType.RELATED: (K.URI, _TEXT_OR_URI),
    PropertyType.ORG_DIRECTORY: (K.URI, _URI),
    PropertyType.EXPERTISE: (K.TEXT, _TEXT),
    PropertyType.HOBBY: (K.TEXT, _TEXT),
    PropertyType.INTEREST: (K.TEXT, _TEXT),
    PropertyType.CATEGORIES: (K.TEXT_LIST, {"text": K.TEXT_LIST}),
    PropertyType.NOTE: (K.TEXT, _TEXT),
    PropertyType.PRODID: (K.TEXT, _TEXT),
    PropertyType.REV: (K.TIMESTAMP, {"timestamp": K.TIMESTAMP}),
    PropertyType.SOUND: (K.URI, _URI),
    PropertyType.UID: (K.URI, _TEXT_OR_URI),
    PropertyType.CLIENTPIDMAP: (K.CLIENTPIDMAP, {}),
    PropertyType.URL: (K.URI, _URI),
    PropertyType.VERSION: (K.VERSION, {}),
    PropertyType.KEY: (K.URI, _TEXT_OR_URI),
    PropertyType.FBURL: (K.URI, _URI),
    PropertyType.CALADRURI: (K.URI, _URI),
    PropertyType.CALURI: (K.URI, _URI),
}

# Component names of structured values; ORG takes any number of units
STRUCTURED_FIELDS: dict[PropertyType, tuple[str, ...]] = {
    PropertyType.N: ("family", "given", "additional", "prefixes", "suffixes"),
    PropertyType.ADR: (
        "po_box", "extended", "street", "locality", "region", "postal_code", "country",
    ),
}

# Default wire text for types whose empty value is not the empty string
DEFAULT_TEXT: dict[PropertyType, str] = {
    PropertyType.VERSION: "4.0",
    PropertyType.KIND: "individual",
    PropertyType.N: ";;;;",
    PropertyType.ADR: ";;;;;;",
    PropertyType.CLIENTPIDMAP: "1;",
}

SUPPORTED_VERSIONS = frozenset({"4.0"})
GENDER_SEXES = frozenset({"", "M", "F", "O", "N", "U"})

_ZONE = r"(?:Z|[+-]\d{2}(?:\d{2})?)"
_DATE = r"(?:\d{4}(?:\d{4})?|\d{4}-\d{2}|--\d{2}(?:\d{2})?|---\d{2})"
_DATE_NOREDUC = r"(?:\d{8}|--\d{4}|---\d{2})"
_TIME = rf"(?:\d{{2}}(?:\d{{2}}(?:\d{{2}})?)?{_ZONE}?|-\d{{2}}(?:\d{{2}})?{_ZONE}?|--\d{{2}}{_ZONE}?)"
_TIME_NOTRUNC = rf"(?:\d{{2}}(?:\d{{2}}(?:\d{{2}})?)?{_ZONE}?)"
_DATE_TIME = rf"(?:{_DATE_NOREDUC}T{_TIME_NOTRUNC})"

DATE_PATTERNS: dict[ValueKind, re.Pattern] = {
    K.DATE: re.compile(rf"^{_DATE}$"),
    K.TIME: re.compile(rf"^{_TIME}$"),
    K.DATE_TIME: re.compile(rf"^{_DATE_TIME}$"),
    K.DATE_AND_OR_TIME: re.compile(rf"^(?:{_DATE_TIME}|{_DATE}|T{_TIME})$"),
}
_TIMESTAMP_RE = re.compile(rf"^\d{{8}}T\d{{6}}{_ZONE}?$")
_UTC_OFFSET_RE = re.compile(r"^[+-]\d{2}(?:\d{2})?$")
_LANGUAGE_TAG_RE = re.compile(r"^[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*$")
_URI_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):\S*$")
_TOKEN_RE = re.compile(r"^[A-Za-z0-9-]+$")


def unescape(text: str) -> str:
    """Decode vCard text escapes (``\\n``, ``\\,``, ``\\;``, ``\\\\``)."""
    out = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        out.append("\n" if nxt in ("n", "N") else nxt)
    return "".join(out)


def split_escaped(text: str, separator: str) -> list[str]:
    """Split on ``separator`` wherever it is not backslash-escaped.

    The pieces keep their escapes untouched.
    """
    parts = []
    current = []
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == "\\":
            current.append(ch)
            escaped = True
        elif ch == separator:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


@dataclass(frozen=True)
class Value(ABC):
    """Base class for a property's value.

    ``property_type`` always matches the owning property's type.
    """

    property_type: PropertyType

    kind: ClassVar[Optional[ValueKind]] = None

    @abstractmethod
    def to_text(self) -> str:
        """Render the value exactly as it appears after the line's ':'."""

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class TextValue(Value):
    """A single text value, stored escaped."""

    raw: str = ""
    kind = K.TEXT

    @property
    def text(self) -> str:
        return unescape(self.raw)

    def to_text(self) -> str:
        return self.raw


@dataclass(frozen=True)
class TextListValue(Value):
    """Comma-separated text items (CATEGORIES, NICKNAME)."""

    items: tuple[str, ...] = ()
    kind = K.TEXT_LIST

    @property
    def texts(self) -> list[str]:
        return [unescape(item) for item in self.items]

    def to_text(self) -> str:
        return ",".join(self.items)


@dataclass(frozen=True)
class UriValue(Value):
    """A URI; empty when the property carries no reference yet."""

    uri: str = ""
    kind = K.URI

    @property
    def scheme(self) -> Optional[str]:
        match = _URI_RE.match(self.uri)
        return match.group(1).lower() if match else None

    def to_text(self) -> str:
        return self.uri


@dataclass(frozen=True)
class DateAndOrTimeValue(Value):
    """A date, time, date-time or date-and-or-time in basic ISO 8601 form."""

    raw: str = ""
    value_kind: ValueKind = K.DATE_AND_OR_TIME

    @property
    def kind(self) -> ValueKind:
        return self.value_kind

    def to_text(self) -> str:
        return self.raw


@dataclass(frozen=True)
class TimestampValue(Value):
    """A complete date-time, e.g. ``19961022T140000Z`` (REV)."""

    raw: str = ""
    kind = K.TIMESTAMP

    def to_text(self) -> str:
        return self.raw


@dataclass(frozen=True)
class UtcOffsetValue(Value):
    """A UTC offset such as ``-0500`` (TZ with VALUE=utc-offset)."""

    raw: str = ""
    kind = K.UTC_OFFSET

    def to_text(self) -> str:
        return self.raw


@dataclass(frozen=True)
class LanguageTagValue(Value):
    """An RFC 5646 language tag (LANG)."""

    tag: str = ""
    kind = K.LANGUAGE_TAG

    def to_text(self) -> str:
        return self.tag


@dataclass(frozen=True)
class StructuredValue(Value):
    """Semicolon-separated components, each a comma-separated list.

    Used by N, ADR and ORG. Components keep their escapes.
    """

    components: tuple[tuple[str, ...], ...] = (("",),)
    kind = K.STRUCTURED

    def field(self, name: str) -> list[str]:
        """Decoded items of a named component (e.g. ``"street"`` on ADR)."""
        names = STRUCTURED_FIELDS.get(self.property_type, ())
        if name not in names:
            raise KeyError(f"{self.property_type.value} has no component {name!r}")
        return [unescape(item) for item in self.components[names.index(name)]]

    def as_dict(self) -> dict[str, list[str]]:
        names = STRUCTURED_FIELDS.get(self.property_type)
        if names is None:
            return {str(i): [unescape(item) for item in comp] for i, comp in enumerate(self.components)}
        return {name: self.field(name) for name in names}

    def to_text(self) -> str:
        return ";".join(",".join(component) for component in self.components)


@dataclass(frozen=True)
class GenderValue(Value):
    """Sex component plus optional free-form identity text."""

    sex: str = ""
    identity: Optional[str] = None
    kind = K.GENDER

    def to_text(self) -> str:
        if self.identity is None:
            return self.sex
        return f"{self.sex};{self.identity}"


@dataclass(frozen=True)
class KindValue(Value):
    """The KIND of object a card describes."""

    name: str = "individual"
    kind = K.KIND

    def to_text(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClientPidMapValue(Value):
    """A PID source identifier mapped to a URI."""

    source_id: str = "1"
    uri: str = ""
    kind = K.CLIENTPIDMAP

    def to_text(self) -> str:
        return f"{self.source_id};{self.uri}"


@dataclass(frozen=True)
class VersionValue(Value):
    """The vCard version this card conforms to."""

    version: str = "4.0"
    kind = K.VERSION

    def to_text(self) -> str:
        return self.version


def _parse_text(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    return TextValue(pt, text)


def _parse_text_list(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text == "":
        return TextListValue(pt)
    return TextListValue(pt, tuple(split_escaped(text, ",")))


def _parse_uri(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text and not _URI_RE.match(text):
        raise PropertyValueError(pt, text, "expected a URI (scheme:...)")
    return UriValue(pt, text)


def _parse_date(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text and not DATE_PATTERNS[kind].match(text):
        raise PropertyValueError(pt, text, f"expected a {kind.value} value")
    return DateAndOrTimeValue(pt, text, kind)


def _parse_timestamp(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text and not _TIMESTAMP_RE.match(text):
        raise PropertyValueError(pt, text, "expected a timestamp (YYYYMMDDThhmmss[zone])")
    return TimestampValue(pt, text)


def _parse_utc_offset(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text and not _UTC_OFFSET_RE.match(text):
        raise PropertyValueError(pt, text, "expected a UTC offset (+hh[mm] or -hh[mm])")
    return UtcOffsetValue(pt, text)


def _parse_language_tag(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text and not _LANGUAGE_TAG_RE.match(text):
        raise PropertyValueError(pt, text, "expected a language tag")
    return LanguageTagValue(pt, text)


def _parse_structured(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    components = tuple(tuple(split_escaped(c, ",")) for c in split_escaped(text, ";"))
    names = STRUCTURED_FIELDS.get(pt)
    if names is not None and len(components) != len(names):
        raise PropertyValueError(
            pt, text, f"expected {len(names)} components, got {len(components)}"
        )
    return StructuredValue(pt, components)


def _parse_gender(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    parts = split_escaped(text, ";")
    sex = parts[0]
    if sex.upper() not in GENDER_SEXES:
        raise PropertyValueError(pt, text, "sex must be one of M, F, O, N, U or empty")
    identity = ";".join(parts[1:]) if len(parts) > 1 else None
    return GenderValue(pt, sex, identity)


def _parse_kind(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if not _TOKEN_RE.match(text):
        raise PropertyValueError(pt, text, "expected individual, group, org, location or an x-name")
    return KindValue(pt, text)


def _parse_clientpidmap(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    source_id, sep, uri = text.partition(";")
    if not sep:
        raise PropertyValueError(pt, text, "expected <source id>;<uri>")
    if not (source_id.isascii() and source_id.isdecimal()) or int(source_id) < 1:
        raise PropertyValueError(pt, text, "source id must be a positive integer")
    if uri and not _URI_RE.match(uri):
        raise PropertyValueError(pt, text, "expected a URI after the source id")
    return ClientPidMapValue(pt, source_id, uri)


def _parse_version(pt: PropertyType, kind: ValueKind, text: str) -> Value:
    if text not in SUPPORTED_VERSIONS:
        raise PropertyValueError(pt, text, "only version 4.0 is supported")
    return VersionValue(pt, text)


_PARSERS: dict[ValueKind, Callable[[PropertyType, ValueKind, str], Value]] = {
    K.TEXT: _parse_text,
    K.TEXT_LIST: _parse_text_list,
    K.URI: _parse_uri,
    K.DATE: _parse_date,
    K.TIME: _parse_date,
    K.DATE_TIME: _parse_date,
    K.DATE_AND_OR_TIME: _parse_date,
    K.TIMESTAMP: _parse_timestamp,
    K.UTC_OFFSET: _parse_utc_offset,
    K.LANGUAGE_TAG: _parse_language_tag,
    K.STRUCTURED: _parse_structured,
    K.GENDER: _parse_gender,
    K.KIND: _parse_kind,
    K.CLIENTPIDMAP: _parse_clientpidmap,
    K.VERSION: _parse_version,
}


def select_kind(property_type: PropertyType, parameters: Sequence[Parameter], text: str = "") -> ValueKind:
    """Pick the value kind for a property from its VALUE= parameter, if any.

    Raises:
        PropertyValueError: If VALUE= is repeated or names a kind the
            property type does not accept
    """
    default, alternatives = VALUE_RULES[property_type]
    requested = [p.value for p in parameters if p.parameter_type is ParameterType.VALUE]
    if not requested:
        return default
    if len(requested) > 1:
        raise PropertyValueError(property_type, text, "VALUE parameter given more than once")

    name = requested[0].lower()
    if name not in alternatives:
        raise PropertyValueError(
            property_type, text, f"VALUE={requested[0]} is not allowed on {property_type.value}"
        )
    return alternatives[name]


def build_value(property_type: PropertyType, parameters: Sequence[Parameter], text: str) -> Value:
    """Parse a property's value text.

    Args:
        property_type: The resolved property type
        parameters: The property's parameters (VALUE= selects the grammar)
        text: Everything after the line's first ':'

    Raises:
        PropertyValueError: If the text does not match the selected grammar
    """
    kind = select_kind(property_type, parameters, text)
    return _PARSERS[kind](property_type, kind, text)


def default_value(property_type: PropertyType) -> Value:
    """Return the value a freshly created property of this type starts with."""
    kind = VALUE_RULES[property_type][0]
    return _PARSERS[kind](property_type, kind, DEFAULT_TEXT.get(property_type, ""))
