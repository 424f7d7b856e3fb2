"""Property types and the keyword registry for vCard property lines.

Each member's value is its canonical keyword, so the enum is the single
table that both keyword resolution and keyword rendering read from.
"""

from enum import Enum, unique

from .exceptions import UnknownPropertyType


@unique
class PropertyType(Enum):
    """Types of properties in a vCard 4.0 card."""

    # General (RFC 6350 6.1)
    SOURCE = "SOURCE"
    KIND = "KIND"
    XML = "XML"

    # Identification (RFC 6350 6.2, RFC 6474)
    FN = "FN"
    N = "N"
    NICKNAME = "NICKNAME"
    PHOTO = "PHOTO"
    BDAY = "BDAY"
    ANNIVERSARY = "ANNIVERSARY"
    GENDER = "GENDER"
    BIRTHPLACE = "BIRTHPLACE"
    DEATHPLACE = "DEATHPLACE"
    DEATHDATE = "DEATHDATE"

    # Delivery addressing
    ADR = "ADR"

    # Communications
    TEL = "TEL"
    EMAIL = "EMAIL"
    IMPP = "IMPP"
    LANG = "LANG"
    CONTACT_URI = "CONTACT-URI"  # RFC 8605

    # Geographical
    TZ = "TZ"
    GEO = "GEO"

    # Organizational
    TITLE = "TITLE"
    ROLE = "ROLE"
    LOGO = "LOGO"
    ORG = "ORG"
    MEMBER = "MEMBER"
    RELATED = "RELATED"
    ORG_DIRECTORY = "ORG-DIRECTORY"  # RFC 6715

    # Personal information (RFC 6715)
    EXPERTISE = "EXPERTISE"
    HOBBY = "HOBBY"
    INTEREST = "INTEREST"

    # Explanatory
    CATEGORIES = "CATEGORIES"
    NOTE = "NOTE"
    PRODID = "PRODID"
    REV = "REV"
    SOUND = "SOUND"
    UID = "UID"
    CLIENTPIDMAP = "CLIENTPIDMAP"
    URL = "URL"
    VERSION = "VERSION"

    # Security
    KEY = "KEY"

    # Calendar
    FBURL = "FBURL"
    CALADRURI = "CALADRURI"
    CALURI = "CALURI"

    @property
    def keyword(self) -> str:
        """The canonical uppercase keyword for this type."""
        return self.value

    def __str__(self) -> str:
        return self.value


# Uppercase keyword -> type, derived from the enum itself
_BY_KEYWORD: dict[str, PropertyType] = {t.value: t for t in PropertyType}


def resolve(keyword: str) -> PropertyType:
    """Resolve a keyword to its property type, ignoring ASCII case.

    Raises:
        UnknownPropertyType: If no canonical keyword matches
    """
    # Unicode case folding maps e.g. 'ſ' to 'S'
    if not keyword.isascii():
        raise UnknownPropertyType(keyword)
    try:
        return _BY_KEYWORD[keyword.upper()]
    except KeyError:
        raise UnknownPropertyType(keyword) from None


def keyword_of(property_type: PropertyType) -> str:
    """Return the canonical keyword for a property type."""
    return property_type.value


def keywords() -> list[str]:
    """List canonical keywords in declaration order."""
    return list(_BY_KEYWORD)
