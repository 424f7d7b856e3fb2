"""
Sample property lines.

Source: the examples sections of RFC 6350 (vCard 4.0), RFC 6474 (place and
date of birth and death), RFC 6715 (OMA CAB extensions) and RFC 8605
(CONTACT-URI). Lines are given in canonical form, so parsing and
serializing them must give back the same text.
"""

from vcardctl.core.exceptions import (
    MalformedProperty,
    ParameterError,
    PropertyValueError,
    UnknownPropertyType,
)

RFC_LINES = [
    # General
    "SOURCE:ldap://ldap.example.com/cn=Babs%20Jensen,%20o=Babsco,%20c=US",
    "SOURCE:http://directory.example.com/addressbooks/jdoe/Jean%20Dupont.vcf",
    "KIND:individual",
    "KIND:org",
    # Identification
    "FN:Mr. John Q. Public\\, Esq.",
    "N:Stevenson;John;Philip,Paul;Dr.;Jr.,M.D.,A.C.P.",
    "NICKNAME:Robbie",
    "NICKNAME:Jim,Jimmie",
    "NICKNAME;TYPE=work:Boss",
    "PHOTO:http://www.example.com/pub/photos/jqpublic.gif",
    "BDAY:19960415",
    "BDAY:--0415",
    "BDAY;VALUE=text:circa 1800",
    "ANNIVERSARY:19960415",
    "GENDER:M",
    "GENDER:O;intersex",
    "GENDER:;it's complicated",
    "BIRTHPLACE:Babies'R'Us Hospital",
    "BIRTHPLACE;VALUE=uri:http://example.com/hospitals/babiesrus.vcf",
    "BIRTHPLACE;VALUE=uri:geo:46.769307,-71.283079",
    "DEATHPLACE:Aboard the Titanic\\, near Newfoundland",
    "DEATHDATE:19960415",
    "DEATHDATE;VALUE=text:circa 1800",
    # Communications
    'TEL;VALUE=uri;PREF=1;TYPE="voice,home":tel:+1-555-555-5555;ext=5555',
    "TEL;VALUE=uri;TYPE=home:tel:+33-01-23-45-67",
    "EMAIL;TYPE=work:jqpublic@xyz.example.com",
    "EMAIL;PREF=1:jane_doe@example.com",
    "IMPP;PREF=1:xmpp:alice@example.com",
    "LANG;TYPE=work;PREF=1:en",
    "LANG;TYPE=work;PREF=2:fr",
    "CONTACT-URI;PREF=1:mailto:contact@example.com",
    "CONTACT-URI:https://contact.example.com",
    # Geographical
    "TZ:Raleigh/North America",
    "TZ;VALUE=utc-offset:-0500",
    "TZ;VALUE=uri:https://example.com/tz-database/America/New_York",
    "GEO:geo:37.386013,-122.082932",
    # Organizational
    "TITLE:Research Scientist",
    "ROLE:Project Leader",
    "LOGO:http://www.example.com/pub/logos/abccorp.jpg",
    "ORG:ABC\\, Inc.;North American Division;Marketing",
    "MEMBER:urn:uuid:03a0e51f-d1aa-4385-8a53-e29025acd8af",
    "MEMBER:mailto:subscriber1@example.com",
    "RELATED;TYPE=friend:urn:uuid:f81d4fae-7dec-11d0-a765-00a0c91e6bf6",
    "RELATED;TYPE=co-worker;VALUE=text:Please contact my assistant Jane Doe for any inquiries.",
    "ORG-DIRECTORY;INDEX=1:http://directory.mycompany.example.com",
    "ORG-DIRECTORY;PREF=2:ldap://ldap.tech.example/o=Example%20Tech,ou=Engineering",
    # Personal information
    "EXPERTISE;LEVEL=beginner;INDEX=2:chinese literature",
    "EXPERTISE;INDEX=1;LEVEL=expert:chemistry",
    "HOBBY;INDEX=1;LEVEL=high:reading",
    "INTEREST;INDEX=1;LEVEL=medium:rock 'n' roll music",
    # Explanatory
    "CATEGORIES:TRAVEL AGENT",
    "CATEGORIES:INTERNET,IETF,INDUSTRY,INFORMATION TECHNOLOGY",
    "NOTE:This fax number is operational 0800 to 1715\\n EST\\, Mon-Fri.",
    "PRODID:-//ONLINE DIRECTORY//NONSGML Version 1//EN",
    "REV:19951031T222710Z",
    "SOUND:CID:JOHNQPUBLIC.part8.19960229T080000.xyzMail@example.com",
    "UID:urn:uuid:f81d4fae-7dec-11d0-a765-00a0c91e6bf6",
    "CLIENTPIDMAP:1;urn:uuid:3df403f4-5924-4bb7-b077-3c711d9eb34b",
    "URL:http://example.org/restaurant.french/~chezchic.html",
    "VERSION:4.0",
    # Security
    "KEY:http://www.example.com/keys/jdoe.cer",
    "KEY;MEDIATYPE=application/pgp-keys:ftp://example.com/keys/jdoe",
    # Calendar
    "FBURL;PREF=1:http://www.example.com/busy/janedoe",
    "FBURL;MEDIATYPE=text/calendar:ftp://example.com/busy/project-a.ifb",
    "CALADRURI;PREF=1:mailto:janedoe@example.com",
    "CALURI;PREF=1:http://cal.example.com/calA",
    "CALURI;MEDIATYPE=text/calendar:ftp://ftp.example.com/calA.ics",
]

# (input, canonical form)
NON_CANONICAL_LINES = [
    ("fn:Jane", "FN:Jane"),
    ("tel;type=cell:+1-555-0100", "TEL;TYPE=cell:+1-555-0100"),
    ("Org-Directory;pref=1:http://x.example", "ORG-DIRECTORY;PREF=1:http://x.example"),
    ("NOTE:hi\r\n", "NOTE:hi"),
]

# (line, exception raised by Property.parse)
INVALID_LINES = [
    ("FN Jane", MalformedProperty),
    ("", MalformedProperty),
    ("X-CUSTOM:value", UnknownPropertyType),
    ("\u017fource:http://example.com/", UnknownPropertyType),
    ("FOO;TYPE=x:y", UnknownPropertyType),
    ("TEL;PREF=0:+1-555-0100", ParameterError),
    ("TEL;COLOR=red:+1-555-0100", ParameterError),
    ("VERSION;TYPE=x:4.0", ParameterError),
    ("EMAIL;TYPE:jane@example.com", ParameterError),
    ("FN;:Jane", ParameterError),
    ("VERSION:3.0", PropertyValueError),
    ("BDAY:yesterday", PropertyValueError),
    ("ADR:;;Main St", PropertyValueError),
    ("URL:not a uri", PropertyValueError),
    ("EMAIL;VALUE=uri:mailto:jane@example.com", PropertyValueError),
]
