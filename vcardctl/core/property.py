"""Property records: one vCard content line as type, parameters and value.

A Property never changes once built. Updating a property means building a
new one, passing the old ``uuid`` along so the owning collection can swap
it in place::

    updated = Property.parse("FN:Jane Doe", uuid=old.uuid)
"""

import uuid as uuid_module
from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import UUID

from .exceptions import MalformedProperty
from .parameter import Parameter, build_parameters
from .types import PropertyType, keyword_of, resolve
from .values import Value, build_value, default_value


@dataclass(frozen=True)
class Property:
    """A single parsed property line.

    Attributes:
        uuid: Identity token, independent of content
        property_type: The property's type
        value: Typed value; its ``property_type`` matches this property's
        parameters: Parameters in the order they were written
    """

    uuid: UUID
    property_type: PropertyType
    value: Value
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    @classmethod
    def from_type(cls, property_type: PropertyType) -> "Property":
        """Create a property holding the type's default value and no parameters."""
        return cls(
            uuid=uuid_module.uuid4(),
            property_type=property_type,
            value=default_value(property_type),
        )

    @classmethod
    def parse(cls, line: str, uuid: Optional[UUID] = None) -> "Property":
        """Parse a full ``KEYWORD[;PARAM...]:VALUE`` line.

        Only the first ':' separates head from value, and only the first ';'
        of the head starts the parameters, so values such as URIs or
        structured addresses stay intact.

        Args:
            line: The property line; stray CR/LF characters are dropped
            uuid: Identity to carry over; a new one is generated if omitted

        Raises:
            MalformedProperty: If the line has no ':'
            UnknownPropertyType: If the keyword is not a known type
            ParameterError: If the parameters are invalid for the type
            PropertyValueError: If the value is invalid for the type
        """
        text = line.replace("\r", "").replace("\n", "")

        head, sep, value_text = text.partition(":")
        if not sep:
            raise MalformedProperty(line)

        keyword, sep, parameter_text = head.partition(";")
        property_type = resolve(keyword)
        parameters = build_parameters(property_type, parameter_text if sep else None)
        value = build_value(property_type, parameters, value_text)

        return cls(
            uuid=uuid if uuid is not None else uuid_module.uuid4(),
            property_type=property_type,
            value=value,
            parameters=tuple(parameters),
        )

    @classmethod
    def parse_value(
        cls, property_type: PropertyType, value_text: str, uuid: Optional[UUID] = None
    ) -> "Property":
        """Parse just the value part of a property of a known type.

        Goes through :meth:`parse` with a synthesized line, so both entry
        points build identical records.
        """
        return cls.parse(f"{keyword_of(property_type)}:{value_text}", uuid)

    @property
    def keyword(self) -> str:
        return keyword_of(self.property_type)

    def format_parameters(self) -> str:
        """Render the parameters joined by ';' (empty when there are none)."""
        return ";".join(p.to_text() for p in self.parameters)

    def serialize(self) -> str:
        """Render the property back to its canonical line."""
        if self.parameters:
            return f"{self.keyword};{self.format_parameters()}:{self.value.to_text()}"
        return f"{self.keyword}:{self.value.to_text()}"

    def same_content(self, other: "Property") -> bool:
        """Compare type, value and parameters, ignoring identity."""
        return (
            self.property_type is other.property_type
            and self.value == other.value
            and self.parameters == other.parameters
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": str(self.uuid),
            "type": self.keyword,
            "parameters": [{"name": p.name, "value": p.value} for p in self.parameters],
            "value_kind": self.value.kind.value,
            "value": self.value.to_text(),
            "line": self.serialize(),
        }

    def __str__(self) -> str:
        return self.serialize()
