"""
vcardctl - vCard property line codec

Parses vCard 4.0 property lines into immutable records (type, ordered
parameters, typed value) and serializes them back to canonical text.
"""

__version__ = "0.1.0"

from .core.property import Property
from .core.types import PropertyType

__all__ = ["Property", "PropertyType", "__version__"]
