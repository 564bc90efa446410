"""Attribute schema for FSA dictionary metadata.

Each DictionaryAttribute has a fixed property name (as written in the
*.info file) and a coercion rule turning the property string into a typed
value. Coercion failures raise a ValidationError subclass naming the
attribute and the offending value.

Multi-valued attributes share one entry syntax: entries separated by
commas, each entry a pair written "from=to" or "from to".

Example:
    fsa.dict.input-conversion=ﬁ=fi, ﬂ=fl
    fsa.dict.speller.equivalent-chars=ł l, ę e, ó o
    fsa.dict.speller.replacement-pairs=rz ż, ż rz, ch h
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from . import charsets, locales
from .errors import (
    InvalidBooleanError,
    InvalidEquivalenceCharError,
    InvalidSeparatorError,
    MalformedConversionPairError,
    MalformedReplacementPairError,
    UnknownAttributeNameError,
    UnknownCultureError,
    UnknownEncoderTypeError,
    UnknownEncodingError,
    UnroutedAttributeError,
)


class EncoderType(Enum):
    """Sequence encoder used for stem-to-form transformations."""

    NONE = "none"
    SUFFIX = "suffix"
    PREFIX = "prefix"
    INFIX = "infix"

    @classmethod
    def from_string(cls, value: str) -> Optional["EncoderType"]:
        """Get EncoderType from its (case-insensitive) name."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.name


class DictionaryAttribute(Enum):
    """Attributes recognized in dictionary metadata, keyed by property name."""

    SEPARATOR = "fsa.dict.separator"
    ENCODING = "fsa.dict.encoding"
    ENCODER = "fsa.dict.encoder"
    CULTURE = "fsa.dict.speller.locale"
    FREQUENCY_INCLUDED = "fsa.dict.frequency-included"
    IGNORE_PUNCTUATION = "fsa.dict.speller.ignore-punctuation"
    IGNORE_NUMBERS = "fsa.dict.speller.ignore-numbers"
    IGNORE_CAMEL_CASE = "fsa.dict.speller.ignore-camel-case"
    IGNORE_ALL_UPPERCASE = "fsa.dict.speller.ignore-all-uppercase"
    IGNORE_DIACRITICS = "fsa.dict.speller.ignore-diacritics"
    CONVERT_CASE = "fsa.dict.speller.convert-case"
    RUN_ON_WORDS = "fsa.dict.speller.runon-words"
    INPUT_CONVERSION = "fsa.dict.input-conversion"
    OUTPUT_CONVERSION = "fsa.dict.output-conversion"
    REPLACEMENT_PAIRS = "fsa.dict.speller.replacement-pairs"
    EQUIVALENT_CHARS = "fsa.dict.speller.equivalent-chars"
    AUTHOR = "fsa.dict.author"
    LICENSE = "fsa.dict.license"
    CREATION_DATE = "fsa.dict.created"

    @property
    def property_name(self) -> str:
        """Name of the attribute in a metadata property file."""
        return self.value

    @classmethod
    def from_property_name(cls, name: str) -> "DictionaryAttribute":
        """Get the attribute for a property name.

        Raises:
            UnknownAttributeNameError: If no attribute uses this name.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownAttributeNameError(name) from None

    def from_string(self, value: str) -> Any:
        """Convert a property string to this attribute's typed value.

        Raises:
            ValidationError: If the value is not valid for this attribute.
        """
        coerce = _COERCERS.get(self)
        if coerce is None:
            raise UnroutedAttributeError(self)
        return coerce(self, value)

    def __str__(self) -> str:
        return self.property_name


BOOLEAN_ATTRIBUTES = frozenset({
    DictionaryAttribute.FREQUENCY_INCLUDED,
    DictionaryAttribute.IGNORE_PUNCTUATION,
    DictionaryAttribute.IGNORE_NUMBERS,
    DictionaryAttribute.IGNORE_CAMEL_CASE,
    DictionaryAttribute.IGNORE_ALL_UPPERCASE,
    DictionaryAttribute.IGNORE_DIACRITICS,
    DictionaryAttribute.CONVERT_CASE,
    DictionaryAttribute.RUN_ON_WORDS,
})

REQUIRED_ATTRIBUTES = frozenset({
    DictionaryAttribute.SEPARATOR,
    DictionaryAttribute.ENCODER,
    DictionaryAttribute.ENCODING,
})

DEFAULT_ATTRIBUTES: Mapping[DictionaryAttribute, str] = MappingProxyType({
    DictionaryAttribute.FREQUENCY_INCLUDED: "false",
    DictionaryAttribute.IGNORE_PUNCTUATION: "true",
    DictionaryAttribute.IGNORE_NUMBERS: "true",
    DictionaryAttribute.IGNORE_CAMEL_CASE: "true",
    DictionaryAttribute.IGNORE_ALL_UPPERCASE: "true",
    DictionaryAttribute.IGNORE_DIACRITICS: "true",
    DictionaryAttribute.CONVERT_CASE: "true",
    DictionaryAttribute.RUN_ON_WORDS: "true",
})

BOOLEAN_LITERALS: Mapping[str, bool] = MappingProxyType({
    "true": True, "yes": True, "on": True,
    "false": False, "no": False, "off": False,
})

ENTRY_SEPARATOR = re.compile(r",\s*")


def parse_boolean(value: str) -> Optional[bool]:
    """Parse a boolean literal, or return None if it is not one."""
    return BOOLEAN_LITERALS.get(value.strip().lower())


def split_entries(value: str) -> list[tuple[str, str] | None]:
    """Split a pair list into (from, to) tuples.

    An entry is read as "from=to" when splitting on "=" gives two non-empty
    members, otherwise as "from to". Entries that are neither come back as
    None, so callers can report them with their own error type.
    """
    if not value.strip():
        return []

    pairs: list[tuple[str, str] | None] = []
    for entry in ENTRY_SEPARATOR.split(value.strip()):
        parts = [p.strip() for p in entry.split("=")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            parts = entry.split()
        if len(parts) == 2:
            pairs.append((parts[0], parts[1]))
        else:
            pairs.append(None)
    return pairs


def _to_boolean(attribute: DictionaryAttribute, value: str) -> bool:
    result = parse_boolean(value)
    if result is None:
        raise InvalidBooleanError(attribute, value)
    return result


def _to_separator(attribute: DictionaryAttribute, value: str) -> str:
    if len(value) != 1:
        raise InvalidSeparatorError(attribute, value)
    if "\ud800" <= value <= "\udfff":
        raise InvalidSeparatorError(
            attribute, value, "cannot be part of a surrogate pair"
        )
    return value


def _to_encoding(attribute: DictionaryAttribute, value: str):
    try:
        return charsets.resolve_encoding(value)
    except LookupError as e:
        raise UnknownEncodingError(attribute, value) from e


def _to_culture(attribute: DictionaryAttribute, value: str) -> locales.Culture:
    try:
        return locales.resolve_culture(value)
    except LookupError as e:
        raise UnknownCultureError(attribute, value) from e


def _to_encoder(attribute: DictionaryAttribute, value: str) -> EncoderType:
    encoder = EncoderType.from_string(value)
    if encoder is None:
        raise UnknownEncoderTypeError(
            attribute, value, "expected one of: none, suffix, prefix, infix"
        )
    return encoder


def _to_conversion(attribute: DictionaryAttribute, value: str) -> Mapping[str, str]:
    conversion: dict[str, str] = {}
    for pair in split_entries(value):
        if pair is None:
            raise MalformedConversionPairError(attribute, value)
        source, target = pair
        if source in conversion:
            raise MalformedConversionPairError(
                attribute, value, f"duplicate entry for {source!r}"
            )
        conversion[source] = target
    return MappingProxyType(conversion)


def _to_replacements(
    attribute: DictionaryAttribute, value: str
) -> Mapping[str, tuple[str, ...]]:
    replacements: dict[str, tuple[str, ...]] = {}
    for pair in split_entries(value):
        if pair is None:
            raise MalformedReplacementPairError(attribute, value)
        source, target = pair
        replacements[source] = replacements.get(source, ()) + (target,)
    return MappingProxyType(replacements)


def _to_equivalents(
    attribute: DictionaryAttribute, value: str
) -> Mapping[str, tuple[str, ...]]:
    equivalents: dict[str, tuple[str, ...]] = {}
    for pair in split_entries(value):
        if pair is None or len(pair[0]) != 1 or len(pair[1]) != 1:
            raise InvalidEquivalenceCharError(attribute, value)
        source, target = pair
        equivalents[source] = equivalents.get(source, ()) + (target,)
    return MappingProxyType(equivalents)


def _to_text(attribute: DictionaryAttribute, value: str) -> str:
    return value


_COERCERS: dict[DictionaryAttribute, Callable[[DictionaryAttribute, str], Any]] = {
    DictionaryAttribute.SEPARATOR: _to_separator,
    DictionaryAttribute.ENCODING: _to_encoding,
    DictionaryAttribute.ENCODER: _to_encoder,
    DictionaryAttribute.CULTURE: _to_culture,
    DictionaryAttribute.INPUT_CONVERSION: _to_conversion,
    DictionaryAttribute.OUTPUT_CONVERSION: _to_conversion,
    DictionaryAttribute.REPLACEMENT_PAIRS: _to_replacements,
    DictionaryAttribute.EQUIVALENT_CHARS: _to_equivalents,
    DictionaryAttribute.AUTHOR: _to_text,
    DictionaryAttribute.LICENSE: _to_text,
    DictionaryAttribute.CREATION_DATE: _to_text,
    **{attribute: _to_boolean for attribute in BOOLEAN_ATTRIBUTES},
}
