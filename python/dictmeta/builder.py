"""Fluent builder for dictionary metadata.

Usage:
    from dictmeta.builder import MetadataBuilder
    from dictmeta.schema import EncoderType

    metadata = (
        MetadataBuilder()
        .separator("+")
        .encoding("iso-8859-2")
        .encoder(EncoderType.SUFFIX)
        .culture("pl_PL")
        .equivalent_chars({"ł": ["l"], "ó": ["o"]})
        .build()
    )
"""

from typing import Iterable, Mapping

from .errors import (
    InvalidEquivalenceCharError,
    MalformedConversionPairError,
    MalformedReplacementPairError,
)
from .metadata import DictionaryMetadata, resolve
from .schema import DictionaryAttribute, EncoderType, split_entries

_PAIR_ERRORS = {
    DictionaryAttribute.INPUT_CONVERSION: MalformedConversionPairError,
    DictionaryAttribute.OUTPUT_CONVERSION: MalformedConversionPairError,
    DictionaryAttribute.REPLACEMENT_PAIRS: MalformedReplacementPairError,
    DictionaryAttribute.EQUIVALENT_CHARS: InvalidEquivalenceCharError,
}


def _format_pair(attribute: DictionaryAttribute, source: str, target: str) -> str:
    # Members with whitespace need "from=to"; everything else uses "from to"
    if any(c.isspace() for c in source + target):
        entry = f"{source}={target}"
    else:
        entry = f"{source} {target}"

    if split_entries(entry) != [(source, target)]:
        raise _PAIR_ERRORS[attribute](
            attribute, entry, "members cannot contain ',' or mix '=' with whitespace"
        )
    return entry


def _join_pairs(
    attribute: DictionaryAttribute, pairs: Mapping[str, str | Iterable[str]]
) -> str:
    entries = []
    for source, targets in pairs.items():
        if isinstance(targets, str):
            targets = [targets]
        for target in targets:
            entries.append(_format_pair(attribute, source, target))
    return ", ".join(entries)


class MetadataBuilder:
    """Collects attribute values as property strings."""

    def __init__(self):
        self._attributes: dict[DictionaryAttribute, str] = {}

    def _set(self, attribute: DictionaryAttribute, value: str) -> "MetadataBuilder":
        self._attributes[attribute] = value
        return self

    def _flag(self, attribute: DictionaryAttribute, value: bool) -> "MetadataBuilder":
        return self._set(attribute, "true" if value else "false")

    def separator(self, char: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.SEPARATOR, char)

    def encoding(self, name: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.ENCODING, name)

    def encoder(self, encoder: EncoderType | str) -> "MetadataBuilder":
        if isinstance(encoder, EncoderType):
            encoder = encoder.name
        return self._set(DictionaryAttribute.ENCODER, encoder)

    def culture(self, name: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.CULTURE, name)

    def frequency_included(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.FREQUENCY_INCLUDED, value)

    def ignore_punctuation(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.IGNORE_PUNCTUATION, value)

    def ignore_numbers(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.IGNORE_NUMBERS, value)

    def ignore_camel_case(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.IGNORE_CAMEL_CASE, value)

    def ignore_all_uppercase(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.IGNORE_ALL_UPPERCASE, value)

    def ignore_diacritics(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.IGNORE_DIACRITICS, value)

    def convert_case(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.CONVERT_CASE, value)

    def support_run_on_words(self, value: bool = True) -> "MetadataBuilder":
        return self._flag(DictionaryAttribute.RUN_ON_WORDS, value)

    def _pairs(self, attribute: DictionaryAttribute, pairs: Mapping) -> "MetadataBuilder":
        return self._set(attribute, _join_pairs(attribute, pairs))

    def input_conversion(self, pairs: Mapping[str, str]) -> "MetadataBuilder":
        return self._pairs(DictionaryAttribute.INPUT_CONVERSION, pairs)

    def output_conversion(self, pairs: Mapping[str, str]) -> "MetadataBuilder":
        return self._pairs(DictionaryAttribute.OUTPUT_CONVERSION, pairs)

    def replacement_pairs(self, pairs: Mapping[str, Iterable[str]]) -> "MetadataBuilder":
        return self._pairs(DictionaryAttribute.REPLACEMENT_PAIRS, pairs)

    def equivalent_chars(self, chars: Mapping[str, Iterable[str]]) -> "MetadataBuilder":
        return self._pairs(DictionaryAttribute.EQUIVALENT_CHARS, chars)

    def author(self, author: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.AUTHOR, author)

    def license(self, license: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.LICENSE, license)

    def creation_date(self, date: str) -> "MetadataBuilder":
        return self._set(DictionaryAttribute.CREATION_DATE, date)

    def to_dict(self) -> dict[DictionaryAttribute, str]:
        """Get a copy of the collected attributes."""
        return dict(self._attributes)

    def build(self) -> DictionaryMetadata:
        """Resolve the collected attributes into DictionaryMetadata."""
        return resolve(self._attributes)
