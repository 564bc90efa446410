"""Resolved dictionary metadata.

resolve() merges supplied attributes over the schema defaults, coerces
every value, checks that required attributes are present and that the
separator fits in a single byte of the dictionary encoding. The result is
an immutable DictionaryMetadata; nothing is returned on failure.

Example:
    metadata = resolve({
        DictionaryAttribute.SEPARATOR: "+",
        DictionaryAttribute.ENCODING: "UTF-8",
        DictionaryAttribute.ENCODER: "suffix",
    })
    metadata.separator_byte           # 0x2B
    metadata.is_ignoring_punctuation  # True (default)
"""

import codecs
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from .errors import (
    MissingRequiredAttributesError,
    SeparatorNotSingleByteError,
    UnroutedAttributeError,
)
from .locales import Culture, default_culture
from .schema import (
    BOOLEAN_ATTRIBUTES,
    DEFAULT_ATTRIBUTES,
    REQUIRED_ATTRIBUTES,
    DictionaryAttribute,
    EncoderType,
)

if TYPE_CHECKING:
    from .builder import MetadataBuilder

logger = logging.getLogger(__name__)

_TABLE_FIELDS = (
    "input_conversion_pairs",
    "output_conversion_pairs",
    "replacement_pairs",
    "equivalent_chars",
)


@dataclass(frozen=True)
class DictionaryMetadata:
    """Typed, validated metadata of an FSA dictionary.

    Only resolve() (or DictionaryMetadata.from_attributes()) should build
    instances; the constructor re-checks the separator fields.
    """

    separator_byte: int
    separator_char: str
    encoding: str
    codec: codecs.CodecInfo = field(compare=False, repr=False)
    culture: Culture
    encoder_type: EncoderType
    boolean_attributes: Mapping[DictionaryAttribute, bool]
    input_conversion_pairs: Mapping[str, str]
    output_conversion_pairs: Mapping[str, str]
    replacement_pairs: Mapping[str, tuple[str, ...]]
    equivalent_chars: Mapping[str, tuple[str, ...]]
    attributes: Mapping[DictionaryAttribute, str] = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.codec, codecs.CodecInfo):
            raise TypeError(f"codec must be a codecs.CodecInfo, not {self.codec!r}")
        if len(self.separator_char) != 1 or not 0 <= self.separator_byte <= 0xFF:
            raise ValueError(
                f"Invalid separator: {self.separator_char!r} / {self.separator_byte!r}"
            )
        if self.encode(self.separator_char) != bytes([self.separator_byte]):
            raise ValueError(
                f"Separator byte {self.separator_byte:#04x} does not encode "
                f"{self.separator_char!r} in {self.encoding}"
            )

    def __hash__(self) -> int:
        return hash(frozenset(self.attributes.items()))

    @classmethod
    def from_attributes(
        cls, attributes: Mapping[DictionaryAttribute, str]
    ) -> "DictionaryMetadata":
        """Create an instance from an attribute mapping."""
        return resolve(attributes)

    @staticmethod
    def builder() -> "MetadataBuilder":
        """A shortcut returning a new MetadataBuilder."""
        from .builder import MetadataBuilder

        return MetadataBuilder()

    def encode(self, text: str) -> bytes:
        """Encode text with the dictionary encoding."""
        return self.codec.encode(text)[0]

    def decode(self, data: bytes) -> str:
        """Decode bytes with the dictionary encoding."""
        return self.codec.decode(data)[0]

    @property
    def is_frequency_included(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.FREQUENCY_INCLUDED]

    @property
    def is_ignoring_punctuation(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.IGNORE_PUNCTUATION]

    @property
    def is_ignoring_numbers(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.IGNORE_NUMBERS]

    @property
    def is_ignoring_camel_case(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.IGNORE_CAMEL_CASE]

    @property
    def is_ignoring_all_uppercase(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.IGNORE_ALL_UPPERCASE]

    @property
    def is_ignoring_diacritics(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.IGNORE_DIACRITICS]

    @property
    def is_converting_case(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.CONVERT_CASE]

    @property
    def is_supporting_run_on_words(self) -> bool:
        return self.boolean_attributes[DictionaryAttribute.RUN_ON_WORDS]


def resolve(attributes: Mapping[DictionaryAttribute, str]) -> DictionaryMetadata:
    """Validate and convert an attribute mapping.

    Supplied values override DEFAULT_ATTRIBUTES. Resolution stops at the
    first invalid attribute.

    Args:
        attributes: Attribute -> property string.

    Returns:
        DictionaryMetadata with every attribute converted.

    Raises:
        ValidationError: If an attribute value cannot be converted.
        MissingRequiredAttributesError: If a required attribute is absent.
        SeparatorNotSingleByteError: If the separator does not encode to
            exactly one byte.
    """
    merged = {**DEFAULT_ATTRIBUTES, **attributes}
    missing = set(REQUIRED_ATTRIBUTES)

    fields: dict = {}
    booleans: dict[DictionaryAttribute, bool] = {}

    for attribute, text in merged.items():
        missing.discard(attribute)

        value = attribute.from_string(text)
        if attribute is DictionaryAttribute.ENCODING:
            fields["encoding"] = text
            fields["codec"] = value
        elif attribute is DictionaryAttribute.SEPARATOR:
            fields["separator_char"] = value
        elif attribute is DictionaryAttribute.CULTURE:
            fields["culture"] = value
        elif attribute is DictionaryAttribute.ENCODER:
            fields["encoder_type"] = value
        elif attribute is DictionaryAttribute.INPUT_CONVERSION:
            fields["input_conversion_pairs"] = value
        elif attribute is DictionaryAttribute.OUTPUT_CONVERSION:
            fields["output_conversion_pairs"] = value
        elif attribute is DictionaryAttribute.REPLACEMENT_PAIRS:
            fields["replacement_pairs"] = value
        elif attribute is DictionaryAttribute.EQUIVALENT_CHARS:
            fields["equivalent_chars"] = value
        elif attribute in BOOLEAN_ATTRIBUTES:
            booleans[attribute] = value
        elif attribute in (
            DictionaryAttribute.AUTHOR,
            DictionaryAttribute.LICENSE,
            DictionaryAttribute.CREATION_DATE,
        ):
            # Validation only
            pass
        else:
            raise UnroutedAttributeError(attribute)

    if missing:
        raise MissingRequiredAttributesError(missing)

    separator = fields["separator_char"]
    codec = fields["codec"]
    try:
        encoded = codec.encode(separator)[0]
    except UnicodeEncodeError as e:
        raise SeparatorNotSingleByteError(separator, fields["encoding"]) from e
    if len(encoded) != 1:
        raise SeparatorNotSingleByteError(separator, fields["encoding"])

    fields.setdefault("culture", default_culture())
    for name in _TABLE_FIELDS:
        fields.setdefault(name, MappingProxyType({}))

    metadata = DictionaryMetadata(
        separator_byte=encoded[0],
        boolean_attributes=MappingProxyType(booleans),
        attributes=MappingProxyType(merged),
        **fields,
    )
    logger.debug(
        "Resolved metadata: encoding=%s, encoder=%s, separator=%r",
        metadata.encoding,
        metadata.encoder_type,
        metadata.separator_char,
    )
    return metadata
