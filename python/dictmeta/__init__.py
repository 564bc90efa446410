"""dictmeta - Metadata for FSA stemming dictionaries.

Loads, validates and writes the *.info property file that describes how a
binary stemming dictionary must be read: field separator, encoding,
case handling, conversion and equivalence tables, and sequence encoder.

Core concepts:
    - Every attribute has a property name and a coercion rule
    - Supplied attributes override the schema defaults
    - The separator must encode to exactly one byte

Example:
    fsa.dict.separator=+
    fsa.dict.encoding=UTF-8
    fsa.dict.encoder=SUFFIX
    → separator_byte 0x2B, encoder_type SUFFIX, ignoring punctuation (default)

Usage:
    from dictmeta import store
    from dictmeta.builder import MetadataBuilder

    metadata = store.load_for_dictionary("dicts/pl.dict")
    metadata.separator_byte
    metadata.equivalent_chars

    metadata = MetadataBuilder().separator("+").encoding("UTF-8").encoder("suffix").build()
    store.save(metadata, "dicts/pl.info")
"""

from .errors import (
    LoadError,
    MetadataError,
    ResolutionError,
    ValidationError,
)
from .metadata import DictionaryMetadata, resolve
from .schema import DictionaryAttribute, EncoderType

__version__ = "0.1.0"

__all__ = [
    "DictionaryAttribute",
    "DictionaryMetadata",
    "EncoderType",
    "LoadError",
    "MetadataError",
    "ResolutionError",
    "ValidationError",
    "resolve",
]
