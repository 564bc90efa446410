"""Reading and writing dictionary metadata (*.info) files.

A dictionary "pl.dict" keeps its metadata next to it in "pl.info":

    fsa.dict.separator=+
    fsa.dict.encoding=iso-8859-2
    fsa.dict.encoder=SUFFIX
    fsa.dict.speller.locale=pl_PL

Older files declared the encoder through fsa.dict.uses-suffixes,
fsa.dict.uses-prefixes and fsa.dict.uses-infixes. Those files are rejected
with the fsa.dict.encoder value they should use instead.

Usage:
    from dictmeta import store

    metadata = store.load_for_dictionary("dicts/pl.dict")
    with open("copy.info", "w", encoding="utf-8") as f:
        store.write(metadata, f)
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Mapping, TextIO

from . import config as cfg
from . import properties
from .errors import DeprecatedEncoderKeysError, MissingEncoderAttributeError
from .metadata import DictionaryMetadata, resolve
from .schema import DictionaryAttribute, EncoderType, parse_boolean

logger = logging.getLogger(__name__)

METADATA_FILE_EXTENSION = "info"

USES_SUFFIXES = "fsa.dict.uses-suffixes"
USES_PREFIXES = "fsa.dict.uses-prefixes"
USES_INFIXES = "fsa.dict.uses-infixes"

# Legacy key -> value assumed when the key is absent
LEGACY_ENCODER_KEYS = {
    USES_SUFFIXES: True,
    USES_PREFIXES: False,
    USES_INFIXES: False,
}


def expected_metadata_file_name(dictionary_file: Path | str) -> str:
    """Get the metadata file name for a dictionary file.

    The last extension is replaced with METADATA_FILE_EXTENSION, or the
    extension is appended if the name has none: "pl.dict" -> "pl.info".
    """
    name = Path(dictionary_file).name
    stem, dot, _ = name.rpartition(".")
    if not dot:
        stem = name
    return f"{stem}.{METADATA_FILE_EXTENSION}"


def expected_metadata_location(dictionary_file: Path | str) -> Path:
    """Get the metadata file path: the expected name in the dictionary's directory."""
    dictionary_file = Path(dictionary_file)
    return dictionary_file.parent / expected_metadata_file_name(dictionary_file)


def infer_legacy_encoder(props: Mapping[str, str]) -> EncoderType:
    """Work out the encoder a file with legacy uses-* keys meant.

    Unparsable legacy values count as absent.
    """
    flags = {}
    for key, default in LEGACY_ENCODER_KEYS.items():
        value = props.get(key)
        parsed = parse_boolean(value) if value is not None else None
        flags[key] = default if parsed is None else parsed

    if flags[USES_INFIXES]:
        return EncoderType.INFIX
    if flags[USES_PREFIXES]:
        return EncoderType.PREFIX
    if flags[USES_SUFFIXES]:
        return EncoderType.SUFFIX
    return EncoderType.NONE


def _check_encoder(props: Mapping[str, str]) -> None:
    encoder_key = DictionaryAttribute.ENCODER.property_name
    if encoder_key in props:
        return

    inferred = infer_legacy_encoder(props)
    if not any(key in props for key in LEGACY_ENCODER_KEYS):
        raise MissingEncoderAttributeError(encoder_key, str(inferred))

    logger.warning(
        "Metadata uses deprecated encoder keys; migrate to %s=%s",
        encoder_key,
        inferred,
    )
    raise DeprecatedEncoderKeysError(encoder_key, str(inferred))


def _text_lines(stream: BinaryIO | TextIO) -> list[str]:
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode(cfg.property_encoding())
    if data.startswith("\ufeff"):
        data = data[1:]
    return io.StringIO(data).readlines()


def read_attributes(stream: BinaryIO | TextIO) -> dict[DictionaryAttribute, str]:
    """Read raw attributes from a metadata property stream.

    Args:
        stream: Binary stream (decoded as UTF-8) or text stream. It is not
            closed.

    Returns:
        Attribute -> property string, in file order.

    Raises:
        MissingEncoderAttributeError: If no encoder is declared.
        DeprecatedEncoderKeysError: If only legacy encoder keys are present.
        UnknownAttributeNameError: If a property name is not recognized.
    """
    props = properties.parse(_text_lines(stream))
    _check_encoder(props)

    return {
        DictionaryAttribute.from_property_name(name): value
        for name, value in props.items()
    }


def read(stream: BinaryIO | TextIO) -> DictionaryMetadata:
    """Read and resolve dictionary metadata from a property stream."""
    return resolve(read_attributes(stream))


def write(metadata: DictionaryMetadata, writer: TextIO) -> None:
    """Write every resolved attribute, defaults included.

    Args:
        metadata: Metadata to write.
        writer: Text stream. It is not closed.
    """
    props = {
        attribute.property_name: metadata.attributes[attribute]
        for attribute in DictionaryAttribute
        if attribute in metadata.attributes
    }
    properties.dump(props, writer, comment=type(metadata).__name__)


def load(path: Path | str) -> DictionaryMetadata:
    """Load dictionary metadata from a file."""
    path = Path(path)
    logger.debug("Reading metadata from %s", path)
    with open(path, "rb") as f:
        return read(f)


def save(metadata: DictionaryMetadata, path: Path | str) -> None:
    """Save dictionary metadata to a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Writing metadata to %s", path)
    with open(path, "w", encoding=cfg.property_encoding(), newline="\n") as f:
        write(metadata, f)


def load_for_dictionary(dictionary_file: Path | str) -> DictionaryMetadata:
    """Load the metadata file that accompanies a dictionary file."""
    return load(expected_metadata_location(dictionary_file))
