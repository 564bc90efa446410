"""Encoding registry for dictionary metadata.

Dictionaries name their encoding the way the original tooling does
("UTF-8", "ISO-8859-2", "windows-1250", ...). This module maps those names
to Python codecs through an explicit table, so that only the well-known
names are accepted regardless of which extra codecs the interpreter ships.

Usage:
    from dictmeta.charsets import resolve_encoding, register_encoding

    codec = resolve_encoding("iso-8859-2")
    codec.encode("ł")[0]   # b"\\xb3"

    register_encoding("x-polish", "iso8859_2")
"""

import codecs
import logging

from . import config as cfg

logger = logging.getLogger(__name__)

# Registry of known encoding names -> Python codec names
_ENCODINGS: dict[str, str] = {}


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def register_encoding(name: str, codec: str) -> None:
    """Register an encoding name.

    Args:
        name: Encoding name as written in metadata files (case-insensitive).
        codec: Python codec name the encoding maps to.

    Raises:
        LookupError: If the interpreter has no such codec.
    """
    codecs.lookup(codec)
    _ENCODINGS[_normalize_name(name)] = codec


def resolve_encoding(name: str) -> codecs.CodecInfo:
    """Get the codec for a registered encoding name.

    Raises:
        LookupError: If the name is not registered.
    """
    codec = _ENCODINGS.get(_normalize_name(name))
    if codec is None:
        raise LookupError(f"Unknown encoding: {name}")
    return codecs.lookup(codec)


def is_known_encoding(name: str) -> bool:
    """Check whether an encoding name is registered."""
    return _normalize_name(name) in _ENCODINGS


def list_encodings() -> list[str]:
    """List registered encoding names."""
    return sorted(_ENCODINGS.keys())


def _register_builtin() -> None:
    for alias in ("utf-8", "utf8"):
        register_encoding(alias, "utf_8")
    for alias in ("utf-16", "utf16"):
        register_encoding(alias, "utf_16")
    register_encoding("utf-16be", "utf_16_be")
    register_encoding("utf-16le", "utf_16_le")
    for alias in ("us-ascii", "ascii"):
        register_encoding(alias, "ascii")

    # ISO-8859-12 was never published
    for part in (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 15, 16):
        register_encoding(f"iso-8859-{part}", f"iso8859_{part}")
        register_encoding(f"iso8859-{part}", f"iso8859_{part}")
    for part, latin in ((1, 1), (2, 2), (3, 3), (4, 4), (9, 5), (10, 6)):
        register_encoding(f"latin{latin}", f"iso8859_{part}")

    for page in range(1250, 1259):
        register_encoding(f"windows-{page}", f"cp{page}")
        register_encoding(f"cp{page}", f"cp{page}")

    for page in (437, 850, 852, 866):
        register_encoding(f"ibm{page}", f"cp{page}")
        register_encoding(f"cp{page}", f"cp{page}")

    register_encoding("koi8-r", "koi8_r")
    register_encoding("koi8-u", "koi8_u")
    register_encoding("x-mac-roman", "mac_roman")
    register_encoding("macroman", "mac_roman")


def _register_configured() -> None:
    for name, codec in cfg.encoding_aliases().items():
        try:
            register_encoding(name, codec)
        except LookupError:
            logger.warning("Skipping encoding alias %s: no codec %s", name, codec)


_register_builtin()
_register_configured()
