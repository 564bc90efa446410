"""Locale (culture) resolution for dictionary metadata.

Locale names are written language[-Script][-REGION], with "-" or "_":
"pl_PL", "pl-PL", "de", "zh-Hant-TW", "es-419". The language must appear
in the interpreter's locale alias table; the script is four letters and
the region two letters or three digits. Names are resolved without
touching the process locale.
"""

import locale
import logging
from dataclasses import dataclass
from typing import Optional

from . import config as cfg

logger = logging.getLogger(__name__)

_default_culture: Optional["Culture"] = None
_languages: Optional[frozenset[str]] = None


@dataclass(frozen=True)
class Culture:
    """A resolved locale identifier."""

    language: str                   # e.g., "pl"
    territory: Optional[str] = None  # e.g., "PL", "419"
    script: Optional[str] = None     # e.g., "Hant"

    def _parts(self) -> list[str]:
        return [p for p in (self.language, self.script, self.territory) if p]

    @property
    def name(self) -> str:
        """Underscore-joined name, e.g. "pl_PL" or "zh_Hant_TW"."""
        return "_".join(self._parts())

    @property
    def tag(self) -> str:
        """BCP 47 style tag, e.g. "pl-PL" or "zh-Hant-TW"."""
        return "-".join(self._parts())

    def __str__(self) -> str:
        return self.name


def _known_languages() -> frozenset[str]:
    global _languages
    if _languages is None:
        # Alias keys look like "pl", "pl_pl", "sr_rs@latin", "en_us.utf8"
        _languages = frozenset(
            key.split(".")[0].split("@")[0].split("_")[0]
            for key in locale.locale_alias
        )
    return _languages


def _split(name: str) -> tuple[str, Optional[str], Optional[str]]:
    # Drop ".encoding" and "@modifier" suffixes: "pl_PL.UTF-8@euro" -> "pl_PL"
    base = name.strip().split(".")[0].split("@")[0]
    parts = base.replace("-", "_").split("_")
    language = parts.pop(0).lower()

    script = None
    if parts and len(parts[0]) == 4 and parts[0].isalpha():
        script = parts.pop(0).title()

    territory = None
    if parts and (
        (len(parts[0]) == 2 and parts[0].isalpha())
        or (len(parts[0]) == 3 and parts[0].isdigit())
    ):
        territory = parts.pop(0).upper()

    if parts:
        raise LookupError(f"Unknown locale: {name}")
    return language, territory, script


def resolve_culture(name: str) -> Culture:
    """Resolve a locale name to a Culture.

    Raises:
        LookupError: If the name is malformed or the language is unknown.
    """
    language, territory, script = _split(name)
    if (
        not language.isascii()
        or not language.isalpha()
        or language in ("c", "posix")
        or language not in _known_languages()
    ):
        raise LookupError(f"Unknown locale: {name}")

    return Culture(language=language, territory=territory, script=script)


def default_culture() -> Culture:
    """Get the process default culture.

    Falls back to the configured default_culture when the process locale
    is unset or is the C/POSIX locale.
    """
    global _default_culture
    if _default_culture is not None:
        return _default_culture

    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None

    try:
        _default_culture = resolve_culture(name) if name else None
    except LookupError:
        logger.debug("Process locale %s is not a known culture", name)
        _default_culture = None

    if _default_culture is None:
        _default_culture = resolve_culture(cfg.default_culture())
    return _default_culture
