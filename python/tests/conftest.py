"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dictmeta.schema import DictionaryAttribute


@pytest.fixture
def minimal_attributes():
    """The three required attributes, nothing else."""
    return {
        DictionaryAttribute.SEPARATOR: "+",
        DictionaryAttribute.ENCODING: "UTF-8",
        DictionaryAttribute.ENCODER: "suffix",
    }


@pytest.fixture
def polish_attributes():
    """A fuller attribute set, as a Polish speller dictionary would use."""
    return {
        DictionaryAttribute.SEPARATOR: "+",
        DictionaryAttribute.ENCODING: "iso-8859-2",
        DictionaryAttribute.ENCODER: "PREFIX",
        DictionaryAttribute.CULTURE: "pl_PL",
        DictionaryAttribute.FREQUENCY_INCLUDED: "true",
        DictionaryAttribute.IGNORE_CAMEL_CASE: "false",
        DictionaryAttribute.INPUT_CONVERSION: "ﬁ=fi, ﬂ=fl",
        DictionaryAttribute.OUTPUT_CONVERSION: "fi ﬁ",
        DictionaryAttribute.REPLACEMENT_PAIRS: "rz ż, ż rz, ch h",
        DictionaryAttribute.EQUIVALENT_CHARS: "ł l, ó o, ż z, ż ź",
        DictionaryAttribute.AUTHOR: "Jan Kowalski",
        DictionaryAttribute.LICENSE: "LGPL",
        DictionaryAttribute.CREATION_DATE: "2013-01-01",
    }


@pytest.fixture
def sample_info_content():
    """Sample metadata property file content."""
    return """# Polish dictionary
fsa.dict.separator=+
fsa.dict.encoding=iso-8859-2
fsa.dict.encoder=SUFFIX
fsa.dict.speller.locale=pl_PL
fsa.dict.speller.ignore-diacritics=false
fsa.dict.speller.equivalent-chars=ł l, ó o
fsa.dict.author=Jan Kowalski
"""


@pytest.fixture
def legacy_info_content():
    """Metadata using the deprecated uses-* encoder keys."""
    return """fsa.dict.separator=+
fsa.dict.encoding=UTF-8
fsa.dict.uses-prefixes=true
"""
