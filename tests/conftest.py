import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from transcript_annotator.core import LexiconService, PhoneticLexicon, SlangLexicon


ENGLISH_PRONUNCIATIONS = {
    "cat": "K AE1 T",
    "hat": "HH AE1 T",
    "rat": "R AE1 T",
    "dog": "D AO1 G",
    "fish": "F IH1 SH",
    "bird": "B ER1 D",
    "light": "L AY1 T",
    "night": "N AY1 T",
    "hello": "HH AH0 L OW1",
    "world": "W ER1 L D",
    "this": "DH IH1 S",
    "is": "IH1 Z",
    "a": "AH0",
    "test": "T EH1 S T",
    "lit": "L IH1 T",
    "fam": "F AE1 M",
    "am": "AE1 M",
    "hmm": "HH M",
}

PORTUGUESE_PRONUNCIATIONS = {
    "amor": "a m o r",
    "flor": "f l o r",
    "mar": "m a r",
    "pá": "p a",
}


@pytest.fixture
def phonetic_lexicon():
    return PhoneticLexicon(
        {"en_us": ENGLISH_PRONUNCIATIONS, "pt_PT": PORTUGUESE_PRONUNCIATIONS}
    )


@pytest.fixture
def slang_lexicon():
    return SlangLexicon({"en_us": {"lit", "fam", "gonna"}, "pt_PT": {"fixe", "pá"}})


@pytest.fixture
def lexicons(phonetic_lexicon, slang_lexicon):
    """In-memory lexicons for en_us and pt_PT (en_uk deliberately absent)."""

    return LexiconService(phonetic=phonetic_lexicon, slang=slang_lexicon)
