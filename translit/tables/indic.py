"""
Plain-English rule sets for the ISCII-derived Indic Unicode blocks.

Devanagari, Bengali, Gurmukhi and Gujarati share one code point layout
(same offset from the block start = same letter), so a single offset table
produces rules for all of them. Consonants are emitted as clusters:

    क    -> "ka"   (inherent vowel)
    क्   -> "k"    (virama)
    कि   -> "ki"   (vowel sign)
    क़ा  -> "qaa"  (nukta + vowel sign)

Inherent vowels are always written out; word-final schwa deletion would need
positional rules.
"""

import unicodedata

VIRAMA = 0x4D
NUKTA = 0x3C

# Independent vowels
VOWELS = {
    0x05: "a", 0x06: "aa", 0x07: "i", 0x08: "ee", 0x09: "u", 0x0A: "oo",
    0x0B: "ri", 0x0C: "lri", 0x0D: "e", 0x0E: "e", 0x0F: "e", 0x10: "ai",
    0x11: "o", 0x12: "o", 0x13: "o", 0x14: "au", 0x60: "ri", 0x61: "lri",
}

# Dependent vowel signs (matras), replace the inherent "a"
VOWEL_SIGNS = {
    0x3E: "aa", 0x3F: "i", 0x40: "ee", 0x41: "u", 0x42: "oo", 0x43: "ri",
    0x44: "ri", 0x45: "e", 0x46: "e", 0x47: "e", 0x48: "ai", 0x49: "o",
    0x4A: "o", 0x4B: "o", 0x4C: "au", 0x62: "lri", 0x63: "lri",
}

CONSONANTS = {
    # Velars
    0x15: "k", 0x16: "kh", 0x17: "g", 0x18: "gh", 0x19: "ng",
    # Palatals
    0x1A: "ch", 0x1B: "chh", 0x1C: "j", 0x1D: "jh", 0x1E: "ny",
    # Retroflexes
    0x1F: "t", 0x20: "th", 0x21: "d", 0x22: "dh", 0x23: "n",
    # Dentals
    0x24: "t", 0x25: "th", 0x26: "d", 0x27: "dh", 0x28: "n", 0x29: "n",
    # Labials
    0x2A: "p", 0x2B: "ph", 0x2C: "b", 0x2D: "bh", 0x2E: "m",
    # Semivowels
    0x2F: "y", 0x30: "r", 0x31: "r", 0x32: "l", 0x33: "l", 0x34: "zh", 0x35: "v",
    # Sibilants, aspirate
    0x36: "sh", 0x37: "sh", 0x38: "s", 0x39: "h",
}

# Consonant + nukta (decomposed form, what NFC produces)
NUKTA_CONSONANTS = {
    0x15: "q", 0x16: "kh", 0x17: "gh", 0x1C: "z", 0x21: "r", 0x22: "rh",
    0x2B: "f", 0x2F: "y",
}

SIGNS = {
    0x01: "n",  # candrabindu
    0x02: "n",  # anusvara
    0x03: "h",  # visarga
    0x3D: "",   # avagraha
    0x50: "om",
    0x64: ".",  # danda
    0x65: ".",  # double danda
    VIRAMA: "",
    NUKTA: "",
}

DIGITS = {0x66 + i: str(i) for i in range(10)}

# Script-specific letters outside the shared layout.
# "consonants" take vowel signs/virama like any other consonant.
EXTRAS = {
    "devanagari": {
        "consonants": {
            0x58: "q", 0x59: "kh", 0x5A: "gh", 0x5B: "z",
            0x5C: "r", 0x5D: "rh", 0x5E: "f", 0x5F: "y",
        },
        "signs": {},
    },
    "bengali": {
        "consonants": {0x5C: "r", 0x5D: "rh", 0x5F: "y"},
        "signs": {0x4E: "t"},  # khanda ta, never carries a vowel
    },
    "gurmukhi": {
        "consonants": {0x59: "kh", 0x5A: "gh", 0x5B: "z", 0x5C: "r", 0x5E: "f"},
        "signs": {0x70: "n", 0x71: ""},  # tippi, addak
    },
    "gujarati": {
        "consonants": {},
        "signs": {},
    },
}

BLOCKS = {
    "devanagari": 0x0900,
    "bengali": 0x0980,
    "gurmukhi": 0x0A00,
    "gujarati": 0x0A80,
}

LANGUAGES = {
    "devanagari": ["hi", "mr", "ne", "sa", "kok", "mai"],
    "bengali": ["bn", "as"],
    "gurmukhi": ["pa"],
    "gujarati": ["gu"],
}


def _consonant_rules(base: str, latin: str, virama: str, signs: dict[str, str]) -> list[tuple[str, str]]:
    rules = [(base, latin + "a"), (base + virama, latin)]
    rules.extend((base + sign, latin + vowel) for sign, vowel in signs.items())
    return rules


def indic_rules(script: str) -> list[tuple[str, str]]:
    """All (pattern, fragment) rules for one Indic script."""
    start = BLOCKS[script]
    extras = EXTRAS[script]

    def ch(offset: int) -> str:
        return chr(start + offset)

    virama = ch(VIRAMA)
    nukta = ch(NUKTA)
    signs = {ch(o): v for o, v in VOWEL_SIGNS.items()}

    consonants = {ch(o): v for o, v in CONSONANTS.items()}
    consonants.update({ch(o) + nukta: v for o, v in NUKTA_CONSONANTS.items()})
    consonants.update({ch(o): v for o, v in extras["consonants"].items()})
    # NFC splits some precomposed letters (e.g. Gurmukhi U+0A36) into base + nukta;
    # the decomposed spelling must read the same as the precomposed one.
    for letter, latin in list(consonants.items()):
        decomposed = unicodedata.normalize("NFD", letter)
        if decomposed != letter:
            consonants.setdefault(decomposed, latin)

    rules: list[tuple[str, str]] = []
    rules.extend((ch(o), v) for o, v in VOWELS.items())
    for base, latin in consonants.items():
        rules.extend(_consonant_rules(base, latin, virama, signs))
    # A bare vowel sign (no consonant before it) still carries its sound.
    rules.extend(signs.items())
    rules.extend((ch(o), v) for o, v in SIGNS.items())
    rules.extend((ch(o), v) for o, v in extras["signs"].items())
    rules.extend((ch(o), v) for o, v in DIGITS.items())
    return rules
