"""Tests for input normalization before segmentation."""
from translit.text.normalize import TextNormalizer


def test_strip_and_collapse_whitespace():
    n = TextNormalizer()
    assert n.run("  नमस्ते \n\t दुनिया  ") == "नमस्ते दुनिया"


def test_empty():
    assert TextNormalizer().run("") == ""
    assert TextNormalizer().run(None) == ""


def test_nfc_decomposes_precomposed_nukta():
    assert TextNormalizer().run("\u0958") == "\u0915\u093c"


def test_nfc_disabled_keeps_code_points():
    assert TextNormalizer(unicode_nfc=False).run("\u0958") == "\u0958"


def test_nfc_composes_cyrillic():
    # и + combining breve -> й
    assert TextNormalizer().run("\u0438\u0306") == "\u0439"
