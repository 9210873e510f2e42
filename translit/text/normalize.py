import unicodedata


class TextNormalizer:
    def __init__(self, unicode_nfc: bool = True):
        # NFC splits precomposed nukta letters (e.g. U+0958) into base + nukta
        self.unicode_nfc = unicode_nfc

    def run(self, text: str) -> str:
        t = (text or "").strip()
        if not t:
            return t
        if self.unicode_nfc:
            t = unicodedata.normalize("NFC", t)
        t = " ".join(t.split())
        return t
