"""
Exception hierarchy for the transliteration engine and service.

Table construction and rule loading fail loudly; transliteration calls
themselves only fail when handed something that is not a built table.
"""


class TransliterationError(Exception):
    """Base exception for all transliteration errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class DuplicateKeyError(TransliterationError):
    """Two rules share an identical source pattern."""

    def __init__(self, pattern: str, table: str = ""):
        where = f" in table '{table}'" if table else ""
        super().__init__(f"Duplicate source pattern {pattern!r}{where}", code="duplicate_key")
        self.pattern = pattern
        self.table = table


class InvalidTableError(TransliterationError):
    """Missing, unbuilt or malformed rule table."""

    def __init__(self, message: str = "Rule table is missing or not built"):
        super().__init__(message, code="invalid_table")


class UnknownScriptError(TransliterationError):
    """No table is registered for the requested script or language."""

    def __init__(self, name: str):
        super().__init__(f"No rule table registered for: {name}", code="unknown_script")
        self.name = name


class RuleSourceError(TransliterationError):
    """A rule file could not be read or has the wrong shape."""

    def __init__(self, message: str):
        super().__init__(message, code="rule_source")
