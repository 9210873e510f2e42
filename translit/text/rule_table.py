"""Immutable source-pattern → target-fragment mapping with longest-match lookup."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from translit.errors import DuplicateKeyError, InvalidTableError

Rule = tuple[str, str]


class RuleTable:
    """
    Context-free rule table.

    Keys are sequences of source code units (1..K long). At any offset the
    longest key that matches wins, so "क्" beats "क" when both are present.
    Positional rules (word-final forms etc.) are not expressible here.
    """

    __slots__ = ("name", "_rules", "_lengths", "max_pattern_length", "max_fragment_length")

    def __init__(self, rules: Mapping[str, str], name: str = ""):
        self.name = name
        self._rules = MappingProxyType(dict(rules))
        # Distinct key lengths, longest first; lookup only probes lengths that exist.
        self._lengths = tuple(sorted({len(k) for k in self._rules}, reverse=True))
        self.max_pattern_length = self._lengths[0] if self._lengths else 0
        self.max_fragment_length = max((len(v) for v in self._rules.values()), default=0)

    @classmethod
    def build(cls, rules: Iterable[Rule] | Mapping[str, str], name: str = "") -> RuleTable:
        """
        Build a table from (source_pattern, target_fragment) pairs.

        Raises DuplicateKeyError if two rules share a source pattern and
        InvalidTableError for empty or non-string patterns/fragments.
        Nothing is returned on failure, so a half-built table is never visible.
        """
        if rules is None:
            raise InvalidTableError("Rules must be a sequence of (pattern, fragment) pairs")
        pairs = rules.items() if isinstance(rules, Mapping) else rules

        mapping: dict[str, str] = {}
        for rule in pairs:
            try:
                pattern, fragment = rule
            except (TypeError, ValueError):
                raise InvalidTableError(f"Rule must be a (pattern, fragment) pair, got {rule!r}") from None
            if not isinstance(pattern, str) or not pattern:
                raise InvalidTableError(f"Source pattern must be a non-empty string, got {pattern!r}")
            if not isinstance(fragment, str):
                raise InvalidTableError(f"Target fragment for {pattern!r} must be a string, got {fragment!r}")
            if pattern in mapping:
                raise DuplicateKeyError(pattern, table=name)
            mapping[pattern] = fragment
        return cls(mapping, name=name)

    @classmethod
    def merge(cls, tables: Iterable[RuleTable], name: str = "") -> RuleTable:
        """Union of several tables; a pattern present in two of them is a DuplicateKeyError."""
        pairs: list[Rule] = []
        for table in tables:
            pairs.extend(table.items())
        return cls.build(pairs, name=name)

    def lookup(self, window: str, offset: int, max_len: int | None = None) -> tuple[int, str] | None:
        """
        Longest pattern matching `window` at `offset`, at most `max_len` units.

        Returns (length, fragment) or None when no length 1..K matches.
        """
        remaining = len(window) - offset
        limit = remaining if max_len is None else min(max_len, remaining)
        rules = self._rules
        for length in self._lengths:
            if length > limit:
                continue
            fragment = rules.get(window[offset:offset + length])
            if fragment is not None:
                return length, fragment
        return None

    def items(self):
        return self._rules.items()

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._rules

    def __getitem__(self, pattern: str) -> str:
        return self._rules[pattern]

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable(name={self.name!r}, rules={len(self)}, K={self.max_pattern_length})"


def build_rule_table(rules: Iterable[Rule] | Mapping[str, str], name: str = "") -> RuleTable:
    return RuleTable.build(rules, name=name)
