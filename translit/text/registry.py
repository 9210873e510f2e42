"""Loads rule tables (built-in and from JSON files) and serves them by script or language."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from translit.errors import RuleSourceError, UnknownScriptError
from translit.tables import BUILTIN_SCRIPTS
from translit.text.rule_table import RuleTable
from translit.text.script_router import SCRIPT_RANGES

log = logging.getLogger("translit")

COMBINED = "auto"


@dataclass(frozen=True)
class RuleFile:
    script: str
    languages: tuple[str, ...]
    rules: list[tuple[str, str]]


def load_rules_file(path: str | Path) -> RuleFile:
    """
    Reads one rule file:

        {"script": "devanagari", "languages": ["hi"], "rules": [["क", "ka"], ...]}

    Rules are a list of pairs rather than an object so that repeated patterns
    reach the table builder (and fail there) instead of being collapsed by JSON.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RuleSourceError(f"Cannot read rule file {path}: {e}") from e

    if not isinstance(data, dict):
        raise RuleSourceError(f"{path}: top level must be an object")
    script = data.get("script") or path.stem
    languages = data.get("languages") or []
    rules = data.get("rules")
    if not isinstance(script, str):
        raise RuleSourceError(f"{path}: 'script' must be a string")
    if not isinstance(languages, list) or not all(isinstance(x, str) for x in languages):
        raise RuleSourceError(f"{path}: 'languages' must be a list of strings")
    if not isinstance(rules, list):
        raise RuleSourceError(f"{path}: 'rules' must be a list of [pattern, fragment] pairs")
    pairs = []
    for rule in rules:
        if not isinstance(rule, list) or len(rule) != 2:
            raise RuleSourceError(f"{path}: bad rule {rule!r}, expected [pattern, fragment]")
        pairs.append((rule[0], rule[1]))
    return RuleFile(script=script.lower(), languages=tuple(x.lower() for x in languages), rules=pairs)


@dataclass(frozen=True)
class RegistrySnapshot:
    tables: Mapping[str, RuleTable]
    languages: Mapping[str, str]  # language code -> script
    combined: RuleTable | None = None
    sources: Mapping[str, str] = field(default_factory=dict)  # script -> "builtin" | file path


class RuleRegistry:
    """
    Owns every rule table of the process.

    All tables live in one immutable snapshot. reload() builds a complete new
    snapshot and only then swaps the reference, so a call that already picked
    up a table never sees a half-updated set.
    """

    def __init__(self, rules_dir: str | Path | None = None, builtin: bool = True):
        self.rules_dir = Path(rules_dir).expanduser() if rules_dir else None
        self.builtin = builtin
        self._snapshot = RegistrySnapshot(tables=MappingProxyType({}), languages=MappingProxyType({}))

    def _build_snapshot(self) -> RegistrySnapshot:
        tables: dict[str, RuleTable] = {}
        languages: dict[str, str] = {}
        sources: dict[str, str] = {}

        if self.builtin:
            for script, spec in BUILTIN_SCRIPTS.items():
                tables[script] = RuleTable.build(spec.rules(), name=script)
                sources[script] = "builtin"
                for lang in spec.languages:
                    languages[lang] = script

        if self.rules_dir is not None:
            if not self.rules_dir.is_dir():
                raise RuleSourceError(f"Rules directory not found: {self.rules_dir}")
            for path in sorted(self.rules_dir.glob("*.json")):
                rule_file = load_rules_file(path)
                if rule_file.script in tables:
                    log.info("Rule file %s overrides table '%s'", path, rule_file.script)
                tables[rule_file.script] = RuleTable.build(rule_file.rules, name=rule_file.script)
                sources[rule_file.script] = str(path)
                for lang in rule_file.languages:
                    languages[lang] = rule_file.script

        # Auto mode only covers tables named after a detectable script; custom
        # tables (e.g. an alternative Devanagari scheme) are used by name.
        auto = [t for s, t in tables.items() if s in SCRIPT_RANGES]
        combined = RuleTable.merge(auto, name=COMBINED) if auto else None
        return RegistrySnapshot(
            tables=MappingProxyType(tables),
            languages=MappingProxyType(languages),
            combined=combined,
            sources=MappingProxyType(sources),
        )

    def load(self) -> RegistrySnapshot:
        snapshot = self._build_snapshot()
        self._snapshot = snapshot
        for script, table in snapshot.tables.items():
            log.info("Rule table loaded: script=%s rules=%s K=%s source=%s",
                     script, len(table), table.max_pattern_length, snapshot.sources[script])
        return snapshot

    def reload(self) -> RegistrySnapshot:
        """Rebuild everything; on error the previous tables stay active."""
        try:
            return self.load()
        except Exception:
            log.warning("Rule reload failed, keeping %s previously loaded tables", len(self._snapshot.tables))
            raise

    @property
    def snapshot(self) -> RegistrySnapshot:
        return self._snapshot

    def scripts(self) -> list[str]:
        return sorted(self._snapshot.tables)

    def table(self, script: str) -> RuleTable:
        key = (script or "").strip().lower()
        if key == COMBINED:
            return self.combined()
        table = self._snapshot.tables.get(key)
        if table is None:
            raise UnknownScriptError(script)
        return table

    def script_for_language(self, language: str) -> str:
        script = self._snapshot.languages.get((language or "").strip().lower())
        if script is None:
            raise UnknownScriptError(language)
        return script

    def combined(self) -> RuleTable:
        combined = self._snapshot.combined
        if combined is None:
            raise UnknownScriptError(COMBINED)
        return combined

    def languages_for(self, script: str) -> list[str]:
        return sorted(lang for lang, s in self._snapshot.languages.items() if s == script)
