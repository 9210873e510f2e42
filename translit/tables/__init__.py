"""Built-in rule sets, keyed by script name."""
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from translit.tables import cyrillic, indic


@dataclass(frozen=True)
class BuiltinScript:
    languages: tuple[str, ...]
    rules: Callable[[], list[tuple[str, str]]]


BUILTIN_SCRIPTS: dict[str, BuiltinScript] = {
    script: BuiltinScript(tuple(indic.LANGUAGES[script]), partial(indic.indic_rules, script))
    for script in indic.BLOCKS
}
BUILTIN_SCRIPTS["cyrillic"] = BuiltinScript(tuple(cyrillic.LANGUAGES), cyrillic.cyrillic_rules)
