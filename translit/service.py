import logging
from dataclasses import dataclass, field

from translit.text.engine import CaseMode, TransliterationEngine
from translit.text.normalize import TextNormalizer
from translit.text.registry import RuleRegistry
from translit.text.script_router import LATIN, ScriptRouter
from translit.text.segmenter import Cluster

log = logging.getLogger("translit")


@dataclass(frozen=True)
class TransliterationResult:
    input: str
    output: str
    scripts: list[str]
    vernacular: bool  # False when the text had nothing to transliterate
    table: str | None = None
    clusters: list[Cluster] = field(default_factory=list)


class TransliterationService:
    """
    Picks a rule table for a piece of text and runs the engine with it.

    Without an explicit script or language the text is routed by detected
    script: Latin-only (or script-less) text is returned as-is, anything else
    goes through the combined table of all detectable scripts.
    """

    def __init__(self, registry: RuleRegistry, normalizer: TextNormalizer | None = None,
                 router: ScriptRouter | None = None, case: CaseMode = "preserve"):
        self.registry = registry
        self.normalizer = normalizer or TextNormalizer()
        self.router = router or ScriptRouter()
        self.case = case

    def _select_table(self, scripts: list[str], script: str | None, language: str | None):
        if script:
            return self.registry.table(script)
        if language:
            return self.registry.table(self.registry.script_for_language(language))
        if not any(s != LATIN for s in scripts):
            return None
        return self.registry.combined()

    def transliterate(self, text: str, script: str | None = None, language: str | None = None,
                      case: CaseMode | None = None, with_clusters: bool = False) -> TransliterationResult:
        normalized = self.normalizer.run(text)
        scripts = self.router.detect(normalized)
        table = self._select_table(scripts, script, language)
        if table is None:
            return TransliterationResult(input=text, output=normalized, scripts=scripts, vernacular=False)

        engine = TransliterationEngine(table, case=case or self.case)
        clusters = []
        if with_clusters:
            output, clusters = engine.transliterate_with_clusters(normalized)
        else:
            output = engine.transliterate(normalized)
        log.debug("Transliterated %s chars with table '%s'", len(normalized), table.name)
        return TransliterationResult(
            input=text,
            output=output,
            scripts=scripts,
            vernacular=True,
            table=table.name,
            clusters=clusters,
        )
