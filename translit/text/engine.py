from collections.abc import Iterable
from typing import Literal

from translit.errors import InvalidTableError
from translit.text.buffer import OutputBuffer
from translit.text.rule_table import RuleTable
from translit.text.segmenter import Cluster, ClusterSegmenter

CaseMode = Literal["preserve", "lower", "upper"]
CASE_MODES = ("preserve", "lower", "upper")


def _check_table(table) -> RuleTable:
    if table is None:
        raise InvalidTableError()
    if not isinstance(table, RuleTable):
        raise InvalidTableError(f"Expected a RuleTable, got {type(table).__name__}")
    return table


def _apply_case(text: str, case: str) -> str:
    if case == "lower":
        return text.lower()
    if case == "upper":
        return text.upper()
    return text


class TransliterationEngine:
    """
    Applies one rule table to input text.

    Holds only the (immutable) table and the case mode, so a single engine
    can serve concurrent calls.
    """

    def __init__(self, table: RuleTable, case: CaseMode = "preserve"):
        self.table = _check_table(table)
        if case not in CASE_MODES:
            raise ValueError(f"Unknown case mode: {case!r}. Expected one of {CASE_MODES}")
        self.case = case
        self._segmenter = ClusterSegmenter(self.table)

    def transliterate(self, text: str, case: CaseMode | None = None) -> str:
        if not text:
            return ""
        return self._render(self._segmenter.segment(text), len(text), case)

    def transliterate_with_clusters(self, text: str, case: CaseMode | None = None) -> tuple[str, list[Cluster]]:
        """Output together with the clusters it was assembled from; the text is segmented once."""
        clusters = self.clusters(text)
        if not clusters:
            return "", clusters
        return self._render(clusters, len(text), case), clusters

    def clusters(self, text: str) -> list[Cluster]:
        return list(self._segmenter.segment(text or ""))

    def _render(self, clusters: Iterable[Cluster], input_length: int, case: CaseMode | None) -> str:
        buf = OutputBuffer.for_input(input_length, self.table.max_fragment_length)
        for cluster in clusters:
            buf.append(cluster.output)
        out = buf.getvalue().strip()
        return _apply_case(out, case or self.case)


def transliterate(text: str, table: RuleTable, case: CaseMode = "preserve") -> str:
    """One-shot transliteration; raises InvalidTableError before doing any work if `table` is not built."""
    return TransliterationEngine(table, case=case).transliterate(text)
