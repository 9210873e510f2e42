from collections.abc import Iterator
from dataclasses import dataclass

from translit.text.rule_table import RuleTable


@dataclass(frozen=True)
class Cluster:
    start: int
    length: int
    output: str
    matched: bool  # False for passthrough units

    @property
    def end(self) -> int:
        return self.start + self.length


class ClusterSegmenter:
    """Splits input into maximal clusters known to the table, left to right."""

    def __init__(self, table: RuleTable):
        self.table = table

    def segment(self, text: str) -> Iterator[Cluster]:
        """
        Lazily yields clusters covering `text` with no gaps or overlaps.

        Each call starts again from offset 0. Units the table does not know
        come out as length-1 clusters carrying the unit itself.
        """
        table = self.table
        k = table.max_pattern_length
        n = len(text)
        offset = 0
        while offset < n:
            hit = table.lookup(text, offset, k)
            if hit is None:
                yield Cluster(offset, 1, text[offset], matched=False)
                offset += 1
                continue
            length, fragment = hit
            yield Cluster(offset, length, fragment, matched=True)
            offset += length
