from dataclasses import dataclass
import re

# Unicode blocks per script; Latin covers basic + Latin-1/Extended letters
SCRIPT_RANGES = {
    "devanagari": r"\u0900-\u097F\uA8E0-\uA8FF",
    "bengali": r"\u0980-\u09FF",
    "gurmukhi": r"\u0A00-\u0A7F",
    "gujarati": r"\u0A80-\u0AFF",
    "cyrillic": r"\u0400-\u04FF",
    "latin": r"A-Za-z\u00C0-\u024F",
}
SCRIPT_RES = {script: re.compile(f"[{chars}]") for script, chars in SCRIPT_RANGES.items()}
TOKEN_RE = re.compile(
    "|".join(f"[{chars}]+" for chars in SCRIPT_RANGES.values())
    + "|[^" + "".join(SCRIPT_RANGES.values()) + "]+"
)

LATIN = "latin"


@dataclass(frozen=True)
class ScriptSegment:
    text: str
    script: str | None  # None when the text has no letters of any known script


class ScriptRouter:
    """Detects source scripts and splits mixed text into per-script runs."""

    @staticmethod
    def detect_token_script(token: str) -> str | None:
        for script, regex in SCRIPT_RES.items():
            if regex.search(token):
                return script
        return None

    def split(self, text: str) -> list[ScriptSegment]:
        raw = text or ""
        if not raw.strip():
            return []

        tokens = TOKEN_RE.findall(raw)
        segments: list[ScriptSegment] = []
        current_script: str | None = None
        current_parts: list[str] = []

        for token in tokens:
            token_script = self.detect_token_script(token)
            if token_script is None:
                current_parts.append(token)
                continue

            if current_script is None:
                current_script = token_script
                current_parts.append(token)
                continue

            if token_script == current_script:
                current_parts.append(token)
                continue

            segment_text = "".join(current_parts).strip()
            if segment_text:
                segments.append(ScriptSegment(text=segment_text, script=current_script))

            current_script = token_script
            current_parts = [token]

        segment_text = "".join(current_parts).strip()
        if segment_text:
            segments.append(ScriptSegment(text=segment_text, script=current_script))

        return segments

    def detect(self, text: str) -> list[str]:
        """Distinct scripts in order of first appearance."""
        seen: list[str] = []
        for segment in self.split(text):
            if segment.script is not None and segment.script not in seen:
                seen.append(segment.script)
        return seen
