import numpy as np

# One code point per slot; surrogatepass keeps lone surrogates intact.
_UNIT_DTYPE = np.dtype("<u4")
_CODEC = "utf-32-le"


class OutputBuffer:
    """Growable array of target code units for a single transliteration call."""

    def __init__(self, capacity: int):
        self._data = np.zeros(max(1, int(capacity)), dtype=_UNIT_DTYPE)
        self._length = 0

    @classmethod
    def for_input(cls, input_length: int, max_fragment_length: int) -> "OutputBuffer":
        """Worst case: every input unit expands to the longest fragment (passthrough emits one unit)."""
        return cls(input_length * max(1, max_fragment_length))

    @property
    def capacity(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self._length

    def append(self, fragment: str) -> None:
        if not fragment:
            return
        units = np.frombuffer(fragment.encode(_CODEC, "surrogatepass"), dtype=_UNIT_DTYPE)
        end = self._length + units.shape[0]
        if end > self.capacity:
            self._grow(end)
        self._data[self._length:end] = units
        self._length = end

    def _grow(self, needed: int) -> None:
        capacity = self.capacity
        while capacity < needed:
            capacity *= 2
        data = np.zeros(capacity, dtype=_UNIT_DTYPE)
        data[: self._length] = self._data[: self._length]
        self._data = data

    def getvalue(self) -> str:
        """Written units as text; unused capacity is dropped (no whitespace trim here)."""
        return self._data[: self._length].tobytes().decode(_CODEC, "surrogatepass")
