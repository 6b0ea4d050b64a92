from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open `[start, end)` character offsets into one source buffer."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid text range [{self.start}, {self.end})")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        return TextRange(offset, offset)

    @staticmethod
    def up_to(end: int) -> "TextRange":
        return TextRange(0, end)

    def __len__(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Smallest range spanning both ranges."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def slice(self, source: str) -> str:
        return source[self.start : self.end]
