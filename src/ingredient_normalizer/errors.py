"""Errors raised by the ingredient-line parser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorFrame:
    """One step of a failed parse: where a rule was tried and what it was."""

    position: int
    context: str


class IngredientSyntaxError(ValueError):
    """Raised when no grammar alternative matches the input.

    Attributes:
        text: The full input that was parsed.
        frames: Grammar contexts that failed, innermost first.
        verbose: Whether the message carries the full trace.
    """

    def __init__(self, text: str, frames: list[ErrorFrame], verbose: bool = False):
        self.text = text
        self.frames = list(frames)
        self.verbose = verbose
        detail = self.render_trace() if verbose else self.render_summary()
        super().__init__(f"failed to parse '{text}': {detail}")

    @property
    def position(self) -> int:
        """Offset of the innermost failure."""
        return self.frames[0].position if self.frames else 0

    @property
    def excerpt(self) -> str:
        """The unmatched remainder of the input at the innermost failure."""
        return self.text[self.position :]

    def render_summary(self) -> str:
        """Single-line description of the failure."""
        if not self.frames:
            return "no match"
        innermost = self.frames[0]
        sections = [f.context for f in self.frames[1:] if f.context.startswith("in ")]
        where = f" ({', '.join(sections)})" if sections else ""
        return f"expected {innermost.context} at {self.excerpt!r}{where}"

    def render_trace(self) -> str:
        """Multi-line trace with a caret under each failure position."""
        lines = []
        source_line = self.text.splitlines()[0] if self.text else ""
        for index, frame in enumerate(self.frames):
            column = frame.position + 1
            lines.append(f"{index}: at column {column}, {frame.context}:")
            lines.append(source_line)
            lines.append(" " * frame.position + "^")
        return "\n" + "\n".join(lines)
