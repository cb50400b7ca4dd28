"""Single buffer line with its tab-expanded rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_TAB_STOP = 8


@dataclass(slots=True)
class Row:
    """Raw characters plus the derived rendering drawn on screen.

    ``render`` is rebuilt by :meth:`update` whenever ``chars`` changes, so it
    is never stale for longer than a single mutation call.
    """

    chars: str = ""
    tab_stop: int = DEFAULT_TAB_STOP
    render: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.update()

    @property
    def len(self) -> int:
        return len(self.chars)

    @property
    def rlen(self) -> int:
        return len(self.render)

    def update(self) -> None:
        out: list[str] = []
        column = 0
        for char in self.chars:
            if char == "\t":
                width = self.tab_stop - (column % self.tab_stop)
                out.append(" " * width)
                column += width
            else:
                out.append(char)
                column += 1
        self.render = "".join(out)

    def set_chars(self, chars: str) -> None:
        self.chars = chars
        self.update()

    def cx_to_rx(self, cx: int) -> int:
        """Render column of raw column ``cx``."""

        rx = 0
        for char in self.chars[:cx]:
            if char == "\t":
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx


__all__ = ["Row", "DEFAULT_TAB_STOP"]
