# src/kubefree/reporters/table_renderer.py
"""
Aligned, borderless text tables in the style of `kubectl get`.

Cells may be plain strings or styled `rich.text.Text`; widths are measured
in terminal cells so colors and emoji do not break the alignment.
"""

from typing import Iterable, List, Optional, Sequence, Union

from rich.text import Text

Cell = Union[str, Text]

DELIMITER = "\t"
PADDING = 1


def _as_text(cell: Cell) -> Text:
    if isinstance(cell, Text):
        return cell
    return Text(str(cell))


class TableRenderer:
    """
    Collects rows as delimiter-joined lines and expands them into columns
    padded to the widest cell, plus one space, when rendered.
    """

    def __init__(self, header: Optional[Sequence[Cell]] = None):
        self.header: Optional[Text] = self._join(header) if header else None
        self.rows: List[Text] = []

    @staticmethod
    def _join(cells: Sequence[Cell]) -> Text:
        parts = []
        for cell in cells:
            text = _as_text(cell).copy()
            # A delimiter inside a cell would split it into two columns.
            text.plain = text.plain.replace(DELIMITER, " ")
            parts.append(text)
        return Text(DELIMITER).join(parts)

    def add_row(self, cells: Sequence[Cell]):
        self.rows.append(self._join(cells))

    def render(self) -> Text:
        lines = ([self.header] if self.header is not None else []) + self.rows
        if not lines:
            return Text()

        table = [line.split(DELIMITER, allow_blank=True) for line in lines]
        ncols = max(len(cells) for cells in table)
        widths = [0] * ncols
        for cells in table:
            for i, cell in enumerate(cells):
                widths[i] = max(widths[i], cell.cell_len)

        out = Text()
        for cells in table:
            for i, cell in enumerate(cells):
                out.append_text(cell)
                if i < len(cells) - 1:
                    out.append(" " * (widths[i] - cell.cell_len + PADDING))
            out.append("\n")
        return out


def render(header: Optional[Sequence[Cell]], rows: Iterable[Sequence[Cell]]) -> Text:
    """Renders `rows` (and `header` unless None) as an aligned table."""
    table = TableRenderer(header)
    for row in rows:
        table.add_row(row)
    return table.render()


def render_plain(header: Optional[Sequence[Cell]], rows: Iterable[Sequence[Cell]]) -> str:
    """Same as `render`, without styling."""
    return render(header, rows).plain
