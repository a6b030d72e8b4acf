from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Sequence

from gas_efficiency.models.coin import ResultRow
from gas_efficiency.services.formatting import SPACER, format_integer, format_number, format_percent


LINE_BREAK = "<br />"

TABLE_COLUMNS = ("denom", "gas_price", "amount", "gas_units", "efficiency")


@dataclass
class ComparisonView:
    """
    Output regions of one comparison run.

    The status region only ever grows; the table region is swapped out as a whole.
    """

    status_html: str = ""
    table_html: str = ""

    def append_status(self, text: str, *, line_break: bool = False) -> None:
        self.status_html += escape(text) + (LINE_BREAK if line_break else "")

    def replace_table(self, markup: str) -> None:
        self.table_html = markup

    @property
    def status_lines(self) -> list[str]:
        lines = self.status_html.split(LINE_BREAK)
        if lines and lines[-1] == "":
            lines.pop()
        return lines


def _cell(content: str, *, numeric: bool = False) -> str:
    align = ' align="right"' if numeric else ""
    return f"<td{align}>{content}</td>"


def render_row(row: ResultRow, separator: str = SPACER) -> str:
    cells = [
        _cell(escape(row.denom)),
        _cell(escape(format_number(row.gas_price))),
        _cell(format_integer(row.amount, separator), numeric=True),
        _cell(format_integer(row.gas_units, separator), numeric=True),
        _cell(escape(format_percent(row.efficiency)), numeric=True),
    ]
    return "<tr>" + "".join(cells) + "</tr>"


def render_table(rows: Sequence[ResultRow], separator: str = SPACER) -> str:
    header = "".join(f'<th scope="col">{name}</th>' for name in TABLE_COLUMNS)
    body = "\n".join(render_row(row, separator) for row in rows)
    return (
        "<table>\n"
        f"<thead><tr>{header}</tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>"
    )
