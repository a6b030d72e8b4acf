from __future__ import annotations

from gas_efficiency.models.coin import ResultRow
from gas_efficiency.services.formatting import MINUS_SIGN
from gas_efficiency.services.presentation import ComparisonView, render_row, render_table


def _row(denom: str = "uusd", **overrides) -> ResultRow:
    values = dict(denom=denom, amount=1500000, gas_price=0.15, gas_units=10000000, efficiency=0.0)
    values.update(overrides)
    return ResultRow(**values)


def test_status_is_appended_not_replaced():
    view = ComparisonView()
    view.append_status("querying gas prices... ")
    view.append_status("done!", line_break=True)
    view.append_status("querying exchange rates... ")
    view.append_status("done!", line_break=True)

    assert view.status_html == (
        "querying gas prices... done!<br />querying exchange rates... done!<br />"
    )
    assert view.status_lines == ["querying gas prices... done!", "querying exchange rates... done!"]


def test_status_text_is_escaped():
    view = ComparisonView()
    view.append_status("failed: <script>", line_break=True)
    assert view.status_html == "failed: &lt;script&gt;<br />"


def test_table_is_replaced_wholesale():
    view = ComparisonView()
    view.replace_table("<table>first</table>")
    view.replace_table("<table>second</table>")
    assert view.table_html == "<table>second</table>"


def test_row_columns_in_fixed_order():
    html = render_row(_row(efficiency=-0.083), separator=",")
    assert html == (
        "<tr>"
        "<td>uusd</td>"
        "<td>0.15</td>"
        '<td align="right">1,500,000</td>'
        '<td align="right">10,000,000</td>'
        f'<td align="right">{MINUS_SIGN}8.3%</td>'
        "</tr>"
    )


def test_table_keeps_row_order_and_header():
    rows = [_row("uluna", gas_units=20), _row("uusd", gas_units=10), _row("ukrw", gas_units=5)]
    html = render_table(rows, separator=",")

    assert '<th scope="col">denom</th><th scope="col">gas_price</th>' in html
    assert '<th scope="col">efficiency</th>' in html
    assert html.index("uluna") < html.index("uusd") < html.index("ukrw")
    assert html.count("<tr>") == 4


def test_table_escapes_denoms():
    html = render_table([_row('<img src=x onerror="x">')])
    assert "<img" not in html
    assert "&lt;img src=x onerror=&quot;x&quot;&gt;" in html


def test_table_uses_spacer_by_default():
    html = render_table([_row()])
    assert '1<span style="margin-right: 5px;"></span>500' in html


def test_gas_price_cell_has_no_float_artifacts():
    assert "<td>1</td>" in render_row(_row(gas_price=1.0))
    assert "<td>0.00001</td>" in render_row(_row(gas_price=1e-05))
