# gas_efficiency/api/page.py
from __future__ import annotations

from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from gas_efficiency.config.settings import get_settings


router = APIRouter(tags=["page"])


def build_page(base_denom: str, benchmark_denom: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Gas efficiency by denom</title>
  <style>
    body {{
      font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
      margin: 24px;
    }}
    table {{ border-collapse: collapse; margin-top: 16px; }}
    th, td {{ padding: 2px 12px; }}
    th {{ text-align: left; border-bottom: 1px solid #999; }}
    #statusContainer {{ margin-top: 12px; color: #555; }}
  </style>
</head>
<body>
  <h1>Gas units purchasable per denom</h1>
  <p>Efficiency is relative to <code>{benchmark_denom}</code>.</p>
  <label for="offerAmountInput">offer amount ({base_denom})</label>
  <input id="offerAmountInput" type="number" value="1000000" />
  <button id="submitBtn" type="button">compare</button>
  <div id="statusContainer"></div>
  <div id="tableContainer"></div>
  <script>
    const offerAmountInput = document.getElementById("offerAmountInput");
    const submitBtn = document.getElementById("submitBtn");
    const statusContainer = document.getElementById("statusContainer");
    const tableContainer = document.getElementById("tableContainer");

    submitBtn.addEventListener("click", async () => {{
      submitBtn.disabled = true;
      statusContainer.innerHTML = "running... ";
      try {{
        const resp = await fetch("./compare", {{
          method: "POST",
          headers: {{ "Content-Type": "application/json" }},
          body: JSON.stringify({{ offer_amount: offerAmountInput.value }}),
        }});
        const body = await resp.json();
        if (body.error) {{
          const details = body.error.details || {{}};
          if (details.status_html) {{
            statusContainer.innerHTML = details.status_html;
          }} else {{
            statusContainer.textContent = "failed: " + body.error.message;
          }}
          return;
        }}
        if (!resp.ok) {{
          statusContainer.textContent = "failed: " + JSON.stringify(body.detail || body);
          return;
        }}
        statusContainer.innerHTML = body.status_html;
        tableContainer.innerHTML = body.table_html;
      }} catch (err) {{
        statusContainer.textContent = "failed: " + err;
      }} finally {{
        submitBtn.disabled = false;
      }}
    }});
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    settings = get_settings()
    return HTMLResponse(build_page(escape(settings.BASE_DENOM), escape(settings.BENCHMARK_DENOM)))
