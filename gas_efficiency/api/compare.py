# gas_efficiency/api/compare.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from gas_efficiency.schemas.compare import CompareRequest, CompareResponse, ResultRowOut
from gas_efficiency.services.pipeline import ComparisonOutcome, run_comparison
from gas_efficiency.utils.time import iso_z


router = APIRouter(tags=["compare"])

# composition failures mean the upstream data was unusable, not unreachable
_COMPOSE_STATUS = 422
_UPSTREAM_STATUS = 502


def _error_response(
    *,
    code: str,
    message: str,
    status_code: int = 400,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    payload: dict[str, Any] = {"error": {"code": code, "message": message}}
    if details:
        payload["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=payload)


def _failure_response(outcome: ComparisonOutcome) -> JSONResponse:
    err = outcome.error
    return _error_response(
        code=err.code,
        message=err.message,
        status_code=_COMPOSE_STATUS if err.stage == "compose" else _UPSTREAM_STATUS,
        details={
            "stage": err.stage,
            "offer_amount": outcome.offer_amount,
            "status_html": outcome.view.status_html,
        },
    )


@router.post("/compare")
async def compare(payload: CompareRequest):
    """
    Rank every gas denom by how much gas `offer_amount` of the base token buys
    once swapped into it.
    """
    outcome = await run_comparison(payload.offer_amount)
    if not outcome.ok:
        return _failure_response(outcome)

    return CompareResponse(
        offer_amount=outcome.offer_amount,
        benchmark_denom=outcome.benchmark_denom,
        status_html=outcome.view.status_html,
        table_html=outcome.view.table_html,
        rows=[ResultRowOut(**row.to_dict()) for row in outcome.rows],
        finished_at=iso_z(outcome.finished_at),
    )
