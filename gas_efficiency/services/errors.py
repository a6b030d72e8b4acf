from __future__ import annotations


class ComparisonFailure(Exception):
    """Base error for anything that aborts a comparison run."""

    stage = "pipeline"
    code = "comparison_failed"

    def __init__(self, message: str, *, stage: str | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, str]:
        return {"stage": self.stage, "code": self.code, "message": self.message}


class UpstreamError(ComparisonFailure):
    """Transport failure, non-2xx status or unexpected payload from a remote endpoint."""

    code = "upstream_unavailable"


class CompositionError(ComparisonFailure):
    stage = "compose"
    code = "composition_failed"


class MissingGasPriceError(CompositionError):
    code = "missing_gas_price"

    def __init__(self, denom: str):
        super().__init__(f"cannot find gas price for {denom}")
        self.denom = denom


class MissingSwapReturnError(CompositionError):
    code = "missing_swap_return"

    def __init__(self, denom: str):
        super().__init__(f"cannot find swap return for {denom}")
        self.denom = denom


class MissingBenchmarkError(CompositionError):
    code = "missing_benchmark"

    def __init__(self, denom: str):
        super().__init__(f"cannot find gas units for {denom}")
        self.denom = denom


class AmountOutOfRangeError(CompositionError):
    code = "amount_out_of_range"

    def __init__(self, denom: str):
        super().__init__(f"amounts for {denom} are too large to compare")
        self.denom = denom
