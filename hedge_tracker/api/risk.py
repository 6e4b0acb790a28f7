"""Risk API: liquidation estimates for one account or a two-exchange hedge."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from hedge_tracker.api.deps import get_risk_calculator
from hedge_tracker.schemas.risk import HedgeCompareRequest, LiquidationRequest
from hedge_tracker.services.liquidation import LiquidationRiskCalculator

router = APIRouter(prefix="/api/risk", tags=["risk"])


@router.post("/liquidation")
def liquidation(
    body: LiquidationRequest,
    calculator: LiquidationRiskCalculator = Depends(get_risk_calculator),
):
    result = calculator.assess(
        body.balance,
        body.entry_price,
        body.quantity,
        body.leverage,
        maintenance_percent=body.maintenance_percent,
        safety_percent=body.safety_percent,
    )
    return {**asdict(result), "computable": result.computable}


@router.post("/compare")
def compare(
    body: HedgeCompareRequest,
    calculator: LiquidationRiskCalculator = Depends(get_risk_calculator),
):
    """Same intended position on both exchanges; safe only if both legs are."""
    result = calculator.compare(
        body.balance_a,
        body.balance_b,
        body.entry_price,
        body.quantity,
        side=body.side,
        leverage=body.leverage,
        maintenance_percent=body.maintenance_percent,
        safety_percent=body.safety_percent,
    )
    return {**asdict(result), "can_open": result.can_open}
