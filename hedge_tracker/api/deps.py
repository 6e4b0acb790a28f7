"""Shared API dependencies."""

from fastapi import Depends

from hedge_tracker.config import EngineConfig, settings
from hedge_tracker.services.liquidation import LiquidationRiskCalculator
from hedge_tracker.services.portfolio import PortfolioAggregator


def get_engine_config() -> EngineConfig:
    """Policy defaults for the current process settings."""
    return EngineConfig.from_settings(settings)


def get_portfolio_aggregator(
    config: EngineConfig = Depends(get_engine_config),
) -> PortfolioAggregator:
    return PortfolioAggregator(config)


def get_risk_calculator(
    config: EngineConfig = Depends(get_engine_config),
) -> LiquidationRiskCalculator:
    return LiquidationRiskCalculator(config)
