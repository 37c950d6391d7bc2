"""Application use cases package."""

from .get_breakdowns import GetBreakdownsUseCase, LedgerBreakdowns
from .get_emergency_fund_plan import (
    EmergencyFundPlan,
    GetEmergencyFundPlanUseCase,
)
from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .get_net_worth_projection import GetNetWorthProjectionUseCase

__all__ = [
    "GetBreakdownsUseCase",
    "LedgerBreakdowns",
    "GetEmergencyFundPlanUseCase",
    "EmergencyFundPlan",
    "GetFinancialSummaryUseCase",
    "FinancialSummary",
    "GetNetWorthProjectionUseCase",
]
