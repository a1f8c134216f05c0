"""
Income Package

Work income summaries and motorcycle upkeep for the working member.
"""

from hogar.income.vehicle import (
    DEFAULT_INTERVALS_KM,
    add_savings,
    default_next_service_km,
    default_savings_goals,
    document_alerts,
    document_level,
    installment_arrears,
    monthly_needed,
    savings_overview,
    service_alerts,
    weekly_needed,
)
from hogar.income.work import (
    monthly_maintenance_amortization,
    real_salary,
    summarize_work_logs,
)

__all__ = [
    "DEFAULT_INTERVALS_KM",
    "add_savings",
    "default_next_service_km",
    "default_savings_goals",
    "document_alerts",
    "document_level",
    "installment_arrears",
    "monthly_maintenance_amortization",
    "monthly_needed",
    "real_salary",
    "savings_overview",
    "service_alerts",
    "summarize_work_logs",
    "weekly_needed",
]
