"""
Work income.

Turns daily work logs into monthly totals and a "real salary" once the
motorcycle's running costs are spread over the year.
"""

from datetime import date
from typing import Iterable, Optional

from hogar.models.work import MaintenanceRecord, WorkLog, WorkSummary
from hogar.money import ceil_div, divide_round
from hogar.planning.months import add_months


# Length of a "month of data" when spreading the last year's upkeep
DAYS_PER_MONTH = 30


def summarize_work_logs(logs: Iterable[WorkLog]) -> WorkSummary:
    """Totals over the given logs; one log counts as one worked day."""
    logs = list(logs)
    days = len(logs)
    gross = sum(log.gross_income for log in logs)
    gas = sum(log.gas_cost for log in logs)
    other = sum(log.other_costs for log in logs)
    net = gross - gas - other

    return WorkSummary(
        days_worked=days,
        total_gross=gross,
        total_gas=gas,
        total_other=other,
        total_net=net,
        average_daily_net=divide_round(net, days) if days else 0,
    )


def monthly_maintenance_amortization(
    records: Iterable[MaintenanceRecord],
    today: Optional[date] = None,
) -> int:
    """
    Cost of the last year of maintenance, per month of data.

    The year back from `today` is counted in 30-day months, rounded up,
    so a full year spreads over 13 months.
    """
    today = today or date.today()
    since = add_months(today, -12)
    total = sum(r.cost for r in records if r.service_date >= since)
    months_of_data = max(1, ceil_div((today - since).days, DAYS_PER_MONTH))
    return divide_round(total, months_of_data)


def real_salary(summary: WorkSummary, amortization: int) -> int:
    """Net income left after setting aside the maintenance amortization."""
    return summary.total_net - amortization
