"""
Motorcycle upkeep: service intervals, km and document alerts, installment
arrears and savings pockets.
"""

from datetime import date
from typing import Iterable, Optional

from hogar.models.work import (
    AlertLevel,
    DocumentAlert,
    MaintenanceRecord,
    MaintenanceType,
    SavingsGoal,
    SavingsOverview,
    ServiceAlert,
    VehicleConfig,
    VehicleDocument,
)
from hogar.money import divide_round


DEFAULT_INTERVALS_KM = {
    MaintenanceType.OIL: 3000,
    MaintenanceType.BRAKES: 8000,
    MaintenanceType.CHAIN: 15000,
    MaintenanceType.TIRE_FRONT: 20000,
    MaintenanceType.TIRE_REAR: 15000,
}

# Alert window around the next service km
ALERT_KM_AHEAD = 500
ALERT_KM_OVERDUE = 1000

# Days before a document due date at which it turns urgent, then warning
DOCUMENT_URGENT_DAYS = 30
DOCUMENT_WARNING_DAYS = 60

# (name, category, target, interval_months); a 0 target is a cost nobody
# has looked up yet.
_DEFAULT_GOALS = [
    ("Cambio de aceite (sin filtro)", "oil", 70000, 2),
    ("Filtro de aceite", "oil_filter", 0, 4),
    ("Pastillas freno delanteras", "brakes_front", 35000, 3),
    ("Bandas freno traseras", "brakes_rear", 0, 6),
    ("Llanta delantera (Michelin Pilot Street)", "tire_front", 290000, 12),
    ("Llanta trasera (Michelin Pilot Street)", "tire_rear", 399000, 12),
    ("SOAT", "soat", 343300, 12),
    ("Tecnomecánica", "tecno", 248000, 12),
    ("Líquido de frenos", "brake_fluid", 0, 12),
    ("Líquido refrigerante", "coolant", 0, 12),
    ("Mantenimiento fuerte", "heavy_maintenance", 0, 8),
]


def default_next_service_km(
    maintenance_type: MaintenanceType,
    km_at_service: Optional[int],
) -> Optional[int]:
    """Next service km from the default interval, if one is known."""
    interval = DEFAULT_INTERVALS_KM.get(maintenance_type)
    if not km_at_service or interval is None:
        return None
    return km_at_service + interval


def service_alerts(
    records: Iterable[MaintenanceRecord],
    current_km: int,
) -> list[ServiceAlert]:
    """
    Services coming up within ALERT_KM_AHEAD km, or overdue by less than
    ALERT_KM_OVERDUE km.

    Records are expected newest first; only the first record of each
    type is considered. No alerts without an odometer reading.
    """
    if current_km <= 0:
        return []

    alerts = []
    seen = set()
    for record in records:
        if not record.next_service_km or record.type in seen:
            continue
        km_left = record.next_service_km - current_km
        if -ALERT_KM_OVERDUE < km_left < ALERT_KM_AHEAD:
            seen.add(record.type)
            alerts.append(ServiceAlert(type=record.type, km_left=km_left))
    return alerts


def document_level(days_left: int) -> AlertLevel:
    if days_left <= 0:
        return AlertLevel.EXPIRED
    if days_left <= DOCUMENT_URGENT_DAYS:
        return AlertLevel.URGENT
    if days_left <= DOCUMENT_WARNING_DAYS:
        return AlertLevel.WARNING
    return AlertLevel.OK


def document_alerts(
    config: Optional[VehicleConfig],
    today: Optional[date] = None,
) -> list[DocumentAlert]:
    """
    Days left on SOAT and tecnomecánica, one entry per known due date.

    Every known date is reported, including ones still far off (level
    OK), so the screen can always show both documents.
    """
    if config is None:
        return []

    today = today or date.today()
    alerts = []
    for document in VehicleDocument:
        due = config.due_date_for(document)
        if due is None:
            continue
        days_left = (due - today).days
        alerts.append(
            DocumentAlert(
                document=document,
                due_date=due,
                days_left=days_left,
                level=document_level(days_left),
            )
        )
    return alerts


def installment_arrears(config: Optional[VehicleConfig]) -> int:
    """Money owed on missed motorcycle installments."""
    if config is None:
        return 0
    return config.monthly_payment * config.missed_payments


def monthly_needed(goal: SavingsGoal) -> int:
    """What to put aside per month; 0 while the cost is unknown."""
    if goal.is_unknown_cost:
        return 0
    return divide_round(goal.target_amount, goal.interval_months)


def weekly_needed(goal: SavingsGoal) -> int:
    return divide_round(monthly_needed(goal), 4)


def default_savings_goals() -> list[SavingsGoal]:
    """
    The starter set of savings pockets.

    Unknown costs get a target of 1 so they show up as "to be defined".
    """
    return [
        SavingsGoal(
            name=name,
            category=category,
            target_amount=target or 1,
            interval_months=interval,
        )
        for name, category, target, interval in _DEFAULT_GOALS
    ]


def add_savings(goal: SavingsGoal, amount: int) -> SavingsGoal:
    """Return the goal with `amount` more saved."""
    if amount <= 0:
        raise ValueError(f"Savings amount must be positive, got {amount}")
    return goal.model_copy(update={"saved_amount": goal.saved_amount + amount})


def savings_overview(goals: Iterable[SavingsGoal]) -> SavingsOverview:
    """Totals across active savings goals."""
    goals = [g for g in goals if g.is_active]
    monthly = sum(monthly_needed(g) for g in goals)
    return SavingsOverview(
        monthly_needed=monthly,
        weekly_needed=divide_round(monthly, 4),
        total_saved=sum(g.saved_amount for g in goals),
        total_target=sum(g.target_amount for g in goals),
    )
