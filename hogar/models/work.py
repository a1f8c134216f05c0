"""
Work and Vehicle Models for Hogar

Daily work logs, motorcycle maintenance and the savings "pockets" set
aside for upcoming maintenance.
"""

from datetime import date
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class MaintenanceType(str, Enum):
    """Kinds of maintenance logged against the motorcycle."""
    OIL = "oil"
    TIRE_FRONT = "tire_front"
    TIRE_REAR = "tire_rear"
    BRAKES = "brakes"
    CHAIN = "chain"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _MAINTENANCE_LABELS[self]


_MAINTENANCE_LABELS = {
    MaintenanceType.OIL: "Aceite",
    MaintenanceType.TIRE_FRONT: "Llanta delantera",
    MaintenanceType.TIRE_REAR: "Llanta trasera",
    MaintenanceType.BRAKES: "Pastillas de freno",
    MaintenanceType.CHAIN: "Cadena",
    MaintenanceType.OTHER: "Otro",
}


class WorkLog(BaseModel):
    """One day of delivery work."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    work_date: date
    gross_income: int = Field(..., ge=0)
    gas_cost: int = Field(default=0, ge=0)
    other_costs: int = Field(default=0, ge=0)
    km_driven: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=500)

    @property
    def net_income(self) -> int:
        return self.gross_income - self.gas_cost - self.other_costs


class WorkSummary(BaseModel):
    """Totals over a set of work logs, usually one month."""

    days_worked: int = Field(..., ge=0)
    total_gross: int = 0
    total_gas: int = 0
    total_other: int = 0
    total_net: int = 0
    average_daily_net: int = Field(
        default=0,
        description="Net per worked day, rounded half-up; 0 with no days"
    )


class MaintenanceRecord(BaseModel):
    """A service done on the motorcycle."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    service_date: date
    type: MaintenanceType
    cost: int = Field(..., ge=0)
    km_at_service: Optional[int] = Field(default=None, ge=0)
    next_service_km: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=500)


class ServiceAlert(BaseModel):
    """A maintenance type that is due soon (or recently overdue) by km."""

    type: MaintenanceType
    km_left: int = Field(
        ...,
        description="Negative when the service km has already passed"
    )

    @property
    def is_overdue(self) -> bool:
        return self.km_left <= 0


class SavingsGoal(BaseModel):
    """
    Money put aside for a recurring vehicle cost.

    A target of 0 or 1 means the cost is still unknown; such goals ask
    for nothing each month.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=50)
    target_amount: int = Field(..., ge=0)
    interval_months: int = Field(..., ge=1)
    saved_amount: int = Field(default=0, ge=0)
    is_active: bool = True
    last_done_date: Optional[date] = None

    @property
    def is_unknown_cost(self) -> bool:
        return self.target_amount <= 1

    @property
    def progress_percent(self) -> float:
        if self.is_unknown_cost:
            return 0.0
        return min(self.saved_amount / self.target_amount * 100, 100.0)

    @property
    def is_complete(self) -> bool:
        return not self.is_unknown_cost and self.saved_amount >= self.target_amount


class SavingsOverview(BaseModel):
    """Totals across all savings goals."""

    monthly_needed: int = 0
    weekly_needed: int = 0
    total_saved: int = 0
    total_target: int = 0


class VehicleDocument(str, Enum):
    """Dated legal documents the motorcycle must keep current."""
    SOAT = "soat"
    TECNO = "tecno"

    @property
    def label(self) -> str:
        return "SOAT" if self is VehicleDocument.SOAT else "Tecnomecánica"


class AlertLevel(str, Enum):
    """How close a document is to its due date."""
    OK = "ok"
    WARNING = "warning"
    URGENT = "urgent"
    EXPIRED = "expired"


class VehicleConfig(BaseModel):
    """
    Purchase installment and document due dates for the motorcycle.

    Every field is optional: a missing due date simply yields no alert.
    """

    registration_date: Optional[date] = None
    monthly_payment: int = Field(default=0, ge=0)
    missed_payments: int = Field(default=0, ge=0)
    soat_due_date: Optional[date] = None
    tecno_due_date: Optional[date] = None

    def due_date_for(self, document: VehicleDocument) -> Optional[date]:
        if document is VehicleDocument.SOAT:
            return self.soat_due_date
        return self.tecno_due_date


class DocumentAlert(BaseModel):
    """Days left until a document is due, and how pressing that is."""

    document: VehicleDocument
    due_date: date
    days_left: int = Field(
        ...,
        description="Zero or negative once the document has expired"
    )
    level: AlertLevel
