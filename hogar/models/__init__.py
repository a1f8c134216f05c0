"""
Data Models Package

This package contains all Pydantic models used in Hogar.
All data handed to the allocation and planning functions must conform
to these schemas.
"""

from hogar.models.household import (
    CONTRIBUTOR_COUNT,
    Beneficiary,
    Category,
    EqualSplit,
    HouseholdExpense,
    Member,
    MemberRole,
    MonthlyPeriod,
    Payment,
    PercentageRule,
    PeriodStatus,
    SplitRule,
    SplitRuleTable,
    FundProgress,
    MemberSettlement,
    PeriodSettlement,
    expenses_by_category,
)
from hogar.models.debt import (
    NO_PLAN_DATE,
    NO_PLAN_MONTHS,
    Debt,
    DebtPayment,
    DebtOverview,
    DebtPriority,
    DebtSummary,
    PayoffPlanItem,
)
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
    WorkLog,
    WorkSummary,
)
from hogar.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Household models
    "CONTRIBUTOR_COUNT",
    "Beneficiary",
    "Category",
    "EqualSplit",
    "HouseholdExpense",
    "Member",
    "MemberRole",
    "MonthlyPeriod",
    "Payment",
    "PercentageRule",
    "PeriodStatus",
    "SplitRule",
    "SplitRuleTable",
    "expenses_by_category",
    "FundProgress",
    "MemberSettlement",
    "PeriodSettlement",
    # Debt models
    "NO_PLAN_DATE",
    "NO_PLAN_MONTHS",
    "Debt",
    "DebtPayment",
    "DebtOverview",
    "DebtPriority",
    "DebtSummary",
    "PayoffPlanItem",
    # Work and vehicle models
    "AlertLevel",
    "DocumentAlert",
    "MaintenanceRecord",
    "MaintenanceType",
    "SavingsGoal",
    "SavingsOverview",
    "ServiceAlert",
    "VehicleConfig",
    "VehicleDocument",
    "WorkLog",
    "WorkSummary",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
