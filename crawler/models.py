from dataclasses import dataclass, field
from typing import List


@dataclass
class AgencyBasic:
    name: str
    agency_category: str


@dataclass
class State:
    """A state and the agencies it publishes payrolls for."""

    name: str
    short_name: str
    flag_url: str
    agency: List[AgencyBasic] = field(default_factory=list)


@dataclass
class Employee:
    name: str
    wage: float
    perks: float
    others: float
    total: float


@dataclass
class AgencySummary:
    total_employees: int = 0
    total_wage: float = 0.0
    total_perks: float = 0.0
    max_wage: float = 0.0


@dataclass
class MonthTotals:
    month: int
    wage: float = 0.0
    perks: float = 0.0
    others: float = 0.0


@dataclass
class AgencyTotalsYear:
    year: int
    month_totals: List[MonthTotals] = field(default_factory=list)


def summarize(employees):
    if not employees:
        return AgencySummary()
    return AgencySummary(
        total_employees=len(employees),
        total_wage=sum(e.wage for e in employees),
        total_perks=sum(e.perks for e in employees),
        max_wage=max(e.wage for e in employees),
    )


def month_totals(month, employees):
    return MonthTotals(
        month=month,
        wage=sum(e.wage for e in employees),
        perks=sum(e.perks for e in employees),
        others=sum(e.others for e in employees),
    )
