from crawler.models import AgencySummary, Employee, MonthTotals, month_totals, summarize

_EMPLOYEES = [
    Employee(name="A", wage=1000.0, perks=100.0, others=10.0, total=1110.0),
    Employee(name="B", wage=3000.0, perks=0.0, others=-5.0, total=2995.0),
]


def test_summarize():
    assert summarize(_EMPLOYEES) == AgencySummary(
        total_employees=2, total_wage=4000.0, total_perks=100.0, max_wage=3000.0
    )


def test_summarize_empty():
    assert summarize([]) == AgencySummary()


def test_month_totals():
    assert month_totals(3, _EMPLOYEES) == MonthTotals(month=3, wage=4000.0, perks=100.0, others=5.0)
