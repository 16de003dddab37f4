from itertools import permutations

from app.core.employee_query import (
    EmployeeFilter,
    compute_statistics,
    filter_employees,
    list_departments,
)
from app.db.store import EmployeeStore
from tests.helpers import create_employee, seed


def seeded_snapshot():
    store = EmployeeStore()
    seed(store)
    return store, store.snapshot()


def ids(employees):
    return [e.id for e in employees]


def test_no_filter_returns_everything_in_order():
    _, snap = seeded_snapshot()
    assert ids(filter_employees(snap)) == ids(snap)
    assert ids(filter_employees(snap, EmployeeFilter())) == ids(snap)


def test_empty_strings_impose_no_constraint():
    _, snap = seeded_snapshot()
    spec = EmployeeFilter(department="", status="", search="")
    assert len(filter_employees(snap, spec)) == 5


def test_department_is_case_insensitive_exact_match():
    _, snap = seeded_snapshot()
    assert ids(filter_employees(snap, EmployeeFilter(department="engineering"))) == ["EMP001", "EMP002", "EMP003"]
    # Exact, not substring
    assert filter_employees(snap, EmployeeFilter(department="Engineer")) == []


def test_status_is_case_insensitive_exact_match():
    store, _ = seeded_snapshot()
    store.update("EMP002", {"status": "Inactive"})
    snap = store.snapshot()
    assert ids(filter_employees(snap, EmployeeFilter(status="INACTIVE"))) == ["EMP002"]
    assert len(filter_employees(snap, EmployeeFilter(status="active"))) == 4
    assert filter_employees(snap, EmployeeFilter(status="act")) == []


def test_search_matches_email_case_insensitively():
    _, snap = seeded_snapshot()
    result = filter_employees(snap, EmployeeFilter(search="ALICE"))
    assert ids(result) == ["EMP004"]
    assert result[0].email == "alice.williams@company.com"


def test_search_covers_each_searched_field():
    store = EmployeeStore()
    create_employee(store, "zed@company.com", first_name="Xavier", last_name="Plain", role="Clerk")
    create_employee(store, "yan@company.com", first_name="Plain", last_name="Xu", role="Clerk")
    create_employee(store, "qux@company.com", first_name="Plain", last_name="Plain", role="Clerk")
    create_employee(store, "abc@company.com", first_name="Plain", last_name="Plain", role="Principal")
    snap = store.snapshot()

    assert ids(filter_employees(snap, EmployeeFilter(search="xav"))) == ["EMP001"]
    assert ids(filter_employees(snap, EmployeeFilter(search="XU"))) == ["EMP002"]
    assert ids(filter_employees(snap, EmployeeFilter(search="qux@"))) == ["EMP003"]
    assert ids(filter_employees(snap, EmployeeFilter(search="cipal"))) == ["EMP004"]


def test_search_ignores_department_and_location():
    _, snap = seeded_snapshot()
    assert filter_employees(snap, EmployeeFilter(search="Francisco")) == []
    assert filter_employees(snap, EmployeeFilter(search="HR")) != []  # via role "HR Manager"
    assert ids(filter_employees(snap, EmployeeFilter(search="HR"))) == ["EMP004"]


def test_filters_compose_conjunctively():
    store, _ = seeded_snapshot()
    store.update("EMP001", {"status": "Inactive"})
    store.update("EMP004", {"status": "Inactive"})
    snap = store.snapshot()

    result = filter_employees(snap, EmployeeFilter(department="Engineering", status="Active"))
    assert ids(result) == ["EMP002", "EMP003"]

    result = filter_employees(snap, EmployeeFilter(department="Engineering", status="Active", search="vp"))
    assert ids(result) == ["EMP003"]


def test_filter_order_does_not_change_result():
    store, _ = seeded_snapshot()
    store.update("EMP003", {"status": "Inactive"})
    snap = store.snapshot()
    predicates = [
        EmployeeFilter(department="engineering"),
        EmployeeFilter(status="active"),
        EmployeeFilter(search="e"),
    ]

    combined = ids(filter_employees(snap, EmployeeFilter(department="engineering", status="active", search="e")))
    for order in permutations(predicates):
        current = snap
        for spec in order:
            current = filter_employees(current, spec)
        assert ids(current) == combined


def test_filter_does_not_mutate_input():
    _, snap = seeded_snapshot()
    before = list(snap)
    filter_employees(snap, EmployeeFilter(department="HR", search="carol"))
    assert list(snap) == before


def test_departments_distinct_in_first_seen_order():
    store, _ = seeded_snapshot()
    create_employee(store, "s@company.com", department="Sales")
    create_employee(store, "e@company.com", department="Engineering")
    assert list_departments(store.snapshot()) == ["Engineering", "HR", "Sales"]


def test_departments_empty():
    assert list_departments(()) == []


def test_statistics_empty_collection():
    stats = compute_statistics(())
    assert stats.total_employees == 0
    assert stats.active_employees == 0
    assert stats.inactive_employees == 0
    assert stats.average_salary == 0
    assert stats.department_stats == []


def test_statistics_on_seed_data():
    _, snap = seeded_snapshot()
    stats = compute_statistics(snap)
    assert stats.total_employees == 5
    assert stats.active_employees == 5
    assert stats.inactive_employees == 0
    assert stats.average_salary == 126000
    assert [(d.department, d.count, d.active_count) for d in stats.department_stats] == [
        ("Engineering", 3, 3),
        ("HR", 2, 2),
    ]


def test_statistics_counts_inactive_per_department():
    store, _ = seeded_snapshot()
    store.update("EMP001", {"status": "Inactive"})
    store.update("EMP005", {"status": "Inactive"})
    stats = compute_statistics(store.snapshot())
    assert stats.active_employees == 3
    assert stats.inactive_employees == 2
    by_dept = {d.department: (d.count, d.active_count) for d in stats.department_stats}
    assert by_dept == {"Engineering": (3, 2), "HR": (2, 1)}


def test_average_salary_rounds_to_nearest():
    store = EmployeeStore()
    create_employee(store, "a@company.com", salary=1)
    create_employee(store, "b@company.com", salary=2)
    # 1.5 rounds up
    assert compute_statistics(store.snapshot()).average_salary == 2

    create_employee(store, "c@company.com", salary=2)
    # 5 / 3 = 1.67
    assert compute_statistics(store.snapshot()).average_salary == 2

    create_employee(store, "d@company.com", salary=0)
    # 5 / 4 = 1.25
    assert compute_statistics(store.snapshot()).average_salary == 1
