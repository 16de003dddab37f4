from datetime import date

from app.db.store import EmployeeStore

DEMO_EMPLOYEES = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@company.com",
        "department": "Engineering",
        "role": "Software Developer",
        "hire_date": date(2023, 1, 15),
        "salary": 85000,
        "manager": "Jane Smith",
        "phone": "+1-555-0101",
        "location": "San Francisco",
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@company.com",
        "department": "Engineering",
        "role": "Engineering Manager",
        "hire_date": date(2022, 6, 1),
        "salary": 120000,
        "manager": "Bob Johnson",
        "phone": "+1-555-0102",
        "location": "San Francisco",
    },
    {
        "first_name": "Bob",
        "last_name": "Johnson",
        "email": "bob.johnson@company.com",
        "department": "Engineering",
        "role": "VP of Engineering",
        "hire_date": date(2021, 3, 15),
        "salary": 180000,
        "manager": None,
        "phone": "+1-555-0103",
        "location": "San Francisco",
    },
    {
        "first_name": "Alice",
        "last_name": "Williams",
        "email": "alice.williams@company.com",
        "department": "HR",
        "role": "HR Manager",
        "hire_date": date(2022, 9, 1),
        "salary": 95000,
        "manager": "Carol Davis",
        "phone": "+1-555-0104",
        "location": "New York",
    },
    {
        "first_name": "Carol",
        "last_name": "Davis",
        "email": "carol.davis@company.com",
        "department": "HR",
        "role": "VP of People",
        "hire_date": date(2021, 1, 1),
        "salary": 150000,
        "manager": None,
        "phone": "+1-555-0105",
        "location": "New York",
    },
]


def seed_demo(store: EmployeeStore):
    # Goes through create() so seeded rows get counter-issued ids (EMP001..EMP005)
    return store.seed(DEMO_EMPLOYEES)
