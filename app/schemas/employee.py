from datetime import date
from pydantic import ConfigDict, Field, field_validator, model_validator

from app.models.employee import EmployeeStatus
from app.schemas.base import CamelModel

# Form clients send an untouched date or number input as "".
BLANKABLE_KEYS = ("hire_date", "hireDate", "salary")


class EmployeeCreate(CamelModel):
    # Required fields are checked by the store so a single error can list
    # every missing one.
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    department: str | None = None
    role: str | None = None
    hire_date: date | None = None
    salary: int | None = Field(default=None, ge=0)
    manager: str | None = None
    phone: str | None = None
    location: str | None = None

    @field_validator("hire_date", "salary", mode="before")
    @classmethod
    def blank_means_default(cls, v):
        return None if v == "" else v


class EmployeeUpdate(CamelModel):
    """Only the fields sent by the client are applied"""
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    department: str | None = None
    role: str | None = None
    hire_date: date | None = None
    salary: int | None = Field(default=None, ge=0)
    manager: str | None = None
    phone: str | None = None
    location: str | None = None
    status: EmployeeStatus | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data):
        # A blank hire date or salary leaves the stored value alone
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (k in BLANKABLE_KEYS and v == "")}
        return data


class EmployeeOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    department: str
    role: str
    hire_date: date
    salary: int
    manager: str | None
    phone: str
    location: str
    status: EmployeeStatus
