import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from .config import FILE_NAME_TEMPLATE, PLACEHOLDER

Number = Union[int, float]


def _number(value: Any) -> Number:
    """Resolve a possibly missing or textual numeric field; anything unusable is 0."""
    if not value or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    text = str(value).replace(",", "").strip()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        number = float(text)
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0


def _count(value: Any) -> Number:
    number = _number(value)
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def _label(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    text = str(value).strip()
    return text or PLACEHOLDER


@dataclass(frozen=True)
class ReportFilters:
    """Reporting period; used only for titling and the file name."""

    month: str
    year: Union[str, int]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ReportFilters":
        return cls(month=raw.get("month"), year=raw.get("year"))

    @property
    def label(self) -> str:
        return f"{self.month} {self.year}"

    def file_name(self) -> str:
        return FILE_NAME_TEMPLATE.format(month=self.month, year=self.year)


@dataclass(frozen=True)
class DepartmentSummary:
    department: str = PLACEHOLDER
    employee_count: Number = 0
    total_salary: Number = 0
    average_salary: Number = 0

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DepartmentSummary":
        return cls(
            department=_label(raw.get("department")),
            employee_count=_count(raw.get("employeeCount")),
            total_salary=_number(raw.get("totalSalary")),
            average_salary=_number(raw.get("averageSalary")),
        )


@dataclass(frozen=True)
class SalaryRange:
    range: str = PLACEHOLDER
    count: Number = 0

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SalaryRange":
        return cls(range=_label(raw.get("range")), count=_count(raw.get("count")))


@dataclass(frozen=True)
class ReportData:
    """
    Aggregate report input with every default already resolved.
    Department order is kept as given: index 0 is reported as the
    department with the highest payroll.
    """

    department_breakdown: Tuple[DepartmentSummary, ...] = ()
    salary_distribution: Tuple[SalaryRange, ...] = ()
    total_employees: Number = 0
    total_payroll: Number = 0
    total_deductions: Number = 0
    average_salary: Number = 0

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "ReportData":
        raw = raw or {}
        return cls(
            department_breakdown=tuple(
                DepartmentSummary.from_dict(row or {}) for row in raw.get("departmentBreakdown") or ()
            ),
            salary_distribution=tuple(
                SalaryRange.from_dict(row or {}) for row in raw.get("salaryDistribution") or ()
            ),
            total_employees=_count(raw.get("totalEmployees")),
            total_payroll=_number(raw.get("totalPayroll")),
            total_deductions=_number(raw.get("totalDeductions")),
            average_salary=_number(raw.get("averageSalary")),
        )

    @property
    def top_department(self) -> str:
        if not self.department_breakdown:
            return PLACEHOLDER
        return self.department_breakdown[0].department


@dataclass(frozen=True)
class RenderResult:
    success: bool
    file_name: str
    content: bytes = field(default=b"", repr=False)
