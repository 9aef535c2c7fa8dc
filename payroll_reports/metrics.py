from typing import Any, Optional, Sequence, Tuple

import pandas as pd

from .context import DepartmentSummary, ReportData, SalaryRange

# (keywords, department) checked in order against the lower-cased label.
DEPARTMENT_KEYWORDS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("doctor", "physician"), "Medical"),
    (("nurse",), "Nursing"),
    (("admin",), "Administration"),
    (("hr",), "Human Resources"),
    (("it", "tech"), "IT Department"),
    (("finance", "account"), "Finance"),
)
DEFAULT_DEPARTMENT = "General"

# Lower bound inclusive, upper bound exclusive.
SALARY_BANDS: Sequence[Tuple[str, float, float]] = (
    ("0-50k", 0, 50_000),
    ("50k-100k", 50_000, 100_000),
    ("100k-150k", 100_000, 150_000),
    ("150k-200k", 150_000, 200_000),
    ("200k+", 200_000, float("inf")),
)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value)) or not str(value).strip()


def map_department(department: Any = None, designation: Any = None) -> str:
    """
    Department label for one salary record: the explicit department, else the
    designation, folded onto the hospital's department names by keyword.
    """
    label = DEFAULT_DEPARTMENT
    for candidate in (department, designation):
        if not _blank(candidate):
            label = str(candidate).strip()
            break
    if label == DEFAULT_DEPARTMENT:
        return "General Staff"
    lowered = label.lower()
    for keywords, name in DEPARTMENT_KEYWORDS:
        if any(k in lowered for k in keywords):
            return name
    return label


def _column(df: pd.DataFrame, *names: str) -> Optional[str]:
    cols = {c.lower(): c for c in df.columns}
    for name in names:
        if name.lower() in cols:
            return cols[name.lower()]
    return None


def _numeric(df: pd.DataFrame, *names: str) -> pd.Series:
    col = _column(df, *names)
    if not col:
        return pd.Series(0.0, index=df.index)
    return pd.to_numeric(df[col], errors="coerce").fillna(0.0)


def build_report_data(salaries: pd.DataFrame, total_employees: Optional[int] = None) -> ReportData:
    """
    Aggregate one period's salary records into report input.

    Departments come out sorted by total salary, highest first, so the
    summary's "department with highest payroll" is the first row.
    ``total_employees`` defaults to the number of salary records.
    """
    net = _numeric(salaries, "netPayableSalary", "net_payable_salary", "net_salary")
    deductions = _numeric(salaries, "totalDeductions", "deductions_total", "deductions")

    dept_col = _column(salaries, "department")
    desig_col = _column(salaries, "designation")
    departments = [
        map_department(
            row.get(dept_col) if dept_col else None,
            row.get(desig_col) if desig_col else None,
        )
        for row in salaries.to_dict("records")
    ]

    frame = pd.DataFrame({"department": departments, "net": net.to_numpy()})
    grouped = (
        frame.groupby("department", sort=False)["net"]
        .agg(employees="count", payroll="sum")
        .reset_index()
        .sort_values("payroll", ascending=False, kind="stable")
    )
    breakdown = tuple(
        DepartmentSummary(
            department=row.department,
            employee_count=int(row.employees),
            total_salary=float(row.payroll),
            average_salary=float(row.payroll) / int(row.employees),
        )
        for row in grouped.itertuples(index=False)
    )

    labels = [label for label, _, _ in SALARY_BANDS]
    edges = [low for _, low, _ in SALARY_BANDS] + [SALARY_BANDS[-1][2]]
    bands = pd.cut(frame["net"], bins=edges, labels=labels, right=False)
    counts = bands.value_counts().reindex(labels, fill_value=0)
    distribution = tuple(SalaryRange(range=label, count=int(counts[label])) for label in labels)

    employees = len(salaries) if total_employees is None else int(total_employees)
    total_payroll = float(net.sum())
    return ReportData(
        department_breakdown=breakdown,
        salary_distribution=distribution,
        total_employees=employees,
        total_payroll=total_payroll,
        total_deductions=float(deductions.sum()),
        average_salary=total_payroll / employees if employees > 0 else 0,
    )
