from datetime import datetime

import pytest

from payroll_reports.context import ReportData, ReportFilters


@pytest.fixture
def filters():
    return ReportFilters(month="January", year=2024)


@pytest.fixture
def scenario_payload():
    return {
        "departmentBreakdown": [
            {"department": "ICU", "employeeCount": 10, "totalSalary": 500000, "averageSalary": 50000}
        ],
        "salaryDistribution": [{"range": "40k-60k", "count": 10}],
        "totalEmployees": 10,
        "totalPayroll": 500000,
        "totalDeductions": 25000,
    }


@pytest.fixture
def scenario_data(scenario_payload):
    return ReportData.from_dict(scenario_payload)


@pytest.fixture
def generated_at():
    return datetime(2024, 2, 1, 15, 7)
