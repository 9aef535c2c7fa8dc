from pathlib import Path

# Defaults for locating the salary-record bundle and generated artifacts.
DEFAULT_DATA_FILENAME = "salary_records.parquet"
ENV_DATA_PATH = "DATA_PATH"

ENV_LOGO_PATH = "PAYROLL_LOGO_PATH"
DEFAULT_LOGO_PATH = Path(__file__).resolve().parent.parent / "assets" / "Logo.png"

# Backend used by the login smoke check.
ENV_API_BASE_URL = "WORKPULSE_API_URL"
DEFAULT_API_BASE_URL = "http://localhost:5000"
LOGIN_ENDPOINT = "/api/auth/login"
ENV_LOGIN_PASSWORD = "WORKPULSE_PASSWORD"

ENV_LOG_LEVEL = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Only used when a caller explicitly saves a generated PDF.
DEFAULT_REPORT_DIR = Path(__file__).resolve().parent.parent / "reports"

# Report identity.
ORGANIZATION_NAME = "Colombo General Hospital"
ORGANIZATION_ADDRESS = "123 Hospital Street, Colombo 07"
ORGANIZATION_CONTACT = "Tel: +94 11 123 4567 | Email: info@cgh.lk"
REPORT_TITLE = "Payroll Distribution Report"
FOOTER_TEXT = "This is a computer-generated report. WorkPulse Hospital Management System."
FILE_NAME_TEMPLATE = "Payroll_Distribution_Report_{month}_{year}.pdf"

CURRENCY_LABEL = "LKR"
PLACEHOLDER = "N/A"

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
