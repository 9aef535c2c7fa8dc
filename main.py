import logging

import pandas as pd
import streamlit as st

from payroll_reports.context import ReportData
from payroll_reports.data_loader import (
    connect_duckdb,
    load_salary_records,
    read_uploaded_records,
    resolve_data_path,
)
from payroll_reports.errors import PayrollReportError, ReportGenerationError
from payroll_reports.formatting import format_currency
from payroll_reports.layout import clear_stale_report, render_period_picker
from payroll_reports.logging_config import setup_logging
from payroll_reports.metrics import build_report_data
from payroll_reports.pdf import generate_payroll_distribution_pdf
from payroll_reports.sections import (
    DEPARTMENT_COLUMNS,
    SALARY_RANGE_COLUMNS,
    department_rows,
    salary_range_rows,
)

st.set_page_config(page_title="WorkPulse Payroll Reports", layout="wide")
setup_logging()
logger = logging.getLogger("payroll_reports.app")

SIG_KEY = "payroll_report_sig"
PDF_KEY = "payroll_pdf"
NAME_KEY = "payroll_pdf_name"


def _load_records(filters) -> pd.DataFrame | None:
    uploaded = st.file_uploader("Salary records (CSV)", type=["csv"])
    if uploaded is not None:
        try:
            return read_uploaded_records(uploaded, filters.month, filters.year)
        except PayrollReportError as e:
            st.error(e.message)
            return None

    data_path = resolve_data_path()
    if not data_path:
        st.info("Upload a CSV or set DATA_PATH to a salary-record bundle.")
        return None
    try:
        conn = connect_duckdb(data_path)
        return load_salary_records(conn, filters.month, filters.year)
    except Exception as e:
        logger.exception("Failed to load salary records from %s", data_path)
        st.error(f"Could not load salary records: {e}")
        return None


def _render_overview(data: ReportData) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Payroll", format_currency(data.total_payroll))
    c2.metric("Employees", f"{data.total_employees:,}")
    c3.metric("Average Salary", format_currency(round(data.average_salary)))
    c4.metric("Total Deductions", format_currency(data.total_deductions))

    left, right = st.columns(2)
    left.subheader("Department Breakdown")
    left.dataframe(
        pd.DataFrame(department_rows(data), columns=list(DEPARTMENT_COLUMNS)),
        hide_index=True,
        width="stretch",
    )
    right.subheader("Salary Range Distribution")
    right.dataframe(
        pd.DataFrame(salary_range_rows(data), columns=list(SALARY_RANGE_COLUMNS)),
        hide_index=True,
        width="stretch",
    )


st.title("Payroll Distribution Report")
filters = render_period_picker()

clear_stale_report(st.session_state, f"{filters.month}|{filters.year}", SIG_KEY, (PDF_KEY, NAME_KEY))

records = _load_records(filters)

if records is not None:
    if records.empty:
        st.warning(f"No salary records for {filters.label}.")
    report_data = build_report_data(records)
    _render_overview(report_data)

    if st.button("Generate PDF", type="primary"):
        with st.spinner("Building report..."):
            try:
                result = generate_payroll_distribution_pdf(report_data, filters)
                st.session_state[PDF_KEY] = result.content
                st.session_state[NAME_KEY] = result.file_name
                st.success("Report generated")
            except ReportGenerationError as e:
                st.session_state.pop(PDF_KEY, None)
                st.error(e.message)

    if isinstance(st.session_state.get(PDF_KEY), bytes):
        st.download_button(
            "Download PDF",
            st.session_state[PDF_KEY],
            st.session_state.get(NAME_KEY, "report.pdf"),
            "application/pdf",
            key="payroll_pdf_dl",
            width="stretch",
        )
