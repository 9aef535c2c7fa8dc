from datetime import date
from typing import Any, Iterable, MutableMapping, Optional

import streamlit as st

from .config import MONTHS
from .context import ReportFilters

YEAR_RANGE = range(2020, 2051)


def render_period_picker(today: Optional[date] = None) -> ReportFilters:
    """
    Month/year controls shared by the report page. Defaults to the current
    period and returns a ReportFilters.
    """
    today = today or date.today()
    years = list(YEAR_RANGE)
    col_month, col_year = st.columns(2)
    month = col_month.selectbox("Month", MONTHS, index=today.month - 1)
    year = col_year.selectbox(
        "Year",
        years,
        index=years.index(today.year) if today.year in years else len(years) - 1,
    )
    return ReportFilters(month=month, year=year)


def clear_stale_report(
    state: MutableMapping[str, Any], signature: str, sig_key: str, keys: Iterable[str]
) -> bool:
    """
    Drop a generated report from ``state`` once the period it was built for
    changes. Returns True when something was reset.
    """
    if state.get(sig_key) == signature:
        return False
    state[sig_key] = signature
    for key in keys:
        if key in state:
            del state[key]
    return True
