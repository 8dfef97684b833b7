"""
BuildLedger reporting page.

Run with: streamlit run app.py
"""

from datetime import date

import pandas as pd
import plotly.express as px
import streamlit as st
from pydantic import ValidationError

from buildledger.config import get_settings
from buildledger.models import Transaction
from buildledger.services import chart_service, get_error_handler
from buildledger.ui.donut_chart import render_expense_distribution
from buildledger.utils import CurrencyUtils, setup_logging

settings = get_settings()
logger = setup_logging(settings.app.log_level)

st.set_page_config(
    page_title=settings.app.page_title,
    page_icon="🏗️",
    layout="wide",
)

SAMPLE_TRANSACTIONS = [
    {"amount": 45000, "partyName": "Shree Cement Traders", "material": "Cement", "project": "Green Villa", "type": "out", "date": date.today()},
    {"amount": 120000, "partyName": "Metro Steel", "material": "Steel", "project": "Green Villa", "type": "out", "date": date.today()},
    {"amount": 18000, "partyName": "River Sand Co", "material": "Sand", "project": "Lake View", "type": "out", "date": date.today()},
    {"amount": 250000, "partyName": "R. Mehta", "material": "Advance", "project": "Green Villa", "type": "in", "date": date.today()},
]


def load_transactions(upload) -> list:
    """Parse uploaded CSV rows into transactions, skipping invalid rows."""
    if upload is None:
        return [Transaction(**row) for row in SAMPLE_TRANSACTIONS]

    df = pd.read_csv(upload)
    transactions = []
    for row_number, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            transactions.append(Transaction(**row))
        except ValidationError as e:
            get_error_handler().handle_exception(e, context=f"csv_row_{row_number}")
    return transactions


st.title("🏗️ Reports")
upload = st.sidebar.file_uploader("Transactions CSV", type=["csv"])
transactions = load_transactions(upload)

months = chart_service.available_months(transactions)
selected_month = st.sidebar.selectbox(
    "Month",
    months,
    format_func=lambda month: pd.Period(month, freq="M").strftime("%B %Y"),
)
monthly_transactions = chart_service.filter_by_month(transactions, selected_month) if selected_month else []

stats = chart_service.calculate_summary_stats(monthly_transactions)
col1, col2, col3 = st.columns(3)
col1.metric("Received", CurrencyUtils.format_inr(stats["total_income"]))
col2.metric("Paid", CurrencyUtils.format_inr(stats["total_expense"]))
col3.metric("Balance", CurrencyUtils.format_inr(stats["balance"]))

render_expense_distribution(chart_service.expenses_by_material(monthly_transactions))

st.subheader("Monthly Comparison")
monthly = pd.DataFrame(chart_service.generate_monthly_comparison_data(transactions))
fig = px.bar(monthly, x="month", y=["income", "expense"], barmode="group")
st.plotly_chart(fig, use_container_width=True)

st.subheader("Project-wise Analysis")
projects = chart_service.generate_project_breakdown_data(monthly_transactions)
if projects:
    st.dataframe(pd.DataFrame(projects), use_container_width=True)
else:
    st.info("No project data available")

st.subheader("Top Parties")
parties = chart_service.generate_top_parties_data(monthly_transactions)
if parties:
    st.dataframe(pd.DataFrame(parties), use_container_width=True)
else:
    st.info("No party data available")
