"""
Chart Data Service

Aggregates transactions into the series the reporting views chart:
material breakdowns for the donut, monthly income/expense comparison,
per-project balances, top parties and summary statistics.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..models.chart import DataPoint, palette_color
from ..models.transaction import Transaction, TransactionType
from ..utils.structured_logging import get_structured_logger

logger = get_structured_logger().get_logger(__name__)

TRANSACTION_COLUMNS = ["amount", "party_name", "material", "project", "type", "date"]


class ChartService:
    """Chart data generation from transactions."""

    @staticmethod
    def to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
        """Build a DataFrame with one row per transaction, in input order."""
        rows = [
            {
                "amount": float(t.amount),
                "party_name": t.party_name,
                "material": t.material,
                "project": t.project,
                "type": t.type,
                "date": t.date,
            }
            for t in transactions
        ]
        df = pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
        df["date"] = pd.to_datetime(df["date"])
        return df

    def generate_pie_chart_data(self, transactions: List[Transaction], type: str = "both") -> List[Dict[str, Any]]:
        """
        Generate pie chart data grouped by material.

        Args:
            transactions: Transactions to aggregate
            type: "in", "out" or "both" (net of in minus out)

        Returns:
            Items with name, amount, percentage and color, largest first
        """
        if type not in ("in", "out", "both"):
            raise ValueError(f"Unsupported transaction type filter: {type}")

        df = self.to_frame(transactions)
        if type != "both":
            df = df[df["type"] == type]
        if df.empty:
            return []

        if type == "both":
            df = df.assign(amount=df["amount"].where(df["type"] == TransactionType.IN.value, -df["amount"]))

        totals = df.groupby("material", sort=False)["amount"].sum().abs()
        total = float(totals.sum())
        if total == 0:
            return []

        chart_data = [
            {
                "name": material,
                "amount": float(amount),
                "percentage": float(amount) / total * 100,
                "color": palette_color(index),
            }
            for index, (material, amount) in enumerate(totals.items())
        ]
        chart_data.sort(key=lambda item: item["amount"], reverse=True)

        logger.debug("Pie chart data generated", operation="generate_pie_chart_data", items=len(chart_data))
        return chart_data

    def expenses_by_material(self, transactions: List[Transaction]) -> List[DataPoint]:
        """Outgoing totals per material in first-seen order, ready for the donut chart."""
        df = self.to_frame(transactions)
        df = df[df["type"] == TransactionType.OUT.value]
        if df.empty:
            return []

        totals = df.groupby("material", sort=False)["amount"].sum()
        return [
            DataPoint(name=material, amount=float(amount), color=palette_color(index))
            for index, (material, amount) in enumerate(totals.items())
        ]

    def generate_monthly_comparison_data(
        self,
        transactions: List[Transaction],
        month_count: int = 6,
        today: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        """Income, expense and balance for the last ``month_count`` months, oldest first."""
        today = today or date.today()
        current = pd.Period(today, freq="M")
        df = self.to_frame(transactions)
        df = df.assign(period=df["date"].dt.to_period("M"))

        monthly_data = []
        for offset in range(month_count - 1, -1, -1):
            period = current - offset
            month_rows = df[df["period"] == period]
            income = float(month_rows.loc[month_rows["type"] == TransactionType.IN.value, "amount"].sum())
            expense = float(month_rows.loc[month_rows["type"] == TransactionType.OUT.value, "amount"].sum())
            monthly_data.append(
                {
                    "month": period.strftime("%b %y"),
                    "income": income,
                    "expense": expense,
                    "balance": income - expense,
                }
            )
        return monthly_data

    def generate_project_breakdown_data(self, transactions: List[Transaction]) -> List[Dict[str, Any]]:
        """Per-project totals sorted by absolute balance, largest first."""
        df = self.to_frame(transactions)
        if df.empty:
            return []

        breakdown = []
        for project, rows in df.groupby("project", sort=False):
            total_in = float(rows.loc[rows["type"] == TransactionType.IN.value, "amount"].sum())
            total_out = float(rows.loc[rows["type"] == TransactionType.OUT.value, "amount"].sum())
            breakdown.append(
                {
                    "project": project,
                    "total_in": total_in,
                    "total_out": total_out,
                    "balance": total_in - total_out,
                    "transaction_count": int(len(rows)),
                }
            )
        breakdown.sort(key=lambda item: abs(item["balance"]), reverse=True)
        return breakdown

    def available_months(self, transactions: List[Transaction]) -> List[str]:
        """Months (YYYY-MM) that have transactions, newest first."""
        df = self.to_frame(transactions)
        if df.empty:
            return []
        return sorted((str(month) for month in df["date"].dt.strftime("%Y-%m").unique()), reverse=True)

    def filter_by_month(self, transactions: List[Transaction], month: str) -> List[Transaction]:
        """Transactions dated in ``month`` (YYYY-MM), in input order."""
        period = pd.Period(month, freq="M")
        return [t for t in transactions if pd.Period(t.date, freq="M") == period]

    def generate_top_parties_data(self, transactions: List[Transaction], limit: int = 5) -> List[Dict[str, Any]]:
        """Parties with the largest combined in and out amounts."""
        df = self.to_frame(transactions)
        if df.empty:
            return []

        parties = []
        for party, rows in df.groupby("party_name", sort=False):
            total_in = float(rows.loc[rows["type"] == TransactionType.IN.value, "amount"].sum())
            total_out = float(rows.loc[rows["type"] == TransactionType.OUT.value, "amount"].sum())
            parties.append(
                {
                    "name": party,
                    "in": total_in,
                    "out": total_out,
                    "count": int(len(rows)),
                    "total": total_in + total_out,
                }
            )
        parties.sort(key=lambda item: item["total"], reverse=True)
        return parties[:limit]

    def calculate_summary_stats(self, transactions: List[Transaction]) -> Dict[str, Any]:
        """Headline figures for a set of transactions."""
        df = self.to_frame(transactions)
        if df.empty:
            return {
                "total_transactions": 0,
                "total_income": 0.0,
                "total_expense": 0.0,
                "balance": 0.0,
                "avg_transaction_amount": 0.0,
                "largest_income": 0.0,
                "largest_expense": 0.0,
                "unique_projects": 0,
                "unique_materials": 0,
            }

        incoming = df.loc[df["type"] == TransactionType.IN.value, "amount"]
        outgoing = df.loc[df["type"] == TransactionType.OUT.value, "amount"]
        total_income = float(incoming.sum())
        total_expense = float(outgoing.sum())

        return {
            "total_transactions": int(len(df)),
            "total_income": total_income,
            "total_expense": total_expense,
            "balance": total_income - total_expense,
            "avg_transaction_amount": float(df["amount"].mean()),
            "largest_income": float(incoming.max()) if not incoming.empty else 0.0,
            "largest_expense": float(outgoing.max()) if not outgoing.empty else 0.0,
            "unique_projects": int(df["project"].nunique()),
            "unique_materials": int(df["material"].nunique()),
        }


# Export singleton instance
chart_service = ChartService()
