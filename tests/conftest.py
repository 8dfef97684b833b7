"""
Pytest configuration and fixtures for the BuildLedger test suite
"""

import os
import sys
from datetime import date

import pytest

# Add project root to Python path to allow imports from 'buildledger'
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from buildledger.config.settings import ChartConfig, NegativeAmountPolicy
from buildledger.models import DataPoint, Transaction


@pytest.fixture
def chart_config():
    """Chart configuration with the standard geometry"""
    return ChartConfig(
        default_size=240,
        padding=10,
        inner_radius_ratio=0.55,
        selected_offset=8,
        min_tap_size=60,
        full_circle_threshold=359.9,
    )


@pytest.fixture
def reject_config():
    """Chart configuration that rejects negative amounts"""
    return ChartConfig(negative_amount_policy=NegativeAmountPolicy.REJECT)


@pytest.fixture
def two_points():
    """A = 100, B = 300 (total 400)"""
    return [
        DataPoint(name="A", amount=100, color="#FF6384"),
        DataPoint(name="B", amount=300, color="#36A2EB"),
    ]


@pytest.fixture
def material_points():
    """Typical expense breakdown by material"""
    return [
        {"name": "Cement", "amount": 45000, "color": "#FF6384"},
        {"name": "Steel", "amount": 120000, "color": "#36A2EB"},
        {"name": "Sand", "amount": 18000, "color": "#FFCE56"},
        {"name": "Bricks", "amount": 32000, "color": "#4BC0C0"},
        {"name": "Labour", "amount": 5, "color": "#9966FF"},
    ]


@pytest.fixture
def sample_transactions():
    """Transactions across two projects and two months"""
    return [
        Transaction(amount=45000, partyName="Shree Cement", material="Cement", project="Green Villa",
                    type="out", date=date(2024, 3, 5)),
        Transaction(amount=120000, partyName="Metro Steel", material="Steel", project="Green Villa",
                    type="out", date=date(2024, 3, 12)),
        Transaction(amount=15000, partyName="Shree Cement", material="Cement", project="Lake View",
                    type="out", date=date(2024, 4, 2)),
        Transaction(amount=250000, partyName="R. Mehta", material="Advance", project="Green Villa",
                    type="in", date=date(2024, 4, 3)),
        Transaction(amount=10000, partyName="Shree Cement", material="Cement", project="Lake View",
                    type="in", date=date(2024, 4, 20)),
    ]
