"""
Configuration

Application and chart settings loaded from the environment.
"""

from .settings import Settings, ChartConfig, AppConfig, NegativeAmountPolicy, get_settings

__all__ = ["Settings", "ChartConfig", "AppConfig", "NegativeAmountPolicy", "get_settings"]
