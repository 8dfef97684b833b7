"""
UI Components

Streamlit and Plotly adapters for the chart engine.
"""
