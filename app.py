"""
Sales Dashboard - Entry Point.

A Streamlit-based dashboard over the sales reporting API. Shows the
headline KPIs, daily sales and margin, and the top products and
customers for an optional date range.

Usage:
    streamlit run app.py
"""

import logging

from sales_dashboard import run_dashboard
from sales_dashboard.components.styles import apply_custom_css, apply_page_config

# Configure logging for console output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Apply Streamlit page configuration (must be first st call)
apply_page_config()
apply_custom_css()

# Run the main dashboard
run_dashboard()
