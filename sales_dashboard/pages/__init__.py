"""
Pages module for dashboard views.

Provides the main dashboard view.
"""

from sales_dashboard.pages.main_view import render_main_view

__all__ = ["render_main_view"]
