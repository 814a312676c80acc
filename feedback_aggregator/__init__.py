"""
Feedback Aggregator Dashboard.

Stores customer feedback, serves filtered/aggregated views of it over HTTP,
summarizes recent feedback with a hosted chat model, and renders a
single-page chart/feed dashboard. Includes a mock-data generator for demos.
"""

__version__ = "0.1.0"
