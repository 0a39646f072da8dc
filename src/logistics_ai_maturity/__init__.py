"""Logistics AI Maturity Assessment service.

Scores a freight company's AI readiness from four operational metrics and
expands the scores into a fixed-shape transformation report: per-category
diagnostics, recommendations, a phased transformation path with generated
milestones, risk factors, quick wins, and investment priorities.
"""

__version__ = "0.1.0"
