"""
Placement Cell Dashboard
CRUD screens and an aggregate dashboard for a college placement cell.

Architecture:
- Relational store: companies, students, job profiles, training, applications
- Data store: generic fetch/insert/update/delete/count over those tables
- Aggregator: pure statistics for the dashboard
"""

__version__ = "1.0.0"
