"""
Clinic Scheduler

An in-memory clinic scheduling tool for registering patients and doctors,
booking and cancelling appointments, and printing a priority-ordered report.
"""

__version__ = "1.0.0"
