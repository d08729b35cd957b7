"""
Test suite for the Clinic Scheduler.

Contains unit, property and console tests for the application's functionality.
"""
