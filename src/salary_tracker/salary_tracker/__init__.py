"""Salary Tracker package.

Personal attendance-to-wage tracker organized by feature modules
(payroll, records, settings, ...) with a thin Flask controller layer
over service/repository layers.
"""
