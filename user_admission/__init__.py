"""
User Admission - Registration Admission & Credit-Limit Service

Validates new user registrations, applies per-client credit-limit
policy and admits eligible users into the system of record.
"""

__version__ = "0.1.0"
