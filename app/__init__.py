"""Fraud Monitoring Gateway.

REST API in front of the fraud-monitoring database. It exposes:
- Login against the UserLogin procedure
- Users, merchants and their risk attributes
- Transactions created through the CreateTransaction procedure
- Fraud rules and the flags they raise
- Dashboard statistics
"""

__version__ = "0.1.0"
