"""Services module.

This module provides the service layer architecture:
- exceptions: Base service exceptions
- sequence_service: Named id counters
- orders: Order placement and retrieval
- accounts: Account lookups, registration and updates
- catalog: Category, product and item browsing
"""
