"""
Process-lifetime storage for fitting sessions.

Responsibilities:
- Assign ids from one shared, lock-guarded counter.
- Hold profiles, swing analyses, recommended clubs and retailer deals.
"""
