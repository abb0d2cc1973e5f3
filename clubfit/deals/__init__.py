"""
Retailer price comparison.

Responsibilities:
- Convert a club's catalog price into the retail currency.
- Produce one price/availability record per configured retailer.
"""
