"""
Golfer profiles and club types.

Responsibilities:
- Define the categorical vocabularies a profile is drawn from.
- Validate profile bodies before anything downstream sees them.
"""
