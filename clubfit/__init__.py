"""
Golf club fitting service.

Responsibilities:
- Collect a golfer profile and simulate a swing analysis from it.
- Score the static club catalog and pick one club per price tier.
- Synthesize retailer price comparisons for each recommended club.
"""
