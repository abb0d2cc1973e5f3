"""
Club recommendation engine.

Responsibilities:
- Load the static per-type club catalog and fallback defaults.
- Score catalog entries against a profile and its swing analysis.
- Pick one club per price tier and tailor its description and badge.
"""
