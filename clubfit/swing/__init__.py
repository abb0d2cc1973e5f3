"""
Simulated swing analysis.

Responsibilities:
- Derive a synthetic set of swing metrics from a golfer profile.
- Keep every random draw behind an injectable random source.
"""
