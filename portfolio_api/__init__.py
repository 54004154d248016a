"""Portfolio API Package — JSON backend for a personal portfolio site.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
