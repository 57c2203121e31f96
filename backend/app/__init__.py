"""TLA Backend Package — user, class and program documents behind a CORS gate.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
