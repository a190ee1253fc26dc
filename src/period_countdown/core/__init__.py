"""
Core calendar math, domain models, and data contracts.

Everything under core is pure and deterministic given its inputs: no clocks,
no timers, no I/O beyond loading bundled JSON schemas.
"""
