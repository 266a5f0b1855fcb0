"""
ROI Core - deterministic estimation model.

Everything in this package is pure: no I/O, no network, no shared state.
"""
