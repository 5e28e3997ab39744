"""Web boundary layer for quote requests.

Everything under this package is read-only: requests are validated,
passed to the routing engine, and the priced routes are returned.
No trades are executed.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
