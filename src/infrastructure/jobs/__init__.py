"""Background jobs run inside the API process.

Usage:
    from src.infrastructure.jobs import SweepExpiredTokensJob
"""

from src.infrastructure.jobs.token_sweep import SweepExpiredTokensJob

__all__ = ["SweepExpiredTokensJob"]
