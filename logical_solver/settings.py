"""
Settings for the interactive front end.
"""

from dataclasses import dataclass

from .logic import ErrorPolicy


@dataclass
class SolverConfig:
    """Configuration for one run of the front end."""

    error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    # Truth tables grow as 2^n, refuse anything wider than this
    max_variables: int = 16
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args) -> "SolverConfig":
        return cls(
            error_policy=ErrorPolicy(args.on_error),
            max_variables=args.max_variables,
            log_level=args.log_level.upper(),
        )
