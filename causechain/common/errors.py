"""Library errors and failure typing."""


class CauseChainError(Exception):
    """Base class for causechain failures."""

    error_code = "CAUSECHAIN_ERROR"


class ConfigError(CauseChainError):
    """Raised for invalid or missing traversal configuration."""

    error_code = "CONFIG_ERROR"


class ChainDepthError(CauseChainError):
    """Raised when a bounded traversal walks past its configured depth."""

    error_code = "CHAIN_DEPTH_EXCEEDED"

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Cause chain is deeper than max_depth={max_depth}; is it cyclic?")
        self.max_depth = max_depth


class TargetError(CauseChainError):
    """Raised when an inspect target cannot be resolved to a callable."""

    error_code = "TARGET_ERROR"
