"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import (
    DATE_RANGE_KINDS,
    DISPLAY_LOCAL,
    DISPLAY_MODES,
    POSTED_STATUS,
    RANGE_LAST_WEEK,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the general ledger report.

    Attributes:
        posted_status: Header status counted in opening balances.
        default_range: Range kind selected when a report opens.
        display_mode: Default currency display mode (local or document).
    """

    posted_status: str = POSTED_STATUS
    default_range: str = RANGE_LAST_WEEK
    display_mode: str = DISPLAY_LOCAL

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        posted_status = (
            os.getenv("LEDGER_POSTED_STATUS", POSTED_STATUS).strip()
            or POSTED_STATUS
        )
        default_range = cls._choice(
            "LEDGER_DEFAULT_RANGE",
            DATE_RANGE_KINDS,
            RANGE_LAST_WEEK,
            logger=logger,
        )
        display_mode = cls._choice(
            "LEDGER_DISPLAY_MODE",
            DISPLAY_MODES,
            DISPLAY_LOCAL,
            logger=logger,
        )
        return cls(
            posted_status=posted_status,
            default_range=default_range,
            display_mode=display_mode,
        )

    @staticmethod
    def _choice(
        name: str,
        allowed: tuple[str, ...],
        default: str,
        logger,
    ) -> str:
        """Read an enumerated environment variable.

        Args:
            name: Environment variable name.
            allowed: Accepted values.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            str: Normalized value or ``default``.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        value = raw.strip().lower()
        if value not in allowed:
            logger.warning(
                f"Invalid {name}='{raw}'. Expected one of {', '.join(allowed)}."
            )
            return default
        return value


__all__ = ["LedgerSettings"]
