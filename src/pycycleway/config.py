"""Tagging configuration for pycycleway."""

from __future__ import annotations

import dataclasses
import os
from datetime import UTC, date, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pycycleway.exceptions import CyclewayConfigError


def _zone(name: str) -> tzinfo:
    # UTC works without a system tz database.
    if name == "UTC":
        return UTC
    return ZoneInfo(name)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class TaggingConfig:
    """Configuration shared by the tag encoders.

    Parameters
    ----------
    left_hand_traffic : bool
        Whether the edited roads are in a country driving on the left.
        Decides which side of a road a cycleway runs with the traffic on.
    time_zone : str
        IANA time zone used to determine "today" for check dates.
    """

    left_hand_traffic: bool = False
    time_zone: str = "UTC"

    def __post_init__(self) -> None:
        try:
            _zone(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise CyclewayConfigError(f"unknown time zone: {self.time_zone!r}") from exc

    def today(self) -> date:
        """Current date in the configured time zone."""
        return datetime.now(_zone(self.time_zone)).date()

    @classmethod
    def from_env(cls, **overrides: Any) -> TaggingConfig:
        """Create configuration from environment variables.

        Reads ``PYCYCLEWAY_LEFT_HAND_TRAFFIC`` and ``PYCYCLEWAY_TIME_ZONE``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        TaggingConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        if "left_hand_traffic" not in overrides:
            config_kwargs["left_hand_traffic"] = _env_bool(env.get("PYCYCLEWAY_LEFT_HAND_TRAFFIC"), False)

        time_zone = env.get("PYCYCLEWAY_TIME_ZONE")
        if time_zone is not None and "time_zone" not in overrides:
            config_kwargs["time_zone"] = time_zone.strip()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
