"""Configuration options for the busy indicator registry.

Options can be built directly, validated from a plain mapping using either
the camelCase aliases or the snake_case field names, or resolved from
environment variables::

    from busy_indicator import BusyIndicatorOptions

    BusyIndicatorOptions(strict_mode=True)
    BusyIndicatorOptions.model_validate({"strictMode": True, "createOnAccess": False})

    # $ export BUSY_INDICATOR_STRICT_MODE=true
    BusyIndicatorOptions.from_env()

Keyword arguments passed to :meth:`BusyIndicatorOptions.from_env` always take
precedence over environment variables.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "BUSY_INDICATOR_"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def _parse_env_bool(name: str, raw: str) -> bool:
    """Convert an environment variable string to a boolean.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        ValueError: If the value is not a recognised boolean spelling.
    """
    lower = raw.strip().lower()
    if lower in _TRUE_VALUES:
        return True
    if lower in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


class BusyIndicatorOptions(BaseModel):
    """Options applied by :meth:`BusyIndicatorManager.configure`."""

    strict_mode: bool = Field(
        False,
        alias="strictMode",
        description=(
            "Reject operations on keys that were not registered with add(). "
            "Reads may still auto-register when create_on_access is enabled."
        ),
    )
    create_on_access: bool = Field(
        True,
        alias="createOnAccess",
        description=(
            "In strict mode, register an unknown key with the fallback value "
            "on get() instead of raising."
        ),
    )
    initial_entries: dict[str, Any] | None = Field(
        None,
        alias="initialEntries",
        description="Entries to preload; copied, never shared with the caller.",
    )

    model_config = ConfigDict(
        validate_by_name=True, validate_by_alias=True, extra="forbid"
    )

    @classmethod
    def from_env(
        cls,
        *,
        strict_mode: bool | None = None,
        create_on_access: bool | None = None,
        initial_entries: dict[str, Any] | None = None,
    ) -> "BusyIndicatorOptions":
        """Build options from ``BUSY_INDICATOR_*`` environment variables.

        Resolution order for each switch:

        1. Explicit keyword argument (highest priority)
        2. ``BUSY_INDICATOR_STRICT_MODE`` / ``BUSY_INDICATOR_CREATE_ON_ACCESS``
        3. Field default

        Initial entries are never read from the environment.

        Raises:
            ValueError: If an environment variable holds a non-boolean value.
        """
        data: dict[str, Any] = {}
        for field_name, override in (
            ("strict_mode", strict_mode),
            ("create_on_access", create_on_access),
        ):
            if override is not None:
                data[field_name] = override
                continue
            env_name = f"{ENV_PREFIX}{field_name.upper()}"
            env_val = os.environ.get(env_name)
            if env_val is not None:
                data[field_name] = _parse_env_bool(env_name, env_val)
        if initial_entries is not None:
            data["initial_entries"] = initial_entries
        return cls.model_validate(data)
