"""Busy indicator registry.

Tracks named "busy" flags for logical tasks so callers can ask whether a task
is in progress without keeping their own flag variables. Values are
conventionally booleans, but any value may be stored.

Example usage::

    from busy_indicator import BusyIndicators

    BusyIndicators.set("upload")
    if BusyIndicators.get("upload"):
        ...
    BusyIndicators.set("upload", False)

    # Strict mode: keys must be registered before they are written or removed
    BusyIndicators.configure({"strictMode": True, "createOnAccess": False})
    BusyIndicators.add("sync")
    with BusyIndicators.busy("sync"):
        ...

The registry performs no locking. Hosts that mutate it from several threads
must synchronize access themselves.
"""

import contextlib
import logging
from collections.abc import Iterator, Mapping
from typing import Any, NoReturn

from ..errors import UnregisteredKeyError
from .options import BusyIndicatorOptions

_ABSENT: Any = object()

_NOT_REGISTERED = 'Key "{key}" is not registered.'
_NOT_REGISTERED_USE_ADD = _NOT_REGISTERED + ' Use "add" to register it first.'


class BusyIndicatorManager:
    """Registry of busy indicators keyed by name.

    Use the module-level :data:`BusyIndicators` instance for process-wide
    state, or construct a private instance where isolation is needed.

    Args:
        options: Initial configuration, applied as by :meth:`configure`.
        logger: Destination for diagnostic warnings. Defaults to this
            module's logger.
    """

    _entries: dict[str, Any]
    _strict_mode: bool
    _create_on_access: bool

    def __init__(
        self,
        options: BusyIndicatorOptions | Mapping[str, Any] | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self.configure(options)

    @property
    def strict_mode(self) -> bool:
        """Whether operations on unregistered keys are rejected."""
        return self._strict_mode

    @property
    def create_on_access(self) -> bool:
        """Whether strict-mode reads auto-register unknown keys."""
        return self._create_on_access

    def configure(
        self, options: BusyIndicatorOptions | Mapping[str, Any] | None = None
    ) -> None:
        """Reset the registry and apply new options.

        All existing entries are discarded; this never merges.

        Args:
            options: A :class:`BusyIndicatorOptions` or a mapping accepted by
                it (camelCase aliases or snake_case names). ``None`` restores
                the defaults with no entries.

        Raises:
            pydantic.ValidationError: If a mapping does not validate. The
                registry is left untouched in that case.
        """
        if options is None:
            options = BusyIndicatorOptions()
        elif not isinstance(options, BusyIndicatorOptions):
            options = BusyIndicatorOptions.model_validate(options)

        self._entries = dict(options.initial_entries or {})
        self._strict_mode = options.strict_mode
        self._create_on_access = options.create_on_access
        self._logger.debug(
            "Busy indicators configured: strict_mode=%s create_on_access=%s entries=%d",
            self._strict_mode,
            self._create_on_access,
            len(self._entries),
        )

    def add(self, key: str, initial_value: Any = False) -> None:
        """Register a key with an initial value.

        An already registered key keeps its current value and a warning is
        logged instead.

        Args:
            key: The indicator name.
            initial_value: Value stored for a new key. Defaults to ``False``.
        """
        current = self._entries.get(key, _ABSENT)
        if current is _ABSENT:
            self._entries[key] = initial_value
            return
        self._logger.warning(
            'Key "%s" is already registered and has value "%s".', key, current
        )

    def remove(self, key: str) -> None:
        """Remove a key.

        Removing an unknown key is a no-op unless strict mode is enabled.

        Raises:
            UnregisteredKeyError: In strict mode, if the key is not registered.
        """
        if key not in self._entries:
            if self._strict_mode:
                self._raise_unregistered(key, _NOT_REGISTERED_USE_ADD)
            return
        del self._entries[key]

    def set(self, key: str, value: Any = True) -> None:
        """Assign a value to a key, registering it outside strict mode.

        Args:
            key: The indicator name.
            value: The value to store. Defaults to ``True``.

        Raises:
            UnregisteredKeyError: In strict mode, if the key is not registered.
        """
        if self._strict_mode and key not in self._entries:
            self._raise_unregistered(key, _NOT_REGISTERED_USE_ADD)
        self._entries[key] = value

    def get(self, key: str, fallback_value: Any = False) -> Any:
        """Return the value of a key.

        Resolution:

        1. Registered key: its value, with ``None`` read as ``False``
        2. Unknown key outside strict mode: ``False``, nothing is registered
        3. Unknown key in strict mode with create-on-access: the key is
           registered with *fallback_value*, which is returned
        4. Unknown key in strict mode otherwise: :class:`UnregisteredKeyError`

        Args:
            key: The indicator name.
            fallback_value: Value registered in case 3. Defaults to ``False``.
        """
        value = self._entries.get(key, _ABSENT)
        if value is not _ABSENT:
            return False if value is None else value
        if not self._strict_mode:
            return False
        if not self._create_on_access:
            self._raise_unregistered(key, _NOT_REGISTERED)

        self._entries[key] = fallback_value
        self._logger.warning(
            'Key "%s" is not registered. Registered with fallback value: %s',
            key,
            fallback_value,
        )
        return fallback_value

    def is_busy(self, key: str) -> bool:
        """Check whether a key reads as busy.

        Uses the same resolution rules as :meth:`get`.
        """
        return bool(self.get(key))

    def is_registered(self, key: str) -> bool:
        """Check whether a key is present, whatever its value."""
        return key in self._entries

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of all registered entries."""
        return dict(self._entries)

    @contextlib.contextmanager
    def busy(self, key: str) -> Iterator[None]:
        """Mark a key busy for the duration of a ``with`` block.

        The key is set to ``True`` on entry and back to ``False`` on exit,
        including when the block raises. In strict mode the reset is skipped
        if the block removed the key or reconfigured the registry.

        Blocks are not reference counted: when nested on the same key, the
        inner block's exit already marks the key not busy.

        Raises:
            UnregisteredKeyError: In strict mode, if the key is not
                registered. The block is not entered.
        """
        self.set(key, True)
        try:
            yield
        finally:
            if not self._strict_mode or key in self._entries:
                self._entries[key] = False

    def _raise_unregistered(self, key: str, template: str) -> NoReturn:
        message = template.format(key=key)
        self._logger.warning(message)
        raise UnregisteredKeyError(key, message)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(strict_mode={self._strict_mode}, "
            f"create_on_access={self._create_on_access}, "
            f"entries={len(self._entries)})"
        )


BusyIndicators = BusyIndicatorManager()
