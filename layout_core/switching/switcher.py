"""
Scoped Switchers
================

Stack-based, scope-bound overrides of a "current value".

Each ``Switcher`` subclass is its own discriminator: it owns an
independent stack of values and a ``default`` baseline returned when no
scope is active. The stack lives in a ``contextvars.ContextVar``, so
threads and asyncio tasks never observe each other's overrides.

Example:
    class ReadOnlyMode(Switcher[bool]):
        default = False

    with ReadOnlyMode(True):
        assert ReadOnlyMode.current_value() is True
    assert ReadOnlyMode.current_value() is False
"""

import contextvars
import logging
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar

from layout_core.errors import SwitcherStateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _new_stack(owner: type) -> "contextvars.ContextVar[Tuple[Any, ...]]":
    return contextvars.ContextVar(
        f"{owner.__module__}.{owner.__qualname__}.stack", default=()
    )


class Switcher(Generic[T]):
    """
    Scoped override of a value, restored in strict LIFO order.

    Attributes:
        default: Baseline returned by ``current_value()`` outside any scope
        value: Value pushed by this scope while it is entered
    """

    default: Any = None
    _stack: "contextvars.ContextVar[Tuple[Any, ...]]"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._stack = _new_stack(cls)

    def __init__(self, value: T):
        self.value = value
        self._token: Optional[contextvars.Token] = None
        self._depth = 0

    def __enter__(self) -> "Switcher[T]":
        if self._token is not None:
            raise SwitcherStateError(
                f"{type(self).__name__} scope is already active"
            )
        var = type(self)._stack
        stack = var.get()
        self._token = var.set(stack + (self.value,))
        self._depth = len(stack) + 1
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._token is None:
            raise SwitcherStateError(
                f"{type(self).__name__} scope exited without being entered"
            )
        var = type(self)._stack
        if len(var.get()) != self._depth:
            raise SwitcherStateError(
                f"{type(self).__name__} scopes exited out of order "
                f"(expected depth {self._depth}, found {len(var.get())})"
            ) from exc_val
        var.reset(self._token)
        self._token = None
        return False

    @classmethod
    def current_value(cls) -> T:
        """Return the innermost active value, or ``default``."""
        stack = cls._stack.get()
        if stack:
            return stack[-1]
        return cls.default

    @classmethod
    def depth(cls) -> int:
        """Return the number of active scopes in the current context."""
        return len(cls._stack.get())


Switcher._stack = _new_stack(Switcher)


class DisablerState(str, Enum):
    """State pushed by a ``Disabler`` scope."""
    ENABLED = "enabled"
    DISABLED = "disabled"


class Disabler(Switcher[DisablerState]):
    """
    Switcher used to suppress optional behavior for the duration of a block.

    Outside any scope the disabler is ``DISABLED``. Entering ``Disabler()``
    pushes ``ENABLED``; passing ``DisablerState.DISABLED`` explicitly
    re-allows the behavior inside an outer disabled block.

    Subclass once per behavior to gate:

        class EventDisabler(Disabler):
            pass

        if not EventDisabler.is_active():
            raise_events()
    """

    default = DisablerState.DISABLED

    def __init__(self, state: DisablerState = DisablerState.ENABLED):
        super().__init__(state)

    @classmethod
    def is_active(cls) -> bool:
        """True while a disabler scope is in effect for this subclass."""
        return cls.current_value() == DisablerState.ENABLED
