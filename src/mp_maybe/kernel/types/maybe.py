"""Maybe[T] monad — Just and Nothing variants.

:func:`of` is the one place where ``None`` turns into absence.  Once a value is
inside the container, absence is carried by :class:`Nothing` alone and a
:class:`Just` never wraps ``None``.

Every composition operator is expressed through :meth:`map`::

    m.bind(f)        == m.map(f, lambda: Nothing(R))
    m.default(fb)    == m.map(lambda _: m, fb)
    m.do(a, b)       == m.map(void(a), void(b))   # result discarded

Plain (non-``Maybe``) results of the callbacks are lifted through :func:`of`,
so a callback returning ``None`` yields ``Nothing`` instead of ``Just(None)``.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, ClassVar, Generic, Iterator, NoReturn, TypeVar, final

from mp_maybe.kernel.errors import InvalidArgumentError
from mp_maybe.observability.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

_log = get_logger(__name__)


def _type_name(tag: Any) -> str:
    # list[int] and friends are not classes; keep their parameters visible
    return tag.__name__ if isinstance(tag, type) else repr(tag)


def _lift(result: Any, result_type: Any) -> "Maybe[Any]":
    if isinstance(result, (Just, Nothing)):
        return result
    return of(result, result_type)


class _MaybeBase(Generic[T]):
    """Operators shared by both variants, all written in terms of ``map``."""

    __slots__ = ()

    def map(
        self,
        on_just: Callable[[T], Any],
        on_nothing: Callable[[], Any],
        result_type: Any = object,
    ) -> "Maybe[Any]":
        raise NotImplementedError

    def extract(self, default: T | None = None) -> T | None:
        raise NotImplementedError

    def _type_tag(self) -> Any:
        raise NotImplementedError

    def bind(self, func: Callable[[T], Any], result_type: Any = object) -> "Maybe[Any]":
        """Apply *func* to the wrapped value; ``Nothing`` short-circuits.

        *func* may return a ``Maybe`` (returned as is) or a plain value, which
        is lifted through :func:`of`.  *result_type* tags the ``Nothing`` that
        is produced when there is no value or *func* returns ``None``.
        """
        return self.map(func, lambda: Nothing(result_type), result_type)

    def default(self, fallback: Any) -> "Maybe[T]":
        """Return ``self`` if it holds a value, otherwise the fallback.

        *fallback* is either a zero-argument producer (called only when
        needed), a ``Maybe``, or a plain value.  A callable payload has to be
        wrapped first: ``m.default(of(fn))``.
        """
        producer = fallback if callable(fallback) else (lambda: fallback)
        return self.map(lambda _: self, producer, self._type_tag())

    def do(
        self,
        on_just: Callable[[T], Any] | None = None,
        on_nothing: Callable[[], Any] | None = None,
    ) -> None:
        """Run the action matching the variant; a missing action does nothing."""
        # both branches hand back self so no Nothing is registered on the way
        def _just(value: T) -> "Maybe[T]":
            if on_just is not None:
                on_just(value)
            return self

        def _nothing() -> "Maybe[T]":
            if on_nothing is not None:
                on_nothing()
            return self

        self.map(_just, _nothing, self._type_tag())

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")


@final
class Just(_MaybeBase[T]):
    """Maybe with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise InvalidArgumentError(
                "You cannot create a 'Just' with None. "
                "Use of() if you don't know whether the value is None or not.",
                argument="value",
            )
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def map(
        self,
        on_just: Callable[[T], Any],
        on_nothing: Callable[[], Any],  # noqa: ARG002
        result_type: Any = object,
    ) -> "Maybe[Any]":
        return _lift(on_just(self._value), result_type)

    def extract(self, default: T | None = None) -> T:  # noqa: ARG002
        return self._value

    def _type_tag(self) -> Any:
        return type(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Just):
            return bool(self._value == other._value)
        if isinstance(other, Nothing):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Just, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (Just, (self._value,))

    def __repr__(self) -> str:
        return f'Just<{type(self._value).__name__}> "{self._value}"'


@final
class Nothing(_MaybeBase[T]):
    """Empty maybe; one shared instance per underlying type.

    ``Nothing(T)`` always returns the same object for the same *T*, so
    ``Nothing(int) is Nothing(int)`` while ``Nothing(int) != Nothing(str)``.
    Instances are created on first use and never change afterwards.
    """

    __slots__ = ("_type",)
    __match_args__ = ("type",)

    _registry: ClassVar[dict[Any, "Nothing[Any]"]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls, type_: Any = object) -> "Nothing[T]":
        instance = cls._registry.get(type_)
        if instance is None:
            created = False
            with cls._registry_lock:
                instance = cls._registry.get(type_)
                if instance is None:
                    instance = super().__new__(cls)
                    object.__setattr__(instance, "_type", type_)
                    cls._registry[type_] = instance
                    created = True
            if created:
                _log.debug("maybe.nothing_registered", type=_type_name(type_))
        return instance

    @property
    def type(self) -> Any:
        """The underlying type this ``Nothing`` stands in for."""
        return self._type

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def map(
        self,
        on_just: Callable[[T], Any],  # noqa: ARG002
        on_nothing: Callable[[], Any],
        result_type: Any = object,
    ) -> "Maybe[Any]":
        return _lift(on_nothing(), result_type)

    def extract(self, default: T | None = None) -> T | None:
        return default

    def _type_tag(self) -> Any:
        return self._type

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Nothing):
            return self is other or bool(self._type == other._type)
        if isinstance(other, Just):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Nothing, self._type))

    def __copy__(self) -> "Nothing[T]":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Nothing, (self._type,))

    def __repr__(self) -> str:
        return f"Nothing<{_type_name(self._type)}>"


type Maybe[T] = Just[T] | Nothing[T]


def of(value: T | None, type_: Any = None) -> Maybe[T]:
    """Wrap a possibly-``None`` value.

    Returns ``Nothing(type_)`` (``Nothing(object)`` when *type_* is omitted)
    for ``None`` and ``Just(value)`` for anything else.
    """
    if value is None:
        return Nothing(object if type_ is None else type_)
    return Just(value)


to_maybe = of


def just(value: T) -> Just[T]:
    """Build a ``Just`` directly; raises :class:`InvalidArgumentError` for ``None``.

    Prefer :func:`of` unless the value is known to be present.
    """
    return Just(value)


def nothing(type_: Any = object) -> Nothing[T]:
    """Return the shared ``Nothing`` for *type_*."""
    return Nothing(type_)


__all__ = ["Just", "Maybe", "Nothing", "just", "nothing", "of", "to_maybe"]
