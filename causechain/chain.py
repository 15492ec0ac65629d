"""Read-only traversal of exception cause chains.

The cause chain of an exception is the sequence reached by following its
``__cause__`` link (and, when ``follow_context`` is enabled, the implicit
``__context__`` link) until an exception without a cause is found. The
exception the walk starts from is never part of its own chain.
"""

from __future__ import annotations

from typing import Iterator, TypeVar, Union

from causechain.common.config_loader import DEFAULT_CONFIG, TraversalConfig
from causechain.common.errors import ChainDepthError

E = TypeVar("E", bound=BaseException)

ExceptionTypes = Union[type[BaseException], tuple[type[BaseException], ...]]
TypeTarget = Union[type[E], tuple[type[E], ...]]


def _next_cause(error: BaseException, follow_context: bool) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if follow_context and not error.__suppress_context__:
        return error.__context__
    return None


def _is_type_target(target) -> bool:
    if isinstance(target, type):
        return issubclass(target, BaseException)
    return isinstance(target, tuple) and all(
        isinstance(item, type) and issubclass(item, BaseException) for item in target
    )


def _check_type_target(type_) -> None:
    if not _is_type_target(type_):
        raise TypeError(f"expected an exception type or tuple of exception types, got {type_!r}")


def iter_causes(error: BaseException, *, config: TraversalConfig | None = None) -> Iterator[BaseException]:
    """Yield the causes of ``error``, immediate cause first and root cause last."""
    cfg = config or DEFAULT_CONFIG
    produced = 0
    cause = _next_cause(error, cfg.follow_context)
    while cause is not None:
        produced += 1
        if cfg.max_depth is not None and produced > cfg.max_depth:
            raise ChainDepthError(cfg.max_depth)
        yield cause
        cause = _next_cause(cause, cfg.follow_context)


def get_causes(error: BaseException, *, config: TraversalConfig | None = None) -> list[BaseException]:
    return list(iter_causes(error, config=config))


def has_cause(
    error: BaseException,
    target: BaseException | ExceptionTypes,
    *,
    config: TraversalConfig | None = None,
) -> bool:
    """Check whether ``target`` is part of the cause chain of ``error``.

    An exception instance matches by identity only, so an equal-looking but
    separately constructed exception is not a cause. An exception class (or a
    tuple of classes) matches any cause that is an instance of it.
    """
    if isinstance(target, BaseException):
        return any(cause is target for cause in iter_causes(error, config=config))
    if _is_type_target(target):
        return any(isinstance(cause, target) for cause in iter_causes(error, config=config))
    raise TypeError(f"target must be an exception instance or exception type, got {target!r}")


def get_root_cause(error: BaseException, *, config: TraversalConfig | None = None) -> BaseException:
    """Return the last exception of the chain, or ``error`` itself if it has no cause."""
    root = error
    for cause in iter_causes(error, config=config):
        root = cause
    return root


def get_cause_at_level(
    error: BaseException,
    depth: int,
    *,
    config: TraversalConfig | None = None,
) -> BaseException | None:
    """Return the cause at ``depth`` (0 is the immediate cause) or None when the chain is shorter."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    for level, cause in enumerate(iter_causes(error, config=config)):
        if level == depth:
            return cause
    return None


def get_first_cause_of_type(
    error: BaseException,
    type_: TypeTarget,
    *,
    config: TraversalConfig | None = None,
) -> E | None:
    _check_type_target(type_)
    for cause in iter_causes(error, config=config):
        if isinstance(cause, type_):
            return cause
    return None


def get_cause(error: BaseException, type_: TypeTarget, *, config: TraversalConfig | None = None) -> E | None:
    """Alias of :func:`get_first_cause_of_type`."""
    return get_first_cause_of_type(error, type_, config=config)


def get_last_cause_of_type(
    error: BaseException,
    type_: TypeTarget,
    *,
    config: TraversalConfig | None = None,
) -> E | None:
    _check_type_target(type_)
    last = None
    for cause in iter_causes(error, config=config):
        if isinstance(cause, type_):
            last = cause
    return last


def get_causes_of_type(
    error: BaseException,
    type_: TypeTarget,
    *,
    config: TraversalConfig | None = None,
) -> list[E]:
    _check_type_target(type_)
    return [cause for cause in iter_causes(error, config=config) if isinstance(cause, type_)]
