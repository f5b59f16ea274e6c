"""Shared sequences that never error, with the case operators as methods.

A SharedSequence wraps an observable so that all subscribers share a single
upstream subscription and never see on_error: any error, including one raised
by a transform further down a pipe, is logged and replaced by a recovery
observable (empty by default). The sharing strategy decides what late
subscribers get; a DRIVER replays the latest element, a SIGNAL replays nothing.

Example:
    from casestreams import DRIVER, SharedSequence

    commands = SharedSequence(command_observable, DRIVER)
    commands.capture_case(Say).subscribe(on_next=print)
"""

import logging
from collections.abc import Callable
from typing import Any

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops
from reactivex.abc import DisposableBase
from reactivex.subject import ReplaySubject, Subject

from casestreams.capture_case import capture_case
from casestreams.case import CaseAccessible, CaseDescriptor
from casestreams.compact_map_case import compact_map_case
from casestreams.config import DRIVER, SharingStrategy
from casestreams.exclude_case import exclude_case
from casestreams.filter_case import filter_case
from casestreams.flat_map_case import flat_map_case, flat_map_first_case, flat_map_latest_case
from casestreams.map_case import map_case
from casestreams.share_while_connected import share_while_connected

logger = logging.getLogger(__name__)

type ErrorRecovery = Callable[[Exception], Observable[Any]]


def _complete_on_error(_error: Exception) -> Observable[Any]:
    return rx.empty()


class SharedSequence[T]:
    def __init__(
        self,
        source: Observable[T],
        strategy: SharingStrategy = DRIVER,
        on_error_recover: ErrorRecovery | None = None,
    ) -> None:
        self.strategy = strategy
        self._on_error_recover = on_error_recover or _complete_on_error

        def recover(error: Exception, _source: Observable[T]) -> Observable[T]:
            logger.error("shared sequence recovered from error: %r", error)
            return self._on_error_recover(error)

        def new_subject() -> Subject[T]:
            if strategy.replay > 0:
                return ReplaySubject(buffer_size=strategy.replay)
            return Subject()

        self._source: Observable[T] = source.pipe(
            ops.catch(recover),
            share_while_connected(new_subject),
        )

    def as_observable(self) -> Observable[T]:
        return self._source

    def subscribe(self, *args: Any, **kwargs: Any) -> DisposableBase:
        return self._source.subscribe(*args, **kwargs)

    def pipe(self, *operators: Callable[[Observable[Any]], Observable[Any]]) -> "SharedSequence[Any]":
        """Apply RxPy operators, keeping the sharing strategy and error recovery."""
        piped: Observable[Any] = self._source.pipe(*operators)  # type: ignore[arg-type]
        return SharedSequence(piped, self.strategy, self._on_error_recover)

    def filter_case[U: CaseAccessible](self, case: CaseDescriptor[U]) -> "SharedSequence[U]":
        return self.pipe(filter_case(case))

    def exclude_case[U: CaseAccessible](self, case: CaseDescriptor[U]) -> "SharedSequence[U]":
        return self.pipe(exclude_case(case))

    def capture_case[U: CaseAccessible](self, case: CaseDescriptor[U]) -> "SharedSequence[Any]":
        return self.pipe(capture_case(case))

    def map_case[U: CaseAccessible, R](
        self, case: CaseDescriptor[U], transform: Callable[..., R]
    ) -> "SharedSequence[R]":
        return self.pipe(map_case(case, transform))

    def compact_map_case[U: CaseAccessible, R](
        self, case: CaseDescriptor[U], transform: Callable[..., R | None]
    ) -> "SharedSequence[R]":
        return self.pipe(compact_map_case(case, transform))

    def flat_map_case[U: CaseAccessible, R](
        self, case: CaseDescriptor[U], selector: Callable[..., "Observable[R] | SharedSequence[R]"]
    ) -> "SharedSequence[R]":
        return self.pipe(flat_map_case(case, _inner(selector)))

    def flat_map_first_case[U: CaseAccessible, R](
        self, case: CaseDescriptor[U], selector: Callable[..., "Observable[R] | SharedSequence[R]"]
    ) -> "SharedSequence[R]":
        return self.pipe(flat_map_first_case(case, _inner(selector)))

    def flat_map_latest_case[U: CaseAccessible, R](
        self, case: CaseDescriptor[U], selector: Callable[..., "Observable[R] | SharedSequence[R]"]
    ) -> "SharedSequence[R]":
        return self.pipe(flat_map_latest_case(case, _inner(selector)))


def _inner[R](
    selector: Callable[..., Observable[R] | SharedSequence[R]],
) -> Callable[..., Observable[R]]:
    def select(*args: Any) -> Observable[R]:
        inner = selector(*args)
        return inner.as_observable() if isinstance(inner, SharedSequence) else inner

    return select


def as_shared_sequence[T](
    strategy: SharingStrategy = DRIVER,
    on_error_recover: ErrorRecovery | None = None,
) -> Callable[[Observable[T]], SharedSequence[T]]:
    """Convert an observable into a SharedSequence, usable as the last step of a pipe."""

    def _operator(source: Observable[T]) -> SharedSequence[T]:
        return SharedSequence(source, strategy, on_error_recover)

    return _operator
