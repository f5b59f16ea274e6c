"""Ref-counted sharing with a fresh subject per connection."""

from collections.abc import Callable

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import Disposable
from reactivex.subject import Subject

from casestreams.utils import Operator


def share_while_connected[T](subject_factory: Callable[[], Subject[T]]) -> Operator[T, T]:
    """Share one upstream subscription among all subscribers.

    The first subscriber connects to the source through a subject built by
    subject_factory. The connection is dropped when the last subscriber disposes
    or the source terminates, and the next subscriber starts over with a new
    subject. Nothing buffered by one connection (e.g. in a ReplaySubject) is seen
    by the next.
    """

    def _operator(source: Observable[T]) -> Observable[T]:
        subject: Subject[T] | None = None
        connection: DisposableBase | None = None
        count = 0

        def connect(current: Subject[T], scheduler: SchedulerBase | None) -> DisposableBase:
            def reset() -> None:
                nonlocal subject, connection, count
                if subject is current:
                    subject, connection, count = None, None, 0

            def on_error(error: Exception) -> None:
                reset()
                current.on_error(error)

            def on_completed() -> None:
                reset()
                current.on_completed()

            return source.subscribe(
                on_next=current.on_next,
                on_error=on_error,
                on_completed=on_completed,
                scheduler=scheduler,
            )

        def subscribe(
            observer: ObserverBase[T], scheduler: SchedulerBase | None = None
        ) -> DisposableBase:
            nonlocal subject, connection, count
            if subject is None:
                subject = subject_factory()
            current = subject
            count += 1
            subscription = current.subscribe(observer, scheduler=scheduler)

            if connection is None:
                new_connection = connect(current, scheduler)
                # source may have terminated synchronously, which already reset us
                if subject is current:
                    connection = new_connection

            def dispose() -> None:
                nonlocal subject, connection, count
                subscription.dispose()
                if subject is not current:
                    return
                count -= 1
                if count == 0:
                    if connection is not None:
                        connection.dispose()
                    subject, connection = None, None

            return Disposable(dispose)

        return reactivex.create(subscribe)

    return _operator
