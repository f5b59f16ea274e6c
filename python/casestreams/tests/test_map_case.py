"""Tests for map_case and compact_map_case operators."""

from dataclasses import dataclass

from reactivex import operators as ops
from reactivex.testing import ReactiveTest, TestScheduler

from casestreams import compact_map_case, map_case
from casestreams.case import CaseAccessible


class MockEnum(CaseAccessible):
    pass


@dataclass(frozen=True)
class NoAssociatedValue(MockEnum):
    pass


@dataclass(frozen=True)
class WithAnonymousAssociatedValue(MockEnum):
    raw: str


@dataclass(frozen=True)
class WithNamedAssociatedValue(MockEnum):
    value: str


def parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


on_next = ReactiveTest.on_next
on_error = ReactiveTest.on_error
on_completed = ReactiveTest.on_completed

EVENTS = [
    on_next(210, WithAnonymousAssociatedValue("100")),
    on_next(220, WithAnonymousAssociatedValue("200")),
    on_next(230, WithNamedAssociatedValue(value="100")),
    on_next(240, WithAnonymousAssociatedValue("400")),
    on_next(245, WithAnonymousAssociatedValue("David Bowie")),
    on_next(250, NoAssociatedValue()),
    on_completed(300),
]


def test_map_anonymous_events() -> None:
    """Maps payloads, then unparseable results are dropped downstream."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(
        lambda: source.pipe(
            map_case(WithAnonymousAssociatedValue, parse_int),
            ops.filter(lambda x: x is not None),
        )
    )

    assert results.messages == [
        on_next(210, 100),
        on_next(220, 200),
        on_next(240, 400),
        on_completed(300),
    ]


def test_map_named_events() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(lambda: source.pipe(map_case(WithNamedAssociatedValue, int)))

    assert results.messages == [on_next(230, 100), on_completed(300)]


def test_map_no_associated_value_events() -> None:
    """Instance descriptors call transform without arguments."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(
        lambda: source.pipe(map_case(NoAssociatedValue(), lambda: "Frank Sinatra"))
    )

    assert results.messages == [on_next(250, "Frank Sinatra"), on_completed(300)]


def test_map_transform_error_terminates_stream() -> None:
    """A raising transform becomes on_error, nothing after it is delivered."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)
    error = ValueError("not a number")

    def strict_int(text: str) -> int:
        if not text.isdigit():
            raise error
        return int(text)

    results = scheduler.start(
        lambda: source.pipe(map_case(WithAnonymousAssociatedValue, strict_int))
    )

    assert results.messages == [
        on_next(210, 100),
        on_next(220, 200),
        on_next(240, 400),
        on_error(245, error),
    ]


def test_compact_map_anonymous_events() -> None:
    """None results are dropped."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(
        lambda: source.pipe(compact_map_case(WithAnonymousAssociatedValue, parse_int))
    )

    assert results.messages == [
        on_next(210, 100),
        on_next(220, 200),
        on_next(240, 400),
        on_completed(300),
    ]


def test_compact_map_transform_error_terminates_stream() -> None:
    """A raising transform is not mistaken for an absent result."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)
    error = ValueError("not a number")

    def strict_int(text: str) -> int:
        if not text.isdigit():
            raise error
        return int(text)

    results = scheduler.start(
        lambda: source.pipe(compact_map_case(WithAnonymousAssociatedValue, strict_int))
    )

    assert results.messages == [
        on_next(210, 100),
        on_next(220, 200),
        on_next(240, 400),
        on_error(245, error),
    ]


def test_compact_map_named_events() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(
        lambda: source.pipe(compact_map_case(WithNamedAssociatedValue, parse_int))
    )

    assert results.messages == [on_next(230, 100), on_completed(300)]


def test_compact_map_no_associated_value_events() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(EVENTS)

    results = scheduler.start(
        lambda: source.pipe(compact_map_case(NoAssociatedValue(), lambda: None))
    )

    assert results.messages == [on_completed(300)]
