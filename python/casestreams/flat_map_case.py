"""Associated value flat-map operators for RxPy.

The three variants differ only in how inner observables are combined, which is
inherited unchanged from reactivex:

    flat_map_case         merge every inner observable (ops.flat_map)
    flat_map_first_case   ignore matches while an inner is active (ops.exclusive)
    flat_map_latest_case  dispose the active inner on each match (ops.switch_map)
"""

from collections.abc import Callable

from reactivex import Observable
from reactivex import operators as ops

from casestreams.capture_case import capture_case
from casestreams.case import CaseAccessible, CaseDescriptor, pattern_of
from casestreams.utils import Operator


def flat_map_case[U: CaseAccessible, T](
    case: CaseDescriptor[U], selector: Callable[..., Observable[T]]
) -> Operator[object, T]:
    """Project each matching associated value to an observable and merge the results."""
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[T]:
        return source.pipe(capture_case(case), ops.flat_map(pattern.lift(selector)))

    return _operator


def flat_map_first_case[U: CaseAccessible, T](
    case: CaseDescriptor[U], selector: Callable[..., Observable[T]]
) -> Operator[object, T]:
    """Like flat_map_case, but matches arriving while an inner observable is active are dropped."""
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[T]:
        return source.pipe(
            capture_case(case),
            ops.map(pattern.lift(selector)),
            ops.exclusive(),
        )

    return _operator


def flat_map_latest_case[U: CaseAccessible, T](
    case: CaseDescriptor[U], selector: Callable[..., Observable[T]]
) -> Operator[object, T]:
    """Like flat_map_case, but only the inner observable of the latest match is mirrored.

    The previous inner observable is disposed as soon as a new match arrives.
    """
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[T]:
        return source.pipe(capture_case(case), ops.switch_map(pattern.lift(selector)))

    return _operator
