"""Associated value map operator for RxPy."""

from collections.abc import Callable

from reactivex import Observable
from reactivex import operators as ops

from casestreams.capture_case import capture_case
from casestreams.case import CaseAccessible, CaseDescriptor, pattern_of
from casestreams.utils import Operator


def map_case[U: CaseAccessible, T](
    case: CaseDescriptor[U], transform: Callable[..., T]
) -> Operator[object, T]:
    """Transform the associated value of each item of the selected variant.

    transform takes the payload for a variant class and no argument for a variant
    instance. Exceptions raised by transform are sent downstream as on_error.
    """
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[T]:
        return source.pipe(capture_case(case), ops.map(pattern.lift(transform)))

    return _operator
