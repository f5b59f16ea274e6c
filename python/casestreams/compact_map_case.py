"""Associated value map operator that drops None results."""

from collections.abc import Callable

from reactivex import Observable
from reactivex import operators as ops

from casestreams.case import CaseAccessible, CaseDescriptor
from casestreams.map_case import map_case
from casestreams.utils import Operator


def compact_map_case[U: CaseAccessible, T](
    case: CaseDescriptor[U], transform: Callable[..., T | None]
) -> Operator[object, T]:
    """Like map_case, but results of None are not emitted."""

    def _operator(source: Observable[object]) -> Observable[T]:
        mapped: Observable[T | None] = source.pipe(map_case(case, transform))
        return mapped.pipe(ops.filter(lambda x: x is not None))  # type: ignore[return-value]

    return _operator
