"""Associated value capture operator for RxPy."""

from typing import Any

from reactivex import Observable
from reactivex import operators as ops

from casestreams.case import CaseAccessible, CaseDescriptor, pattern_of
from casestreams.filter_case import filter_case
from casestreams.utils import Operator


def capture_case[U: CaseAccessible](case: CaseDescriptor[U]) -> Operator[object, Any]:
    """Project each item of the selected variant into its associated value.

    A variant class captures the payload. A variant instance captures nothing and
    emits None for every match, even when the variant carries a payload.
    """
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[Any]:
        matched: Observable[U] = source.pipe(filter_case(case))
        return matched.pipe(ops.map(pattern.capture))

    return _operator
