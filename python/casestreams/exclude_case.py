"""Case-excluding filter operator for RxPy."""

from reactivex import Observable
from reactivex import operators as ops

from casestreams.case import CaseAccessible, CaseDescriptor, pattern_of
from casestreams.filter_instance import cases_of
from casestreams.utils import Operator


def exclude_case[U: CaseAccessible](case: CaseDescriptor[U]) -> Operator[object, U]:
    """Filter out items of the variant selected by case, keeping the rest of its union."""
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[U]:
        narrowed: Observable[U] = source.pipe(cases_of(pattern.union))
        return narrowed.pipe(ops.filter(lambda x: not pattern.matches(x)))

    return _operator
