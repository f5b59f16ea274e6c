"""Case-matching filter operator for RxPy."""

from reactivex import Observable
from reactivex import operators as ops

from casestreams.case import CaseAccessible, CaseDescriptor, pattern_of
from casestreams.filter_instance import cases_of
from casestreams.utils import Operator


def filter_case[U: CaseAccessible](case: CaseDescriptor[U]) -> Operator[object, U]:
    """Filter to only items of the variant selected by case.

    Example:
        >>> events.pipe(filter_case(Say))  # every Say, whatever its text
        >>> events.pipe(filter_case(Stop()))
    """
    pattern = pattern_of(case)

    def _operator(source: Observable[object]) -> Observable[U]:
        narrowed: Observable[U] = source.pipe(cases_of(pattern.union))
        return narrowed.pipe(ops.filter(pattern.matches))

    return _operator
