"""Type-narrowing filter operators for RxPy."""

import logging
from typing import cast

from reactivex import Observable
from reactivex import operators as ops

from casestreams.case import CaseAccessible, union_of
from casestreams.utils import Operator

logger = logging.getLogger(__name__)


def filter_instance[T, U](cls: type[U]) -> Operator[T, U]:
    """Filter to only items that are instances of cls, with type narrowing.

    Items of any other type are dropped silently (logged at debug level).
    """

    def is_instance(x: T) -> bool:
        if isinstance(x, cls):
            return True
        logger.debug("dropping %s, not a %s", type(x).__name__, cls.__name__)
        return False

    def _operator(source: Observable[T]) -> Observable[U]:
        filtered: Observable[T] = source.pipe(ops.filter(is_instance))
        return filtered.pipe(ops.map(lambda x: cast("U", x)))

    return _operator


def cases_of[U: CaseAccessible](union: type[U]) -> Operator[object, U]:
    """Narrow a stream of arbitrary values to the values of one union.

    union may also be one of its variants, in which case the whole union is kept.
    """
    return filter_instance(union_of(union))
