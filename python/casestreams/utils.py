"""Shared typing helpers for case operators."""

from collections.abc import Callable

from reactivex import Observable

type Operator[T, U] = Callable[[Observable[T]], Observable[U]]
