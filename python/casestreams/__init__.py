"""Case-matching operators for RxPy streams of tagged unions."""

from casestreams.capture_case import capture_case
from casestreams.case import (
    CaseAccessible,
    CaseDescriptor,
    CasePattern,
    case_of,
    extract,
    is_variant,
    matches,
    pattern_of,
    payload_of,
    union_of,
)
from casestreams.compact_map_case import compact_map_case
from casestreams.config import DRIVER, SIGNAL, LogLevel, SharingStrategy, configure_logging
from casestreams.exceptions import CaseDescriptorError, CaseStreamError, NotAVariantError
from casestreams.exclude_case import exclude_case
from casestreams.filter_case import filter_case
from casestreams.filter_instance import cases_of, filter_instance
from casestreams.flat_map_case import flat_map_case, flat_map_first_case, flat_map_latest_case
from casestreams.map_case import map_case
from casestreams.share_while_connected import share_while_connected
from casestreams.shared_sequence import SharedSequence, as_shared_sequence

__all__ = [
    "DRIVER",
    "SIGNAL",
    "CaseAccessible",
    "CaseDescriptor",
    "CaseDescriptorError",
    "CasePattern",
    "CaseStreamError",
    "LogLevel",
    "NotAVariantError",
    "SharedSequence",
    "SharingStrategy",
    "as_shared_sequence",
    "capture_case",
    "case_of",
    "cases_of",
    "compact_map_case",
    "configure_logging",
    "exclude_case",
    "extract",
    "filter_case",
    "filter_instance",
    "flat_map_case",
    "flat_map_first_case",
    "flat_map_latest_case",
    "is_variant",
    "map_case",
    "matches",
    "pattern_of",
    "payload_of",
    "share_while_connected",
    "union_of",
]
