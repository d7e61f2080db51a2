"""
Header set validation

Checks that a request carries the headers a signature will cover before
any signing work starts.
"""

from typing import Iterable, List, Sequence

from ..exceptions import MissingHeadersError, MissingDateError
from .types import PSEUDO_HEADERS

DATE_HEADER = "date"


def normalize_header_name(name: str) -> str:
    """
    Normalize header name to lowercase for consistent processing.

    Args:
        name: Header name to normalize

    Returns:
        str: Lowercase header name
    """
    return name.lower().strip()


def is_pseudo_header(name: str) -> bool:
    """Check whether a name is a synthetic pseudo-header such as (created)"""
    return normalize_header_name(name) in PSEUDO_HEADERS


def find_missing_headers(present_headers: Iterable[str], required_headers: Sequence[str]) -> List[str]:
    """
    List required headers absent from the request.

    Comparison is case-insensitive. Pseudo-headers are always available and
    never reported. Names are returned as configured, in configured order.
    """
    present = {normalize_header_name(name) for name in present_headers}

    return [
        name for name in required_headers
        if not is_pseudo_header(name) and normalize_header_name(name) not in present
    ]


def validate_headers(present_headers: Iterable[str], required_headers: Sequence[str]) -> None:
    """
    Validate the request headers against the configured header list.

    With a non-empty ``required_headers`` every entry must be present. With an
    empty list the request must carry a ``Date`` header.

    Args:
        present_headers: Names of the headers carried by the request
        required_headers: Configured header names, in signing order

    Raises:
        MissingHeadersError: If configured headers are absent (all of them listed)
        MissingDateError: If no headers are configured and Date is absent
    """
    present = [normalize_header_name(name) for name in present_headers]

    if required_headers:
        missing = find_missing_headers(present, required_headers)
        if missing:
            raise MissingHeadersError(missing)
    elif DATE_HEADER not in present:
        raise MissingDateError()
