"""IPv6 text serialization.

format_segments() produces the RFC 5952 canonical form:
  - lowercase hex with leading zeros removed from every group
  - the longest run of two or more zero groups replaced by '::'
  - on a tie, the first (leftmost) such run is the one compressed
  - a single zero group is never compressed

The output depends only on the segment values, never on how the
address was written when it was parsed.
"""

from __future__ import annotations

from collections.abc import Sequence

# 8 groups of 4 hex digits plus 7 separators
MAX_TEXT_LENGTH = 39


def longest_zero_run(segments: Sequence[int]) -> tuple[int, int]:
    """Find the first longest run of zero segments.

    Returns:
        (start, length) of the run; (0, 0) when no segment is zero.

    >>> longest_zero_run([0x2001, 0, 0, 0x5678, 0x9abc, 0, 0, 0x2222])
    (1, 2)
    >>> longest_zero_run([1, 2, 3, 4, 5, 6, 7, 8])
    (0, 0)
    """
    best_start, best_length = 0, 0
    run_start, run_length = 0, 0
    for index, segment in enumerate(segments):
        if segment != 0:
            run_length = 0
            continue
        if run_length == 0:
            run_start = index
        run_length += 1
        # Strictly greater keeps the earliest run on ties
        if run_length > best_length:
            best_start, best_length = run_start, run_length
    return best_start, best_length


def format_segments(segments: Sequence[int]) -> str:
    """Render eight segments in RFC 5952 canonical text form.

    >>> format_segments([0x2001, 0x0db8, 0, 0, 0, 0, 0, 1])
    '2001:db8::1'
    >>> format_segments([0] * 8)
    '::'
    >>> format_segments([0x2001, 0x0db8, 0x8a2e, 0x7334, 0, 0, 0, 0])
    '2001:db8:8a2e:7334::'
    """
    start, length = longest_zero_run(segments)
    if length < 2:
        return ":".join(f"{segment:x}" for segment in segments)

    end = start + length
    out = []
    for index, segment in enumerate(segments):
        if start <= index < end:
            if index == start:
                out.append("::")
            continue
        # '::' already separates the run from the group that follows it
        if index > 0 and index != end:
            out.append(":")
        out.append(f"{segment:x}")
    return "".join(out)


def format_segments_exploded(segments: Sequence[int]) -> str:
    """Render eight segments as full 4-digit groups with no compression.

    >>> format_segments_exploded([0x2001, 0x0db8, 0, 0, 0, 0, 0, 1])
    '2001:0db8:0000:0000:0000:0000:0000:0001'
    """
    return ":".join(f"{segment:04x}" for segment in segments)
