"""
histogram.py - text histograms for grouped counts.

Renders a key -> count mapping as a horizontal bar chart (one line per key)
or a vertical bar chart (bars growing upwards, labels underneath). Both
renderers return the lines instead of printing them; an empty mapping
renders as a single "nothing to plot" line.

Module: insurance_stats.histogram
"""
from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

__all__ = ['bar', 'render_horizontal', 'render_vertical', 'NOTHING_TO_PLOT']

NOTHING_TO_PLOT = "Nothing to plot."


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def bar(count: int, max_count: int, max_width: int, fill: str = '#') -> str:
    """
    Bar for `count` scaled so that `max_count` fills `max_width` characters.

    A positive count always gets at least one character; zero gets none.
    """
    if count <= 0 or max_count <= 0:
        return ''
    length = max(_round_half_up(count / max_count * max_width), 1)
    return fill * length


def render_horizontal(counts: Mapping[Any, int], max_width: int = 50, fill: str = '#',
                      empty_message: str = NOTHING_TO_PLOT) -> List[str]:
    """
    Render one '<key>: <bar> (<count>)' line per key, in mapping order.

    Args:
        counts: key -> count, already in display order.
        max_width: Length of the longest bar.
        fill: Bar character.
        empty_message: Line returned for an empty mapping.

    Returns:
        List of lines; keys right-aligned to the widest key.
    """
    if not counts:
        return [empty_message]
    max_count = max(counts.values())
    label_width = max(len(str(key)) for key in counts)
    return [
        f"{str(key):>{label_width}}: {bar(count, max_count, max_width, fill)} ({count})"
        for key, count in counts.items()
    ]


def render_vertical(counts: Mapping[Any, int], labels: Optional[Mapping[Any, str]] = None,
                    marker: str = '#', empty_message: str = NOTHING_TO_PLOT) -> List[str]:
    """
    Render a vertical bar chart with one column per key.

    Rows run from the peak count down to 1; a column shows the marker when
    its count reaches the row's level. The last line holds the key labels.

    Args:
        counts: key -> count, already in display order.
        labels: Optional key -> label overrides (e.g. short names).
        marker: Character drawn for a filled cell.
        empty_message: Line returned for an empty mapping.

    Returns:
        List of lines.
    """
    if not counts:
        return [empty_message]
    labels = labels or {}
    names = [str(labels.get(key, key)) for key in counts]
    column_width = max(3, max(len(name) for name in names) + 1)
    peak = max(1, max(counts.values()))

    filled = marker.center(column_width)
    blank = ' ' * column_width
    lines = []
    for level in range(peak, 0, -1):
        lines.append(''.join(filled if count >= level else blank for count in counts.values()))
    lines.append(''.join(f"{name:>{column_width - 1}} " for name in names))
    return lines
