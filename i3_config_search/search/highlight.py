"""
Turning matched character positions into highlight spans
"""
from typing import Iterable, List, Tuple

from i3_config_search.core.models import MatchSpan, Matched, Unmatched


def split_indices(indices: Iterable[int], group_length: int) -> Tuple[List[int], List[int]]:
    """
    Split positions in ``group + " " + description`` into per-field positions

    Args:
        indices: Positions into the joined text
        group_length: Length of the group field

    Returns:
        (group positions, description positions); the joining space
        belongs to neither
    """
    group_indices = []
    description_indices = []
    offset = group_length + 1
    for index in indices:
        if index < group_length:
            group_indices.append(index)
        elif index > group_length:
            description_indices.append(index - offset)
    return group_indices, description_indices


def build_spans(text: str, indices: Iterable[int]) -> List[MatchSpan]:
    """
    Group ``text`` into alternating runs of matched and unmatched characters

    Joining the spans' text gives back ``text`` exactly.
    """
    matched = set(indices)
    spans: List[MatchSpan] = []
    start = 0
    for position in range(1, len(text) + 1):
        if position < len(text) and (position in matched) == (start in matched):
            continue
        span_type = Matched if start in matched else Unmatched
        spans.append(span_type(text[start:position]))
        start = position
    return spans


def render_spans(spans: Iterable[MatchSpan], style=None) -> str:
    """
    Join spans back into a string, passing matched text through ``style``
    """
    style = style or (lambda text: text)
    return "".join(style(span.text) if span.matched else span.text for span in spans)
