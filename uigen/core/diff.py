"""Line-level comparison between two generations.

Matching is by membership, not position: a line counts as unchanged when the
same literal line occurs anywhere in the other version. Duplicate lines are
present or absent together, never paired one to one. Output lists every line
of the new code first (added or unchanged, in new-code order), followed by the
old lines missing from the new code (removed, in old-code order).

This is not an LCS diff, and swapping it for one changes the output.
"""

from typing import Optional

from uigen.types import DiffKind, DiffLine


def diff_lines(old_code: Optional[str], new_code: str) -> Optional[list[DiffLine]]:
    """Classify lines of `old_code` and `new_code`.

    Returns:
        None when there is no previous code (first generation), else the
        ordered list of DiffLine.
    """
    if old_code is None:
        return None

    old_lines = old_code.split("\n")
    new_lines = new_code.split("\n")
    old_set = set(old_lines)
    new_set = set(new_lines)

    result: list[DiffLine] = []
    for line in new_lines:
        kind = DiffKind.UNCHANGED if line in old_set else DiffKind.ADDED
        result.append(DiffLine(kind=kind, content=line))
    for line in old_lines:
        if line not in new_set:
            result.append(DiffLine(kind=DiffKind.REMOVED, content=line))
    return result


def summarize(diff: Optional[list[DiffLine]]) -> dict[str, int]:
    """Count lines per kind. An absent diff counts as all zeros."""
    counts = {kind.value: 0 for kind in DiffKind}
    for line in diff or []:
        counts[line.kind.value] += 1
    return counts
