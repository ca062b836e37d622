"""Selection of image files and their split into 'A' and 'B' frames."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

IMAGE_EXTENSIONS = (
    ".tif",
    ".png",
    ".bmp",
    ".jpg",
    ".jpeg",
    ".gif",
    ".pbm",
    ".pgm",
    ".ppm",
    ".xbm",
    ".xpm",
)


def filter_image_files(directory: str, names: Iterable[str]) -> list[str]:
    """Paths of the names with a recognised image extension, sorted.

    The extension check ignores case; each kept name is joined to
    ``directory`` with a forward slash.
    """
    return sorted(
        f"{directory}/{name}"
        for name in names
        if name.lower().endswith(IMAGE_EXTENSIONS)
    )


def only_num(text: str) -> bool:
    """True if the text holds no letters."""
    return not any(char.isalpha() for char in text)


def remove_indices(files: Sequence[str], selected: Sequence[int]) -> list[str]:
    """The files without those at the given positions.

    ``selected`` is read in ascending order: each position is dropped only
    once every earlier selected position has been reached.
    """
    kept = []
    pending = iter(selected)
    target = next(pending, None)
    for position, name in enumerate(files):
        if target == position:
            target = next(pending, None)
        else:
            kept.append(name)
    return kept


def _shared_part(first: str, names: Sequence[str]) -> str:
    """The longest leading part of ``first`` (shorter than it) found in every name."""
    common = first
    while True:
        common = common[:-1]
        if not common or all(common in name for name in names):
            return common


def _trailing_part(stripped: Sequence[str]) -> str:
    """Drop leading characters of the first entry until the match tally is met."""
    common = stripped[0]
    tally = 0
    while True:
        common = common[1:]
        tally += sum(common in entry for entry in stripped)
        if tally == len(stripped) or not common:
            return common


def _is_numbered(ordered: Sequence[str]) -> bool:
    prefix = _shared_part(ordered[0], ordered)
    stripped = [name.replace(prefix, "") for name in ordered]
    suffix = _trailing_part(stripped)
    return only_num(stripped[0].replace(suffix, ""))


def _consecutive(ordered: Sequence[str]) -> tuple[list[str], list[str]]:
    end = 2 * (len(ordered) // 2)
    return list(ordered[0:end:2]), list(ordered[1:end:2])


def _by_marker(ordered: Sequence[str]) -> tuple[list[str], list[str]]:
    if len(ordered) % 2:
        raise ValueError("cannot split an odd number of marked names into pairs")
    pending = list(zip(ordered[0::2], ordered[1::2]))
    frame_a: list[str] = []
    frame_b: list[str] = []
    while pending:
        shortest = min(len(a) for a, _ in pending)
        while True:
            kept = 0
            cursor = 0
            # A taken pair shifts the next one under the cursor, which the
            # scan then steps over; it is picked up on a later pass.
            while cursor < len(pending):
                a, b = pending[cursor]
                if len(a) == shortest:
                    frame_a.append(a)
                    frame_b.append(b)
                    del pending[cursor]
                else:
                    kept += 1
                cursor += 1
            if kept == len(pending):
                break
    return frame_a, frame_b


def pair_images(names: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split image names into matching 'A' and 'B' frame lists.

    Names are sorted first. Names of equal length, or names that differ only
    by a number, are paired in consecutive order; names marked like ``1a``,
    ``1b`` are paired in consecutive order and the pairs ranked by length.
    """
    ordered = sorted(names)
    if not ordered:
        return [], []
    length = len(ordered[0])
    if all(len(name) == length for name in ordered) or _is_numbered(ordered):
        return _consecutive(ordered)
    return _by_marker(ordered)