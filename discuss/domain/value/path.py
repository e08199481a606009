"""Ancestor path codec.

A comment stores the ids of its ancestors, root first and immediate parent
last. Persisted, that sequence is a single string of ids joined by ``/``;
the empty sequence (a top-level comment) is the empty string.
"""

from typing import Iterable
from uuid import UUID

from discuss.domain.error import MalformedPathError
from discuss.domain.value.identifiers import CommentId

SEPARATOR = "/"


def encode_path(ancestors: Iterable[CommentId]) -> str:
    """Encode an ancestor sequence into its stored string form.

    Args:
        ancestors: Ancestor ids, root first

    Returns:
        The ids joined by ``/`` (empty string for no ancestors)

    Raises:
        MalformedPathError: If an id cannot be represented in a path
    """
    segments = []
    for ancestor in ancestors:
        segment = str(ancestor)
        if not segment or SEPARATOR in segment:
            raise MalformedPathError(f"Cannot encode ancestor id {segment!r}")
        segments.append(segment)
    return SEPARATOR.join(segments)


def decode_path(path: str | None) -> tuple[CommentId, ...]:
    """Decode a stored path back into its ancestor ids.

    Args:
        path: Stored path string (None or empty for a top-level comment)

    Returns:
        Ancestor ids in root-to-parent order

    Raises:
        MalformedPathError: On an empty segment, a segment that is not a
            comment id, or an id appearing twice
    """
    if not path:
        return ()

    ancestors: list[CommentId] = []
    for segment in path.split(SEPARATOR):
        if not segment:
            raise MalformedPathError(f"Empty segment in path {path!r}")
        try:
            ancestor = CommentId(UUID(segment))
        except ValueError:
            raise MalformedPathError(f"Invalid comment id {segment!r} in path")
        if ancestor in ancestors:
            raise MalformedPathError(f"Comment id {segment} repeated in path")
        ancestors.append(ancestor)
    return tuple(ancestors)
