"""
Resolution of a resource name against an ordered list of candidate locations.

A location is anything directory-like that supports ``/`` and ``open``:
a ``pathlib.Path`` or an ``importlib.resources`` ``Traversable``.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO

import structlog

from country_lookup.reference.errors import ResourceNotFoundError

logger = structlog.get_logger()

PACKAGE = "country_lookup"

Location = Path | Traversable


def default_candidates() -> list[Location]:
    """Package root first, then the namespaced data directory."""
    root = files(PACKAGE)
    return [root, root / "data"]


@contextmanager
def open_first(
    resource_name: str,
    candidates: Sequence[Location],
) -> Iterator[tuple[str, BinaryIO]]:
    """
    Open the first candidate that holds ``resource_name``.

    Args:
        resource_name: Logical resource name (a filename)
        candidates: Locations tried in order

    Yields:
        (resolved location, binary stream). The stream is closed on exit.

    Raises:
        ResourceNotFoundError: If no candidate could be opened
    """
    attempted: list[str] = []

    for candidate in candidates:
        target = candidate / resource_name
        attempted.append(str(target))
        try:
            stream = target.open("rb")
        except OSError as e:
            logger.debug("reference_resource_missing", location=str(target), reason=str(e))
            continue

        with stream:
            yield str(target), stream
        return

    raise ResourceNotFoundError(resource_name, attempted)
