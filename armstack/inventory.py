from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .engine import DockerEngine


NONE_TAG = "<none>"


class ImageInventory:
    """
    Read-only view of the local docker image store.

    Probe failures (daemon down, docker missing, malformed reference) are
    reported as "absent" and an empty listing; nothing here raises.
    """

    def __init__(self, engine: DockerEngine) -> None:
        self.engine = engine

    def exists(self, ref: str) -> bool:
        try:
            return self.engine.image_exists(ref)
        except OSError:
            return False

    def images(self) -> List[str]:
        try:
            refs = self.engine.list_images()
        except OSError:
            return []
        return [r for r in refs if NONE_TAG not in r]

    def scan(self, *needles: str) -> Optional[str]:
        """
        First listed image whose reference contains the needles in order.

        Order follows docker's listing, which docker does not guarantee to be
        stable; with several matches the winner is whatever comes first.
        """
        return first_matching(self.images(), needles)

    def matching_any(self, needles: Iterable[str], limit: int = 10) -> List[str]:
        keys = tuple(needles)
        hits = [r for r in self.images() if any(k in r for k in keys)]
        return hits[:limit]


def first_matching(refs: Iterable[str], needles: Iterable[str]) -> Optional[str]:
    """
    First ref containing the needles in the given order, each one after the
    previous match (``openjdk:17-jdk`` matches openjdk, 17, jdk; ``openjdk:17-jre``
    does not).
    """
    pattern = re.compile(".*".join(re.escape(n) for n in needles))
    for ref in refs:
        if pattern.search(ref):
            return ref
    return None
