from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol, Sequence, Tuple, Union

from .arch import ArchClass
from .colors import ok, warn


class Service(str, Enum):
    DATABASE = "database"
    RUNTIME = "runtime"


class Inventory(Protocol):
    def exists(self, ref: str) -> bool: ...

    def scan(self, *needles: str) -> Optional[str]: ...


@dataclass(frozen=True)
class Scan:
    """Candidate that matches any local image containing all ``needles``."""

    needles: Tuple[str, ...]


Candidate = Union[str, Scan]


@dataclass(frozen=True)
class CandidateList:
    candidates: Tuple[Candidate, ...]
    default: str


@dataclass(frozen=True)
class ImageSelection:
    database_image: str
    runtime_image: str

    def __post_init__(self) -> None:
        if not self.database_image or not self.runtime_image:
            raise ValueError(
                f"incomplete image selection: database={self.database_image!r} "
                f"runtime={self.runtime_image!r}"
            )

    def as_tuple(self) -> Tuple[str, str]:
        return (self.database_image, self.runtime_image)


MYSQL_ARM = "arm64v8/mysql:8"
MYSQL = "mysql:8"
OPENJDK_ARM = "arm64v8/openjdk:17-jdk"
TEMURIN_ARM = "arm64v8/eclipse-temurin:17-jdk"
TEMURIN = "eclipse-temurin:17-jdk"
OPENJDK = "openjdk:17-jdk"

JDK_SCAN = Scan(needles=("openjdk", "17", "jdk"))

# Preference order per (service, arch). Native images first; ``default`` is
# what gets pulled when nothing in the list is present locally.
CANDIDATES: Dict[Tuple[Service, ArchClass], CandidateList] = {
    (Service.DATABASE, ArchClass.ARM): CandidateList((MYSQL_ARM, MYSQL), MYSQL_ARM),
    (Service.DATABASE, ArchClass.OTHER): CandidateList((MYSQL,), MYSQL),
    (Service.RUNTIME, ArchClass.ARM): CandidateList(
        (OPENJDK_ARM, TEMURIN_ARM, TEMURIN, JDK_SCAN), TEMURIN
    ),
    (Service.RUNTIME, ArchClass.OTHER): CandidateList((TEMURIN, OPENJDK), TEMURIN),
}


def _is_native(ref: str) -> bool:
    return ref.startswith("arm64v8/")


def _resolve(candidate: Candidate, inventory: Inventory) -> Optional[str]:
    if isinstance(candidate, Scan):
        warn(f"🔍 Searching local images for {'*'.join(candidate.needles)}")
        return inventory.scan(*candidate.needles)
    return candidate if inventory.exists(candidate) else None


def select_image(
    service: Service, arch: ArchClass, inventory: Inventory
) -> str:
    """
    Walk the candidate list for ``(service, arch)`` and return the first image
    present locally, or the list default if none is.
    """
    policy = CANDIDATES[(service, arch)]

    for candidate in policy.candidates:
        ref = _resolve(candidate, inventory)
        if ref is None:
            continue
        if isinstance(candidate, Scan):
            ok(f"✅ Using local {service.value} image found by search: {ref}")
        elif arch is ArchClass.ARM and not _is_native(ref):
            warn(f"⚠ Using local generic {service.value} image (not ARM native): {ref}")
        else:
            ok(f"✅ Using local {service.value} image: {ref}")
        return ref

    warn(f"📥 No local {service.value} image found, will pull {policy.default}")
    return policy.default


def select_images(arch: ArchClass, inventory: Inventory) -> ImageSelection:
    selection = ImageSelection(
        database_image=select_image(Service.DATABASE, arch, inventory),
        runtime_image=select_image(Service.RUNTIME, arch, inventory),
    )
    ok("📦 Selected images:")
    ok(f"   MySQL: {selection.database_image}")
    ok(f"   JDK:   {selection.runtime_image}")
    return selection


def missing_images(selection: ImageSelection, inventory: Inventory) -> Sequence[str]:
    return [ref for ref in selection.as_tuple() if not inventory.exists(ref)]
