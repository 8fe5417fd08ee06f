from __future__ import annotations

import unittest
from typing import Iterable, Optional

from armstack.arch import ArchClass
from armstack.inventory import first_matching
from armstack.selection import (
    CANDIDATES,
    ImageSelection,
    Scan,
    Service,
    missing_images,
    select_image,
    select_images,
)


class FakeInventory:
    """Fixed local image store: ``listing`` in docker order."""

    def __init__(self, listing: Iterable[str] = ()) -> None:
        self.listing = list(listing)
        self.exists_calls: list[str] = []
        self.scan_calls: list[tuple] = []

    def exists(self, ref: str) -> bool:
        self.exists_calls.append(ref)
        return ref in self.listing

    def scan(self, *needles: str) -> Optional[str]:
        self.scan_calls.append(needles)
        return first_matching(self.listing, needles)


class TestCandidateTable(unittest.TestCase):
    def test_table_covers_every_service_and_arch(self):
        for service in Service:
            for arch in ArchClass:
                with self.subTest(service=service, arch=arch):
                    self.assertIn((service, arch), CANDIDATES)

    def test_arm_runtime_order(self):
        policy = CANDIDATES[(Service.RUNTIME, ArchClass.ARM)]
        self.assertEqual(
            policy.candidates[:3],
            (
                "arm64v8/openjdk:17-jdk",
                "arm64v8/eclipse-temurin:17-jdk",
                "eclipse-temurin:17-jdk",
            ),
        )
        self.assertIsInstance(policy.candidates[3], Scan)
        self.assertEqual(policy.default, "eclipse-temurin:17-jdk")


class TestSelectOnArm(unittest.TestCase):
    def test_nothing_local_defaults_to_native_mysql_and_temurin(self):
        inv = FakeInventory()
        selection = select_images(ArchClass.ARM, inv)

        self.assertEqual(selection.database_image, "arm64v8/mysql:8")
        self.assertEqual(selection.runtime_image, "eclipse-temurin:17-jdk")
        self.assertEqual(inv.scan_calls, [("openjdk", "17", "jdk")])

    def test_generic_mysql_used_when_native_missing(self):
        inv = FakeInventory(["mysql:8"])
        self.assertEqual(
            select_image(Service.DATABASE, ArchClass.ARM, inv), "mysql:8"
        )

    def test_native_mysql_preferred_over_generic(self):
        inv = FakeInventory(["mysql:8", "arm64v8/mysql:8"])
        self.assertEqual(
            select_image(Service.DATABASE, ArchClass.ARM, inv), "arm64v8/mysql:8"
        )

    def test_runtime_priority_order(self):
        cases = [
            (
                ["eclipse-temurin:17-jdk", "arm64v8/eclipse-temurin:17-jdk", "arm64v8/openjdk:17-jdk"],
                "arm64v8/openjdk:17-jdk",
            ),
            (
                ["eclipse-temurin:17-jdk", "arm64v8/eclipse-temurin:17-jdk"],
                "arm64v8/eclipse-temurin:17-jdk",
            ),
            (["eclipse-temurin:17-jdk", "openjdk:17-jdk"], "eclipse-temurin:17-jdk"),
        ]
        for listing, expected in cases:
            with self.subTest(listing=listing):
                inv = FakeInventory(listing)
                self.assertEqual(
                    select_image(Service.RUNTIME, ArchClass.ARM, inv), expected
                )
                self.assertEqual(inv.scan_calls, [])

    def test_scan_ignores_jre_and_bare_17_tags(self):
        inv = FakeInventory(["openjdk:17-jre", "openjdk:17"])
        self.assertEqual(
            select_image(Service.RUNTIME, ArchClass.ARM, inv),
            "eclipse-temurin:17-jdk",
        )

    def test_scan_picks_first_listed_openjdk_17(self):
        inv = FakeInventory(["mysql:8", "openjdk:17-jdk-bullseye", "openjdk:17-jdk"])
        self.assertEqual(
            select_image(Service.RUNTIME, ArchClass.ARM, inv),
            "openjdk:17-jdk-bullseye",
        )


class TestSelectOnOther(unittest.TestCase):
    def test_database_is_always_generic_mysql(self):
        for listing in ([], ["arm64v8/mysql:8"], ["mysql:8"]):
            with self.subTest(listing=listing):
                inv = FakeInventory(listing)
                self.assertEqual(
                    select_image(Service.DATABASE, ArchClass.OTHER, inv), "mysql:8"
                )

    def test_temurin_wins_regardless_of_openjdk(self):
        for listing in (["eclipse-temurin:17-jdk"], ["openjdk:17-jdk", "eclipse-temurin:17-jdk"]):
            with self.subTest(listing=listing):
                inv = FakeInventory(listing)
                self.assertEqual(
                    select_image(Service.RUNTIME, ArchClass.OTHER, inv),
                    "eclipse-temurin:17-jdk",
                )

    def test_openjdk_used_when_temurin_missing(self):
        inv = FakeInventory(["openjdk:17-jdk"])
        self.assertEqual(
            select_image(Service.RUNTIME, ArchClass.OTHER, inv), "openjdk:17-jdk"
        )

    def test_no_scan_off_arm(self):
        inv = FakeInventory(["someone/openjdk:17-jdk"])
        self.assertEqual(
            select_image(Service.RUNTIME, ArchClass.OTHER, inv),
            "eclipse-temurin:17-jdk",
        )
        self.assertEqual(inv.scan_calls, [])


class TestImageSelection(unittest.TestCase):
    def test_empty_reference_rejected(self):
        with self.assertRaises(ValueError):
            ImageSelection(database_image="", runtime_image="eclipse-temurin:17-jdk")
        with self.assertRaises(ValueError):
            ImageSelection(database_image="mysql:8", runtime_image="")

    def test_selection_is_frozen(self):
        sel = ImageSelection("mysql:8", "eclipse-temurin:17-jdk")
        with self.assertRaises(Exception):
            sel.database_image = "other"  # type: ignore[misc]

    def test_missing_images(self):
        sel = ImageSelection("arm64v8/mysql:8", "eclipse-temurin:17-jdk")
        inv = FakeInventory(["eclipse-temurin:17-jdk"])
        self.assertEqual(missing_images(sel, inv), ["arm64v8/mysql:8"])


if __name__ == "__main__":
    unittest.main()
