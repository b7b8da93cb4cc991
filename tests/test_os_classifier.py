from __future__ import annotations

import pytest

from maven_notifier.core import os_classifier
from maven_notifier.core.os_classifier import (
    HOST_OS_NAME,
    OperatingSystem,
    classify,
    default_implementation,
    host_os_name,
)


@pytest.mark.parametrize(
    ("os_name", "expected"),
    [
        ("Mac OS X", OperatingSystem.MACOS),
        ("macOS-14.1-arm64-arm-64bit", OperatingSystem.MACOS),
        ("Windows 10", OperatingSystem.WINDOWS),
        ("WINDOWS-11-10.0.22631-SP0", OperatingSystem.WINDOWS),
        ("Linux", OperatingSystem.OTHER),
        ("FreeBSD", OperatingSystem.OTHER),
        ("", OperatingSystem.OTHER),
    ],
)
def test_classify_is_case_insensitive_substring_match(os_name: str, expected: OperatingSystem) -> None:
    assert classify(os_name) is expected


def test_default_implementation_per_os() -> None:
    assert default_implementation(OperatingSystem.MACOS) == "growl"
    assert default_implementation(OperatingSystem.WINDOWS) == "growl"
    assert default_implementation(OperatingSystem.OTHER) == "notifysend"


def test_host_os_name_is_captured() -> None:
    assert isinstance(HOST_OS_NAME, str)
    assert HOST_OS_NAME


@pytest.mark.parametrize(
    ("system", "expected"),
    [
        ("Darwin", OperatingSystem.MACOS),
        ("Windows", OperatingSystem.WINDOWS),
        ("Linux", OperatingSystem.OTHER),
    ],
)
def test_host_os_name_uses_system_name(
    system: str, expected: OperatingSystem, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(os_classifier.platform, "system", lambda: system)
    monkeypatch.setattr(os_classifier.platform, "platform", lambda: "Linux-6.1-x86_64-with-darwin-win")
    assert classify(host_os_name()) is expected
