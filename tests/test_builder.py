from __future__ import annotations

import pytest
from pydantic import ValidationError

from maven_notifier.config import PROPERTY_TABLE, Property
from maven_notifier.core.builder import ConfigurationBuilder, InvalidPropertyValueError


def test_empty_mapping_gives_defaults() -> None:
    configuration = ConfigurationBuilder(os_name="Linux").build({})
    assert configuration.model_dump() == {
        "implementation": "notifysend",
        "notify_send_path": "notify-send",
        "notify_send_timeout": 2000,
        "notification_center_path": "terminal-notifier",
        "notification_center_activate": "com.apple.Terminal",
        "notification_center_sound": None,
        "growl_host": None,
        "growl_port": 23053,
        "growl_password": None,
        "system_tray_wait_before_end": 2000,
        "snarl_host": "localhost",
        "snarl_port": 9887,
        "snarl_password": None,
        "short_description": False,
        "pushbullet_api_key": None,
        "pushbullet_device": None,
    }


@pytest.mark.parametrize(
    ("os_name", "implementation"),
    [("Mac OS X", "growl"), ("Windows 10", "growl"), ("Linux", "notifysend")],
)
def test_implementation_default_follows_os(os_name: str, implementation: str) -> None:
    assert ConfigurationBuilder(os_name=os_name).build({}).implementation == implementation


def test_file_values_win_over_defaults() -> None:
    configuration = ConfigurationBuilder(os_name="Mac OS X").build({
        "notifier.implementation": "pushbullet",
        "notifier.growl.port": "23054",
        "notifier.growl.host": "growl.local",
        "notifier.notify-send.timeout": "500",
        "notifier.pushbullet.apikey": "secret-key",
        "notifier.pushbullet.device": "phone",
    })
    assert configuration.implementation == "pushbullet"
    assert configuration.growl_port == 23054
    assert configuration.growl_host == "growl.local"
    assert configuration.notify_send_timeout == 500
    assert configuration.pushbullet_api_key == "secret-key"
    assert configuration.pushbullet_device == "phone"
    assert configuration.snarl_host == "localhost"


def test_unknown_implementation_is_kept() -> None:
    configuration = ConfigurationBuilder(os_name="Linux").build({"notifier.implementation": "carrier-pigeon"})
    assert configuration.implementation == "carrier-pigeon"


def test_empty_optional_value_is_unset() -> None:
    configuration = ConfigurationBuilder(os_name="Linux").build({
        "notifier.growl.password": "",
        "notifier.notification-center.sound": "",
    })
    assert configuration.growl_password is None
    assert configuration.notification_center_sound is None


@pytest.mark.parametrize(("raw", "expected"), [("TRUE", True), ("true", True), ("yes", False), ("", False)])
def test_boolean_is_permissive(raw: str, expected: bool) -> None:
    configuration = ConfigurationBuilder(os_name="Linux").build({"notifier.message.short": raw})
    assert configuration.short_description is expected


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("notifier.growl.port", "not-a-number"),
        ("notifier.snarl.port", "98.87"),
        ("notifier.notify-send.timeout", " 2000"),
        ("notifier.system-tray.wait", ""),
        ("notifier.growl.port", "1234\n"),
        ("notifier.snarl.port", "9887\n"),
    ],
)
def test_malformed_integer_fails(key: str, raw: str) -> None:
    with pytest.raises(InvalidPropertyValueError) as excinfo:
        ConfigurationBuilder(os_name="Linux").build({key: raw})
    assert excinfo.value.key == key
    assert excinfo.value.value == raw


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("notifier.growl.port", "70000"),
        ("notifier.snarl.port", "0"),
        ("notifier.notify-send.timeout", "-1"),
    ],
)
def test_out_of_range_integer_fails(key: str, raw: str) -> None:
    with pytest.raises(InvalidPropertyValueError) as excinfo:
        ConfigurationBuilder(os_name="Linux").build({key: raw})
    assert excinfo.value.key == key


def test_build_does_not_mutate_inputs() -> None:
    properties = {"notifier.growl.port": "23054"}
    table_before = {name: (prop.key, prop.default) for name, prop in PROPERTY_TABLE.items()}

    ConfigurationBuilder(os_name="Linux").build(properties)

    assert properties == {"notifier.growl.port": "23054"}
    assert {name: (prop.key, prop.default) for name, prop in PROPERTY_TABLE.items()} == table_before


def test_configuration_is_frozen() -> None:
    configuration = ConfigurationBuilder(os_name="Linux").build({})
    with pytest.raises(ValidationError):
        configuration.growl_port = 1  # type: ignore[misc]


def test_os_name_is_classified_once() -> None:
    builder = ConfigurationBuilder(os_name="Windows 10")
    assert builder.raw_value(Property.IMPLEMENTATION, {}) == "growl"
    assert builder.raw_value(Property.SNARL_HOST, {}) == "localhost"
    assert builder.raw_value(Property.GROWL_HOST, {}) is None
