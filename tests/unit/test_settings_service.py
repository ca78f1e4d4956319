"""Tests for SettingsService: load, save and settings-form edits."""

import pytest

from linkding_sync.exceptions import UnknownSettingError
from linkding_sync.settings.service import SettingsService, parse_leading_int


class FakeKeyValueStore:
    def __init__(self, data: dict | None = None):
        self._data = dict(data or {})
        self.saves: list[dict] = []

    def load_data(self) -> dict:
        return dict(self._data)

    def save_data(self, data: dict) -> None:
        self._data = dict(data)
        self.saves.append(dict(data))


def make_service(notices, data: dict | None = None):
    store = FakeKeyValueStore(data)
    service = SettingsService(store, notices)
    service.load()
    return service, store


class TestParseLeadingInt:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("42", 42),
            ("  7", 7),
            ("12abc", 12),
            ("-3", -3),
            ("abc", None),
            ("", None),
            ("3.9", 3),
        ],
    )
    def test_parses_integer_prefix(self, raw, expected):
        """parse_leading_int should read the integer prefix of the text."""
        assert parse_leading_int(raw) == expected


class TestLoad:
    def test_settings_before_load_raises(self, notices):
        """Accessing settings before load() is a programming error."""
        service = SettingsService(FakeKeyValueStore(), notices)
        with pytest.raises(RuntimeError):
            _ = service.settings

    def test_load_merges_over_defaults(self, notices):
        """Stored fields override defaults; the rest keep their defaults."""
        service, _ = make_service(notices, {"apiKey": "secret"})
        assert service.settings.api_key == "secret"
        assert service.settings.fetch_limit == 100

    def test_invalid_stored_value_falls_back_to_default(self, notices):
        """An invalid stored value is dropped while valid fields still apply."""
        service, _ = make_service(
            notices, {"fetchLimit": "lots", "fetchOffset": 10, "apiKey": "k"}
        )
        assert service.settings.fetch_limit == 100
        assert service.settings.fetch_offset == 10
        assert service.settings.api_key == "k"


class TestSave:
    def test_save_writes_complete_settings(self, notices):
        """save() should write every field under its storage key."""
        service, store = make_service(notices, {"apiKey": "secret"})
        service.save()
        assert store.saves[-1] == {
            "instanceURL": "http://192.168.50.203:9090",
            "apiKey": "secret",
            "destinationPath": "notes/linkdingnotes",
            "updateIntervalMinutes": 30,
            "searchQuery": "",
            "fetchLimit": 100,
            "fetchOffset": 0,
        }


class TestUpdateField:
    def test_string_field_is_stored_verbatim_and_saved(self, notices):
        """Editing a text field writes through to the store immediately."""
        service, store = make_service(notices)
        service.update_field("searchQuery", "#python async")
        assert service.settings.search_query == "#python async"
        assert store.saves[-1]["searchQuery"] == "#python async"

    def test_numeric_field_parses_input(self, notices):
        """A numeric edit stores the parsed integer."""
        service, store = make_service(notices)
        service.update_field("fetchLimit", "25")
        assert service.settings.fetch_limit == 25
        assert store.saves[-1]["fetchLimit"] == 25
        assert notices.recent() == []

    @pytest.mark.parametrize(
        "key,default",
        [("fetchLimit", 100), ("fetchOffset", 0), ("updateIntervalMinutes", 30)],
    )
    def test_non_numeric_input_resets_to_default(self, notices, key, default):
        """Non-numeric input resets only that field and posts a notice."""
        stored = {
            "fetchLimit": 5,
            "fetchOffset": 5,
            "updateIntervalMinutes": 5,
            "apiKey": "secret",
        }
        service, store = make_service(notices, stored)
        before = service.settings.to_storage()

        service.update_field(key, "not a number")

        after = service.settings.to_storage()
        assert after[key] == default
        for other in before:
            if other != key:
                assert after[other] == before[other]
        assert store.saves[-1] == after
        messages = [n.message for n in notices.recent()]
        assert len(messages) == 1
        assert key in messages[0]
        assert f"Defaulting to {default}" in messages[0]

    def test_zero_input_resets_to_default(self, notices):
        """Zero is a falsy parse and falls back to the default."""
        service, _ = make_service(notices, {"updateIntervalMinutes": 5})
        service.update_field("updateIntervalMinutes", "0")
        assert service.settings.update_interval_minutes == 30
        assert len(notices.recent()) == 1

    def test_negative_input_resets_to_default(self, notices):
        """Negative numbers are rejected like non-numeric input."""
        service, _ = make_service(notices)
        service.update_field("fetchLimit", "-10")
        assert service.settings.fetch_limit == 100

    def test_unknown_key_raises(self, notices):
        """Editing a key that does not exist raises UnknownSettingError."""
        service, store = make_service(notices)
        with pytest.raises(UnknownSettingError):
            service.update_field("colour", "blue")
        assert store.saves == []

    def test_listeners_are_called_after_update(self, notices):
        """Subscribers receive the edited key and the updated settings."""
        service, _ = make_service(notices)
        seen = []
        service.subscribe(lambda key, s: seen.append((key, s.update_interval_minutes)))
        service.update_field("updateIntervalMinutes", "15")
        assert seen == [("updateIntervalMinutes", 15)]
