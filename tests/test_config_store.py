import logging
import re

import pytest

from launcher.config_store import (
    ConfigLocation,
    append_shortcut,
    find_shortcuts,
    parse_configuration,
    parse_line,
    read_configuration,
)
from launcher.constants import CONFIG_FILE_NAME, CONFIG_HEADER, ENV_CONFIG_DIR
from launcher.errors import MalformedLineError
from launcher.models import Shortcut


def test_parse_line_splits_on_first_colon() -> None:
    assert parse_line("Foo: C:\\bar") == Shortcut(name="Foo", path="C:\\bar")


def test_parse_line_strips_surrounding_quotes() -> None:
    s = parse_line('Foo: "C:\\bar baz"')
    assert s.path == "C:\\bar baz"


def test_parse_line_strips_only_one_quote_per_side() -> None:
    assert parse_line('Foo: ""quoted""').path == '"quoted"'


def test_parse_line_trims_name_and_path() -> None:
    assert parse_line("  Site  :   https://example.com  ") == Shortcut("Site", "https://example.com")


def test_parse_line_without_colon_is_malformed() -> None:
    with pytest.raises(MalformedLineError):
        parse_line("no delimiter here")


def test_parse_configuration_skips_comments_and_blank_lines() -> None:
    shortcuts = parse_configuration(["# comment", "", "   ", "  # indented: comment", "A: 1"])
    assert shortcuts == {"A": Shortcut("A", "1")}


def test_parse_configuration_last_duplicate_wins() -> None:
    shortcuts = parse_configuration(["A: 1", "B: x", "A: 2"])
    assert shortcuts["A"] == Shortcut("A", "2")
    assert len(shortcuts) == 2


def test_parse_configuration_skips_malformed_line_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="launcher.config_store"):
        shortcuts = parse_configuration(["A: 1", "broken", "B: 2"])
    assert set(shortcuts) == {"A", "B"}
    assert "line 2" in caplog.text


def test_parse_configuration_strict_reports_line_number() -> None:
    with pytest.raises(MalformedLineError) as info:
        parse_configuration(["A: 1", "broken"], strict=True)
    assert info.value.line_number == 2
    assert info.value.line == "broken"


def test_ensure_creates_folder_and_header(tmp_path) -> None:
    loc = ConfigLocation(tmp_path / "nested" / "Launcher")
    path = loc.ensure()
    assert path == loc.folder / CONFIG_FILE_NAME
    assert path.read_text(encoding="utf-8") == CONFIG_HEADER


def test_ensure_keeps_existing_file(location) -> None:
    location.path.write_text("A: 1", encoding="utf-8")
    location.ensure()
    assert location.path.read_text(encoding="utf-8") == "A: 1"


def test_fresh_configuration_is_empty(location) -> None:
    assert read_configuration(location) == {}


def test_append_then_read_round_trip(location) -> None:
    append_shortcut(location, "Docs", r"C:\Users\me\Documents")
    append_shortcut(location, "Site", "https://example.com")
    shortcuts = read_configuration(location)
    assert shortcuts["Docs"] == Shortcut("Docs", r"C:\Users\me\Documents")
    assert shortcuts["Site"] == Shortcut("Site", "https://example.com")


def test_read_configuration_is_not_cached(location, write_config) -> None:
    write_config("A: 1")
    assert read_configuration(location)["A"].path == "1"
    write_config("A: 2")
    assert read_configuration(location)["A"].path == "2"


def test_find_shortcuts_matches_name_or_path_case_insensitive() -> None:
    shortcuts = parse_configuration(["Docs: C:\\Documents", "Site: https://EXAMPLE.com", "Tool: t.exe"])
    names = sorted(s.name for s in find_shortcuts(shortcuts, "example|DOC"))
    assert names == ["Docs", "Site"]


def test_find_shortcuts_invalid_pattern() -> None:
    with pytest.raises(re.error):
        find_shortcuts({}, "(")


def test_default_location_honors_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(ENV_CONFIG_DIR, str(tmp_path / "custom"))
    assert ConfigLocation.default().folder == tmp_path / "custom"


def test_default_location_uses_app_data_folder(monkeypatch) -> None:
    monkeypatch.delenv(ENV_CONFIG_DIR, raising=False)
    assert ConfigLocation.default().folder.name == "Launcher"


def test_undecodable_bytes_are_replaced_and_logged(location, caplog) -> None:
    location.path.write_bytes("Caf\u00e9: C:\\caf\u00e9\n".encode("cp1252"))
    with caplog.at_level(logging.WARNING, logger="launcher.config_store"):
        shortcuts = read_configuration(location)
    assert shortcuts["Caf\ufffd"].path == "C:\\caf\ufffd"
    assert "not valid UTF-8" in caplog.text
