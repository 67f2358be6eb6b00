from launcher.models import Shortcut
from launcher.table import format_shortcuts, format_table


def test_format_table_pads_columns() -> None:
    out = format_table(("A", "Bee"), [("long value", "x"), ("s", "yy")])
    assert out.splitlines() == [
        "A           Bee",
        "----------  ---",
        "long value  x",
        "s           yy",
    ]


def test_format_shortcuts_with_no_rows_prints_header_only() -> None:
    assert format_shortcuts([]).splitlines() == ["Name  Type  Path", "----  ----  ----"]


def test_format_shortcuts_shows_type_name() -> None:
    out = format_shortcuts([Shortcut("Docs", "C:\\Documents")])
    assert out.splitlines()[2].split() == ["Docs", "DiskLocation", "C:\\Documents"]
