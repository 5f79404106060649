import json

import pytest

from scriptgen.cli.generate import build_parser, main, resolve_options


@pytest.fixture(name="event_log")
def event_log_fixture(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps(
            {
                "events": [
                    {"action": "goto*", "href": "https://example.com"},
                    {"action": "click", "selector": "#login"},
                ],
                "options": {"waitForSelectorOnClick": False},
            }
        )
    )
    return path


def test_writes_script_to_output_file(event_log, tmp_path):
    output = tmp_path / "script.js"

    main([str(event_log), "--output", str(output), "--no-blank-lines"])

    script = output.read_text()
    assert script.startswith("const puppeteer = require('puppeteer');\n")
    assert "  await page.goto('https://example.com')\n  await page.click('#login')\n" in script
    assert "waitForSelector" not in script


def test_prints_script_to_stdout(event_log, capsys):
    main([str(event_log), "--no-wrap-async", "--headful"])

    out = capsys.readouterr().out
    assert "puppeteer.launch({ headless: false })" in out
    assert "(async () => {" not in out


def test_flags_override_log_options():
    args = build_parser().parse_args(["events.json", "--no-blank-lines", "--custom-line-after-click", "// hi"])

    options = resolve_options(args, {"blankLinesBetweenBlocks": True, "headless": False})

    assert options.blank_lines_between_blocks is False
    assert options.custom_line_after_click == "// hi"
    assert options.headless is False
    assert options.wrap_async is True


def test_missing_log_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.json")])

    assert excinfo.value.code == 1


def test_bad_regex_exits_with_error(event_log):
    with pytest.raises(SystemExit) as excinfo:
        main([str(event_log), "--data-attribute", "data-(", "--use-regex-for-data-attribute"])

    assert excinfo.value.code == 1


def test_non_utf8_log_exits_with_error(tmp_path):
    path = tmp_path / "events.json"
    path.write_bytes(b"\xff")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1


def test_unwritable_output_exits_with_error(event_log, tmp_path):
    output = tmp_path / "missing" / "script.js"

    with pytest.raises(SystemExit) as excinfo:
        main([str(event_log), "--output", str(output)])

    assert excinfo.value.code == 1
