import io

import pytest

from chainreact.settings import PROMPT, GameSettings, SettingsError, parse_settings, prompt_settings


def test_parse_valid_line():
    assert parse_settings("6 7 3") == GameSettings(6, 7, 3)


def test_parse_ignores_repeated_spaces():
    assert parse_settings("   8  9   6 ") == GameSettings(8, 9, 6)


def test_parse_accepts_trailing_text_after_digits():
    assert parse_settings("6x 7 3") == GameSettings(6, 7, 3)


@pytest.mark.parametrize("line", ["", "6 7", "6 7 3 4", "6\t7 3"])
def test_parse_wrong_field_count(line):
    with pytest.raises(SettingsError, match="Invalid input. Defaulting"):
        parse_settings(line)


@pytest.mark.parametrize("line", ["4 7 3", "6 4 3", "6 7 1", "6 7 7", "-6 7 3"])
def test_parse_out_of_range(line):
    with pytest.raises(SettingsError, match="out of allowed range"):
        parse_settings(line)


@pytest.mark.parametrize("line", ["a 7 3", "6 b 3", "6 7 x", "99999999999 7 3"])
def test_parse_non_numeric_or_overflow(line):
    with pytest.raises(SettingsError, match="Invalid input values"):
        parse_settings(line)


def test_settings_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings("nonsense")


def test_set_defaults_restores_default_values():
    settings = GameSettings(10, 12, 4)
    settings.set_defaults()
    assert settings == GameSettings()


def test_prompt_reads_valid_line():
    out, err = io.StringIO(), io.StringIO()
    result = prompt_settings(io.StringIO("9 8 5\n"), out, err)
    assert result == GameSettings(9, 8, 5)
    assert out.getvalue() == PROMPT
    assert err.getvalue() == ""


def test_prompt_falls_back_to_defaults_and_reports():
    out, err = io.StringIO(), io.StringIO()
    result = prompt_settings(io.StringIO("3 3 3\n"), out, err)
    assert result == GameSettings()
    assert err.getvalue() == "Input values out of allowed range. Using defaults.\n"


def test_prompt_on_empty_input_uses_defaults():
    err = io.StringIO()
    result = prompt_settings(io.StringIO(""), io.StringIO(), err)
    assert result == GameSettings()
    assert "Invalid input." in err.getvalue()