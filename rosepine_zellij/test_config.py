"""
Tests for path resolution and the config.kdl theme rewrite.

Run from the project directory:
    pytest rosepine_zellij
"""

from pathlib import Path

from rosepine_zellij.config import ZellijPaths, rewrite_theme, theme_line, write_theme


def test_paths_from_home(tmp_path):
    paths = ZellijPaths.from_home(tmp_path)

    assert paths.config_dir == tmp_path / ".config" / "zellij"
    assert paths.config_file == paths.config_dir / "config.kdl"
    assert paths.themes_dir == paths.config_dir / "themes"


def test_display_shortens_home(tmp_path):
    paths = ZellijPaths.from_home(tmp_path)

    assert paths.display(paths.themes_dir) == str(Path("~/.config/zellij/themes"))
    assert paths.display(Path("/etc/zellij")) == "/etc/zellij"


def test_theme_line():
    assert theme_line("rose-pine") == 'theme "rose-pine"'


def test_rewrite_replaces_single_theme_line():
    text = 'keybinds {\n}\ntheme "dracula"\ndefault_shell "fish"'
    result = rewrite_theme(text, "rose-pine-dawn")

    lines = result.split("\n")
    assert lines == ["keybinds {", "}", 'default_shell "fish"', 'theme "rose-pine-dawn"']
    assert len(lines) == len(text.split("\n"))


def test_rewrite_drops_every_theme_prefixed_line():
    text = 'theme "a"\nthemepark true\nsimplified_ui true\ntheme "b"'
    result = rewrite_theme(text, "rose-pine")

    assert result == 'simplified_ui true\ntheme "rose-pine"'


def test_rewrite_keeps_indented_theme_lines():
    # Only lines that start with the token are removed
    text = 'themes {\n    theme "nested"\n}'
    result = rewrite_theme(text, "rose-pine")

    assert result == '    theme "nested"\n}\ntheme "rose-pine"'


def test_rewrite_keeps_trailing_newline():
    text = 'pane_frames false\ntheme "old"\n'
    assert rewrite_theme(text, "rose-pine-moon") == 'pane_frames false\ntheme "rose-pine-moon"\n'


def test_rewrite_without_theme_line_appends():
    assert rewrite_theme("mouse_mode true", "rose-pine") == 'mouse_mode true\ntheme "rose-pine"'


def test_write_theme_creates_missing_file(tmp_path):
    config_file = tmp_path / "config.kdl"
    write_theme(config_file, "rose-pine-moon")

    assert config_file.read_text(encoding="utf-8") == 'theme "rose-pine-moon"'


def test_write_theme_rewrites_existing_file(tmp_path):
    config_file = tmp_path / "config.kdl"
    config_file.write_text('theme "old"\nscroll_buffer_size 10000\n', encoding="utf-8")

    write_theme(config_file, "rose-pine")

    assert config_file.read_text(encoding="utf-8") == 'scroll_buffer_size 10000\ntheme "rose-pine"\n'


def test_write_theme_is_idempotent(tmp_path):
    config_file = tmp_path / "config.kdl"
    config_file.write_text("copy_on_select true", encoding="utf-8")

    write_theme(config_file, "rose-pine-dawn")
    once = config_file.read_text(encoding="utf-8")
    write_theme(config_file, "rose-pine-dawn")

    assert config_file.read_text(encoding="utf-8") == once
    assert once.count("theme") == 1


def test_write_theme_keeps_crlf_line_endings(tmp_path):
    config_file = tmp_path / "config.kdl"
    config_file.write_bytes(b'mouse_mode true\r\ntheme "x"\r\n')

    write_theme(config_file, "rose-pine")

    assert config_file.read_bytes() == b'mouse_mode true\r\ntheme "rose-pine"\n'
