from pathlib import Path

from b64image.config.settings import SETTINGS_FILE, Settings, load_settings, save_settings


def test_defaults_when_missing(tmp_path: Path):
    settings = load_settings(tmp_path)
    assert settings.strip_linebreaks is True
    assert settings.wrap_by_context is True


def test_save_then_load(tmp_path: Path):
    settings_dir = tmp_path / "nested" / "dir"
    path = save_settings(settings_dir, Settings(strip_linebreaks=False, wrap_by_context=True))
    assert path == settings_dir / SETTINGS_FILE
    assert load_settings(settings_dir) == Settings(strip_linebreaks=False, wrap_by_context=True)


def test_corrupted_file_falls_back_to_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_text("{not json", encoding="utf-8")
    assert load_settings(tmp_path) == Settings()


def test_non_object_json_falls_back_to_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_text("[1, 2]", encoding="utf-8")
    assert load_settings(tmp_path) == Settings()


def test_unknown_keys_are_ignored():
    settings = Settings.from_dict({"wrap_by_context": False, "theme": "dark"})
    assert settings == Settings(strip_linebreaks=True, wrap_by_context=False)


def test_non_utf8_file_falls_back_to_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_bytes(b"\xff\xfe\x00garbage")
    assert load_settings(tmp_path) == Settings()


def test_unreadable_path_falls_back_to_defaults(tmp_path: Path):
    # a directory where the file should be
    (tmp_path / SETTINGS_FILE).mkdir()
    assert load_settings(tmp_path) == Settings()


def test_non_boolean_values_keep_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_text(
        '{"wrap_by_context": "false", "strip_linebreaks": 0}', encoding="utf-8"
    )
    assert load_settings(tmp_path) == Settings()
    assert Settings.from_dict({"wrap_by_context": False}).wrap_by_context is False
