import pytest

from pixmill.config import ConfigError, ConfigManager, EngineConfig


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigManager(tmp_path / "nope.json").load()
    assert config == EngineConfig()


def test_save_then_load(tmp_path):
    manager = ConfigManager(tmp_path / "sub" / "pixmill.json")
    manager.save(EngineConfig(mosaic_seeds=12, random_seed=5, history_limit=3, output_scale=2))
    loaded = manager.load()
    assert loaded.mosaic_seeds == 12
    assert loaded.random_seed == 5
    assert loaded.history_limit == 3
    assert loaded.output_scale == 2


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "c.json"
    path.write_text('{"mosaic_seeds": 9, "colour": "blue"}', encoding="utf-8")
    config = ConfigManager(path).load()
    assert config.mosaic_seeds == 9
    assert config.output_scale == 1


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[1, 2]",
        '{"mosaic_seeds": 0}',
        '{"output_scale": 0}',
        '{"mosaic_seeds": "ten"}',
        '{"output_scale": "2"}',
        '{"output_scale": 1.5}',
        '{"history_limit": "x"}',
        '{"random_seed": 2.5}',
        '{"mosaic_seeds": true}',
    ],
)
def test_bad_files(tmp_path, text):
    path = tmp_path / "c.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager(path).load()


def test_null_optionals_are_accepted(tmp_path):
    path = tmp_path / "c.json"
    path.write_text('{"random_seed": null, "history_limit": null}', encoding="utf-8")
    config = ConfigManager(path).load()
    assert config.random_seed is None
    assert config.history_limit is None
