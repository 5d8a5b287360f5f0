import pytest

from asciifx.managers.config_manager import ConfigManager
from asciifx.managers.effect_defaults_manager import EffectDefaultsManager
from asciifx.models.effects import LevelsSettings, RemapCharactersSettings
from asciifx.models.enums import EffectKind, InterpolationKind, LogLevel
from asciifx.models.errors import ConfigError
from asciifx.utils.logger import get_logger


@pytest.fixture(autouse=True)
def restore_logger():
    logger = get_logger()
    level, colors = logger.min_level, logger.use_colors
    yield
    logger.min_level, logger.use_colors = level, colors


def test_factory_defaults_load():
    config = ConfigManager()
    config.load()

    assert config.effect_defaults.get(EffectKind.LEVELS) == LevelsSettings()
    assert config.dither_seed == 0
    assert [s.value for s in config.gradient_defaults.character.stops] == ["#", "@"]


def test_monolithic_config(tmp_path):
    path = tmp_path / "asciifx.yaml"
    path.write_text(
        "dither_seed: 42\n"
        "logging:\n"
        "  level: WARN\n"
        "  use_colors: false\n"
        "effects:\n"
        "  LEVELS:\n"
        "    midtones_input: 1.5\n"
        "gradient:\n"
        "  character:\n"
        "    interpolation: BAYER_4X4\n"
        "    dither_strength: 0.5\n"
        "    stops:\n"
        "      - {position: 0, value: '.'}\n"
        "      - {position: 1, value: '#'}\n"
    )

    config = ConfigManager(path)
    config.load()

    assert config.effect_defaults.get(EffectKind.LEVELS).midtones_input == 1.5
    assert config.effect_defaults.get(EffectKind.REMAP_CHARACTERS) == RemapCharactersSettings()
    assert config.dither_seed == 42
    assert config.gradient_defaults.dither_seed == 42
    assert config.gradient_defaults.character.interpolation == InterpolationKind.BAYER_4X4
    assert get_logger().min_level == LogLevel.WARN
    assert get_logger().use_colors is False


def test_include_config(tmp_path):
    (tmp_path / "effects.yaml").write_text("effects:\n  HUE_SATURATION:\n    hue: 90\n")
    (tmp_path / "misc.yaml").write_text("dither_seed: 7\n")
    main = tmp_path / "main.yaml"
    main.write_text("include:\n  - effects.yaml\n  - misc.yaml\n")

    config = ConfigManager(main, apply_logging=False)
    data = config.load()

    assert data["dither_seed"] == 7
    assert config.effect_defaults.get(EffectKind.HUE_SATURATION).hue == 90


def test_missing_config_falls_back(tmp_path):
    config = ConfigManager(tmp_path / "absent.yaml", apply_logging=False)
    config.load()

    assert config.effect_defaults.get(EffectKind.LEVELS) == LevelsSettings()


def test_invalid_config_falls_back(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("effects:\n  LEVELS:\n    midtones_input: 9\n")

    config = ConfigManager(path, apply_logging=False)
    config.load()

    assert config.effect_defaults.get(EffectKind.LEVELS).midtones_input == 1.0


def test_unknown_effect_falls_back(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("effects:\n  BLUR: {}\n")

    config = ConfigManager(path, apply_logging=False)
    config.load()

    assert "BLUR" not in config.data.get("effects", {})


def test_broken_factory_defaults_raise(tmp_path):
    broken = tmp_path / "defaults.yaml"
    broken.write_text("dither_seed: [not, an, int]\n")

    with pytest.raises(ConfigError):
        ConfigManager(defaults_path=broken, apply_logging=False).load()


def test_effect_defaults_manager_fills_missing_kinds():
    defaults = EffectDefaultsManager({"LEVELS": {"output_min": 10}})

    assert defaults.get(EffectKind.LEVELS).output_min == 10
    assert set(defaults.get_all()) == set(EffectKind)
