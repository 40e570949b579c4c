from datetime import timedelta
from textwrap import dedent

import pytest

from tweenloop.managers.preset_manager import PresetManager
from tweenloop.models.enums import ValueType
from tweenloop.models.errors import PresetNotFoundError, PresetValidationError
from tweenloop.models.loop import Loop


def write(path, text):
    path.write_text(dedent(text), encoding="utf-8")
    return path


@pytest.fixture
def presets_file(tmp_path):
    write(tmp_path / "extra.yaml", """
        presets:
          spin:
            value_type: int
            to: 360
            duration_ms: 2000
            recur: true
          fade_in:
            value_type: float
            to: 0.5
    """)
    return write(tmp_path / "presets.yaml", """
        include:
          - extra.yaml
        presets:
          fade_in:
            value_type: float
            from: 0.0
            to: 1.0
            delay_ms: 50
            duration_ms: 300
            frame_ms: 20
          bounce:
            from: 10
            to: 20
            recur: 3
    """)


def test_load_with_includes(presets_file):
    manager = PresetManager(presets_file)
    presets = manager.load()

    assert set(presets) == {"spin", "fade_in", "bounce"}
    # Main file wins over included definitions
    assert manager.get_preset("fade_in").to_value == 1.0
    assert manager.get_preset("spin").recur is True
    assert manager.get_preset("bounce").value_type == ValueType.INT
    assert len(manager.get_all_presets()) == 3


def test_build_config(presets_file):
    manager = PresetManager(presets_file)
    manager.load()

    config = manager.build("fade_in", lambda p: ("opacity", p))

    assert config.from_value == 0.0
    assert isinstance(config.to_value, float)
    assert config.delay_time == timedelta(milliseconds=50)
    assert config.duration_time == timedelta(milliseconds=300)
    assert config.frame_time == timedelta(milliseconds=20)
    assert config.loop == Loop.count(1)
    assert config.callback(0.5) == ("opacity", 0.5)


def test_build_int_preset(presets_file):
    manager = PresetManager(presets_file)
    manager.load()

    config = manager.build("bounce", lambda p: p)
    assert config.from_value == 10
    assert isinstance(config.from_value, int)
    assert config.loop == Loop.count(3)

    spin = manager.build("spin", lambda p: p)
    assert spin.from_value == 0
    assert spin.loop.is_infinite


def test_unknown_preset(presets_file):
    manager = PresetManager(presets_file)
    manager.load()

    assert manager.get_preset("nope") is None
    with pytest.raises(PresetNotFoundError):
        manager.build("nope", lambda p: p)


@pytest.mark.parametrize("body", [
    "duration_ms: 0",
    "frame_ms: -5",
    "recur: 0",
    "value_type: complex",
    "speed: 3",
])
def test_invalid_preset(tmp_path, body):
    path = write(tmp_path / "bad.yaml", f"""
        presets:
          broken:
            {body}
    """)

    with pytest.raises(PresetValidationError) as exc_info:
        PresetManager(path).load()
    assert exc_info.value.details["preset"] == "broken"
    assert exc_info.value.details["errors"]


@pytest.mark.parametrize("body", [
    "broken: [1, 2]",
    "broken: 300",
    "broken:\n  name: other\n  to: 5",
])
def test_malformed_preset_entry(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text("presets:\n" + "\n".join("  " + line for line in body.splitlines()) + "\n",
                    encoding="utf-8")

    with pytest.raises(PresetValidationError) as exc_info:
        PresetManager(path).load()
    assert exc_info.value.details["preset"] == "broken"
    assert exc_info.value.details["errors"]


def test_empty_preset_uses_defaults(tmp_path):
    path = write(tmp_path / "presets.yaml", """
        presets:
          plain:
    """)

    manager = PresetManager(path)
    manager.load()
    config = manager.build("plain", lambda p: p)

    assert (config.from_value, config.to_value) == (0, 1)


@pytest.mark.parametrize("bounds", ["to: 10.9", "from: 0.5\n            to: 10"])
def test_int_preset_rejects_fractional_bounds(tmp_path, bounds):
    path = write(tmp_path / "bad.yaml", f"""
        presets:
          broken:
            value_type: int
            {bounds}
    """)

    with pytest.raises(PresetValidationError) as exc_info:
        PresetManager(path).load()
    assert any("whole number" in e for e in exc_info.value.details["errors"])


def test_float_preset_keeps_fractional_bounds(tmp_path):
    path = write(tmp_path / "presets.yaml", """
        presets:
          fine:
            value_type: float
            to: 10.9
    """)

    manager = PresetManager(path)
    manager.load()

    assert manager.build("fine", lambda p: p).to_value == 10.9


def test_missing_include(tmp_path):
    path = write(tmp_path / "presets.yaml", """
        include:
          - missing.yaml
    """)

    with pytest.raises(FileNotFoundError):
        PresetManager(path).load()


def test_builtin_presets():
    manager = PresetManager()
    presets = manager.load()

    assert {"fade_in", "slide_in", "pulse", "counter"} <= set(presets)
    counter = manager.build("counter", lambda p: p)
    assert (counter.from_value, counter.to_value) == (10, 20)
    assert counter.duration_time == timedelta(seconds=10)
