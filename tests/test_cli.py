import json

import pytest

from spine_anim.cli import main


def _model():
    region = {"width": 2, "height": 2}
    return {
        "skeleton": {"hash": "abc"},
        "bones": [{"name": "root"}],
        "slots": [{"name": "body", "bone": "root", "attachment": "torso"}],
        "skins": [{"name": "default", "attachments": {"body": {"torso": region, "alt": region}}}],
        "animations": {
            "translate_test": {
                "bones": {"root": {"translate": [{"time": 0}, {"time": 1, "x": 5}]}}
            },
            "rotate_test": {
                "bones": {"root": {"rotate": [{"time": 0}, {"time": 1, "angle": 90}]}}
            },
            "slot_change_test": {
                "slots": {"body": {"attachment": [{"time": 0.2, "name": "alt"}]}}
            },
        },
    }


@pytest.fixture
def model_path(tmp_path):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(_model()), encoding="utf-8")
    return path


def test_prints_each_default_animation_per_timestep(model_path, capsys):
    assert main([str(model_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    for name in ("translate_test", "rotate_test", "slot_change_test"):
        assert sum(line.startswith(f"{name} \t\t ") for line in lines) == 3


def test_slot_change_visible_in_output(model_path, capsys):
    assert main([str(model_path), "--animation", "slot_change_test"]) == 0
    lines = [
        line for line in capsys.readouterr().out.splitlines() if line.startswith("slot_change")
    ]
    assert "texture_name='torso'" in lines[0]
    assert "texture_name='alt'" in lines[2]


def test_selected_animation_only(model_path, capsys):
    assert main([str(model_path), "--animation", "rotate_test"]) == 0
    out = capsys.readouterr().out
    assert "translate_test" not in out
    assert out.count("rotate_test") == 3


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_unknown_skin_reports_error(model_path, capsys):
    assert main([str(model_path), "--skin", "fancy"]) == 1
    assert "fancy" in capsys.readouterr().err