import json

import pytest

from spine_anim.attachments import RegionAttachment
from spine_anim.model import (
    Animation,
    AnimationInterpolation,
    ConcreteSpineParser,
    Skeleton,
    Skin,
    SpineModel,
    SpineParseError,
    SpineParser,
    parse_animation_interpolation,
)

SAMPLE = {
    "skeleton": {"hash": "abc", "version": "3.8.99", "width": 100, "height": 200},
    "bones": [
        {"name": "root"},
        {"name": "arm", "parent": "root", "x": 5, "rotation": 90},
    ],
    "slots": [{"name": "body", "bone": "root", "attachment": "body"}],
    "skins": [
        {
            "name": "default",
            "attachments": {"body": {"body": {"width": 10, "height": 20}}},
        }
    ],
    "animations": {
        "walk": {
            "bones": {
                "arm": {"rotate": [{"time": 0, "angle": 0}, {"time": 1, "value": 45}]}
            },
            "slots": {"body": {"attachment": [{"time": 0.5, "name": None}]}},
        },
        "idle": {},
    },
}


def test_parser_reads_full_model():
    model = ConcreteSpineParser().parse(json.dumps(SAMPLE))
    assert model.skeleton.hash == "abc"
    assert [bone.name for bone in model.bones] == ["root", "arm"]
    assert model.bones[1].parent == "root"
    assert model.slots[0].attachment == "body"
    region = model.skins[0].attachments["body"]["body"]
    assert isinstance(region, RegionAttachment)
    assert (region.width, region.height) == (10.0, 20.0)
    walk = model.animations["walk"]
    assert [f.angle for f in walk.bones["arm"].rotate] == [0.0, 45.0]
    assert walk.slots["body"].attachment[0].attachment_name is None


def test_animation_order_follows_document():
    model = ConcreteSpineParser().parse(json.dumps(SAMPLE))
    assert list(model.animations) == ["walk", "idle"]
    assert model.animations["idle"].bones == {}


def test_optional_sections_default_to_empty():
    model = SpineModel.from_dict({"skeleton": {"hash": "h"}, "bones": []})
    assert model.slots == []
    assert model.skins == []
    assert model.animations == {}


def test_skeleton_defaults():
    skeleton = Skeleton.from_dict({"hash": "h"})
    assert (skeleton.x, skeleton.y) == (0.0, 0.0)
    assert skeleton.version is None
    assert skeleton.width is None


def test_skin_default_name():
    skin = Skin.from_dict({})
    assert skin.name == "default"
    assert skin.attachments == {}


def test_animation_rejects_bad_timeline():
    with pytest.raises(ValueError):
        Animation.from_dict({"bones": {"arm": {"rotate": [{"time": "soon"}]}}})


def test_parser_rejects_missing_skeleton():
    with pytest.raises(SpineParseError):
        ConcreteSpineParser().parse(json.dumps({"bones": []}))


def test_parser_rejects_invalid_json():
    with pytest.raises(SpineParseError):
        ConcreteSpineParser().parse("{not json")


def test_parser_rejects_unknown_attachment():
    data = dict(SAMPLE)
    data["skins"] = [{"attachments": {"body": {"body": {"colour": "red"}}}}]
    with pytest.raises(SpineParseError):
        ConcreteSpineParser().parse(json.dumps(data))


def test_interpolation_is_always_linear():
    assert parse_animation_interpolation("stepped") == AnimationInterpolation()
    assert parse_animation_interpolation("linear").kind == "linear"


def test_interpolation_rejects_non_string():
    with pytest.raises(SpineParseError):
        parse_animation_interpolation([0.1, 0.2, 0.3, 0.4])


def test_parser_base_is_abstract():
    with pytest.raises(TypeError):
        SpineParser()