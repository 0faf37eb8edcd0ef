import numpy as np
import pytest

from spine_anim.bones import (
    Bone,
    BoneKeyFrame,
    BoneRotateKeyFrame,
    BoneScaleKeyFrame,
    BoneShearKeyFrame,
    BoneTransform,
    BoneTranslateKeyFrame,
)


def test_bone_defaults():
    bone = Bone.from_dict({"name": "root"})
    assert bone.name == "root"
    assert bone.parent is None
    assert bone.transform is BoneTransform.NORMAL
    assert (bone.x, bone.y, bone.rotation) == (0.0, 0.0, 0.0)
    assert (bone.scale_x, bone.scale_y) == (1.0, 1.0)
    assert bone.skin is False


def test_bone_fields_and_aliases():
    bone = Bone.from_dict(
        {
            "name": "arm",
            "parent": "root",
            "x": 3,
            "y": -2.5,
            "rotation": 45,
            "scaleX": 2,
            "scale_y": 0.5,
            "transform": "NoScale",
            "shear_x": 7,
        }
    )
    assert bone.parent == "root"
    assert (bone.x, bone.y) == (3.0, -2.5)
    assert bone.rotation == 45.0
    assert (bone.scale_x, bone.scale_y) == (2.0, 0.5)
    assert bone.transform is BoneTransform.NO_SCALE
    assert bone.shear_x == 7.0


def test_bone_requires_name():
    with pytest.raises(ValueError):
        Bone.from_dict({"x": 1})


def test_bone_rejects_wrong_types():
    with pytest.raises(ValueError):
        Bone.from_dict({"name": "a", "x": "one"})
    with pytest.raises(ValueError):
        Bone.from_dict(["name"])


@pytest.mark.parametrize("member", list(BoneTransform))
def test_bone_transform_parse_round_trip(member):
    assert BoneTransform.parse(member.value) is member


def test_bone_transform_parse_rejects_unknown():
    with pytest.raises(ValueError):
        BoneTransform.parse("onlyTranslation")
    with pytest.raises(ValueError):
        BoneTransform.parse(3)


def test_translate_keyframe_value():
    frame = BoneTranslateKeyFrame.from_dict({"time": 0.5, "x": 4, "y": 6})
    assert frame.time == 0.5
    np.testing.assert_allclose(frame.value(), [4.0, 6.0, 1.0])


def test_rotate_keyframe_value_alias():
    frame = BoneRotateKeyFrame.from_dict({"time": 1, "value": 90})
    assert frame.value() == 90.0
    assert BoneRotateKeyFrame.from_dict({}).value() == 0.0


def test_scale_keyframe_defaults_and_value():
    frame = BoneScaleKeyFrame.from_dict({"x": 3})
    np.testing.assert_allclose(frame.value(), [3.0, 1.0])
    assert frame.time == 0.0


def test_shear_keyframe_defaults():
    frame = BoneShearKeyFrame.from_dict({"time": 2})
    assert (frame.time, frame.x, frame.y) == (2.0, 0.0, 0.0)


def test_bone_keyframe_lists():
    frames = BoneKeyFrame.from_dict(
        {
            "rotate": [{"time": 0, "angle": 0}, {"time": 1, "angle": 30}],
            "translate": [{"x": 1}],
        }
    )
    assert [f.angle for f in frames.rotate] == [0.0, 30.0]
    assert frames.translate[0].x == 1.0
    assert frames.scale == []
    assert frames.shear == []


def test_bone_keyframe_rejects_non_list():
    with pytest.raises(ValueError):
        BoneKeyFrame.from_dict({"rotate": {"time": 0}})