# spine_anim

`spine_anim` reads skeleton models written in the Spine JSON format. For a
given animation, skin and point in time, it returns the textured quads to draw.

It does two things:

* **Parsing.** The JSON document is turned into plain Python dataclasses. These
  cover the skeleton, bones, slots, skins, attachments and animations. IK,
  transform and path constraints can also be read on their own with the
  `from_dict` methods in `spine_anim.constraints`.
* **Posing.** For each bone, the keyframes around the requested time are
  interpolated and the result is combined with the bone's setup pose. The bone
  hierarchy is then composed into global transforms. Next, the attachment shown
  in each slot at that time is looked up. Every visible region attachment
  becomes a `ModelImage`, which holds:
  * a 4×4 transform, stored column by column;
  * the image dimensions;
  * the texture name;
  * six vertices with UV coordinates;
  * the indices `(0, 1, 4, 1, 3, 4)`.

## Installation

```
pip install .
```

`numpy` is the only runtime dependency. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from spine_anim.model import ConcreteSpineParser
from spine_anim.animator import ConcreteSpineAnimationHelper
from spine_anim.manager import ConcreteSpineManager

model = ConcreteSpineParser().parse(Path("model.json").read_text())
manager = ConcreteSpineManager(ConcreteSpineAnimationHelper())

for image in manager.get_attachments_at(0.5, model, "walk", "default"):
    print(image.texture_name, image.dimensions)
    print(image.transform)
    print(image.vertices)
    print(image.indices)
```

How `time` is read depends on the kind of timeline:

* **Bone timelines.** `time` is a fraction of the animation. It is multiplied
  by the time of the animation's last bone keyframe.
* **Slot attachment timelines.** `time` is used as given. The attachment shown
  is the one set by the last keyframe at or before `time`. If no keyframe has
  been reached yet, the slot shows its setup attachment.

### Errors

* A malformed document raises `SpineParseError`, which is a subclass of
  `ValueError`.
* An unknown animation name raises `KeyError`.
* An attachment that is missing from the skin raises `KeyError`.
* An unknown skin name raises `ValueError`.
* An animation index out of range raises `IndexError`.

### Other entry points on `ConcreteSpineManager`

* `get_animation_id_attachments_at(time, model, animation_id, skin_name)`
  chooses the animation by its position in `model.animations`.
* `mix_animations(animations)` merges several animations into one. For each
  bone and each slot, the first animation in the list that animates it wins.
  The timelines are copied.
* `get_attachments_for_animation(time, model, animation, skin_name)` poses the
  model with an `Animation` object, such as the result of `mix_animations`.

### Lower-level pieces

* `spine_anim.interpolation.interpolate(time, keyframes)` blends the two
  keyframes around `time` linearly.
  * Before the first keyframe, it holds the first value.
  * Past the last keyframe, it continues along the line through the last two
    keyframes.
* `spine_anim.transform` builds 4×4 numpy matrices:
  * `rotation_z(degrees)`, `nonuniform_scale(x, y, z)` and
    `translation(x, y, z)` each build a single transform.
  * `create_transform(rotation, translation_vector, scale)` returns the product
    rotation · scale · translation.
  * `region_attachment_transform(attachment, base_transform)` places a region
    attachment under its bone's transform.
* `spine_anim.manager.dimensions_as_vertices(dimensions, padding)` returns the
  two triangles of a rectangle centred on the origin, with padding given as
  left, top, right, bottom.
  `dimensions_as_vertices_bottom_left_aligned(dimensions, padding)` returns the
  four corners of a rectangle that stands on y = 0.
* `spine_anim.colour.parse_colour(text)` converts a hexadecimal colour string
  into an integer.

## Command line

`spine-anim` loads a model and prints the images at times 0, 0.16665 and
0.3333 for each chosen animation:

```
spine-anim model.json --skin default --animation walk --animation run
```

* With no `--animation`, it shows `translate_test`, `rotate_test` and
  `slot_change_test`.
* With no model argument, it reads `example/test_model.json`.
* On an error, it prints a message to stderr and exits with status 1.

## Limitations

* Only region attachments are drawn. Mesh, linked-mesh, bounding-box, path,
  point and clipping attachments are parsed but produce no images.
* Bone shear timelines are read but not applied. They count only towards the
  animation's length.
* Slot colour timelines are read but not applied.
* Keyframe curves are not read. Every timeline is interpolated linearly.
* Constraints are never applied when posing.
* `BoundingBox` is a plain data holder. No bounding boxes are computed.