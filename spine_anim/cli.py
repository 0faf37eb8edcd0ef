"""Print the images of a model at a few points of some of its animations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .animator import ConcreteSpineAnimationHelper
from .manager import ConcreteSpineManager
from .model import ConcreteSpineParser

DEFAULT_MODEL = "example/test_model.json"
DEFAULT_ANIMATIONS = ("translate_test", "rotate_test", "slot_change_test")
TIMESTEPS = (0.0, 0.5, 1.0)
TIME_FACTOR = 0.3333


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spine-anim",
        description="Show the images of a skeleton model at several animation times.",
    )
    parser.add_argument("model", nargs="?", default=DEFAULT_MODEL, help="skeleton JSON file")
    parser.add_argument("--skin", default="default", help="skin to draw with")
    parser.add_argument(
        "--animation",
        action="append",
        dest="animations",
        help="animation to show; may be given more than once",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    animations = args.animations or list(DEFAULT_ANIMATIONS)

    try:
        text = Path(args.model).read_text(encoding="utf-8")
        model = ConcreteSpineParser().parse(text)
        manager = ConcreteSpineManager(ConcreteSpineAnimationHelper())
        for step in TIMESTEPS:
            for name in animations:
                images = manager.get_attachments_at(step * TIME_FACTOR, model, name, args.skin)
                print(f"{name} \t\t {images!r}")
            print("\r\n")
    except (OSError, KeyError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())