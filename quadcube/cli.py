import argparse
import json
import logging
import os
import sys
import cv2
import numpy as np

from .config import DEFAULT_CONFIG
from .core import analyze_image
from .types import candidates_to_json
from .visualize import render_result, show_result


def load_image(path: str) -> np.ndarray:
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise FileNotFoundError(f"Cannot read image: {path}")
    return img


def unique_stem(path: str, used: set) -> str:
    """Output name for `path`; same-named inputs from other folders get a _1, _2... suffix."""
    stem = os.path.splitext(os.path.basename(path))[0]
    name, n = stem, 0
    while name in used:
        n += 1
        name = f"{stem}_{n}"
    used.add(name)
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadcube",
        description="Find quadrilaterals in images and check whether three of them form the faces of a cube.",
    )
    parser.add_argument("images", nargs="+", help="Image files to analyse")
    parser.add_argument("--thresh", type=int, default=None,
                        help=f"Canny upper threshold (default {DEFAULT_CONFIG.thresh})")
    parser.add_argument("--levels", type=int, default=None,
                        help=f"Passes per colour plane (default {DEFAULT_CONFIG.levels})")
    parser.add_argument("--out", default="outputs", help="Directory for JSON and annotated images")
    parser.add_argument("--show", action="store_true", help="Display each annotated image")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = DEFAULT_CONFIG.replace(thresh=args.thresh, levels=args.levels)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    os.makedirs(args.out, exist_ok=True)
    loaded = 0
    used_stems = set()

    for in_path in args.images:
        try:
            img = load_image(in_path)
        except FileNotFoundError:
            print(f"Couldn't load {in_path}")
            continue
        loaded += 1

        quads, verdict = analyze_image(img, config)
        if verdict:
            print(f"Cube detected in image: {in_path}")

        base = unique_stem(in_path, used_stems)
        json_path = os.path.join(args.out, f"{base}.json")
        vis_path = os.path.join(args.out, f"{base}.jpg")

        out_json = {
            "image": in_path,
            "quadrilaterals": candidates_to_json(quads),
            "cube": verdict.to_dict(),
        }
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(out_json, f, ensure_ascii=False, indent=2)
        print(f"[OK] Wrote JSON to: {json_path}")

        vis = render_result(img, quads, verdict)
        if not cv2.imwrite(vis_path, vis):
            raise RuntimeError(f"Failed to write image: {vis_path}")
        print(f"[OK] Wrote visualization to: {vis_path}")

        if args.show:
            show_result(vis, f"{in_path}: {len(quads)} quadrilaterals")

    return 0 if loaded else 1


if __name__ == "__main__":
    sys.exit(main())
