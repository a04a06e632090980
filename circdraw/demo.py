"""
Interactive circle drawer and scripted replay.

Usage (CLI):
    python -m circdraw.demo window [--width 640] [--height 480]
    python -m circdraw.demo replay session.txt [--save-path outputs/replay.gif]

In the window: left click places a circle, the ``diameter`` trackbar is the
adjustment slider, Enter/Space confirms the diameter, u/z undo, r/y redo,
q/Esc quit.

A replay script holds one command per line (or ``;``-separated)::

    click 50 50
    diameter 20
    confirm
    undo        # comments run to end of line
    redo

Or from a notebook:
    from circdraw.demo import run_script
    frames, controller = run_script("click 50 50; diameter 20; confirm")
"""

import argparse
import os

import cv2
from PIL import Image

from circdraw.config import (
    CANVAS_HEIGHT, CANVAS_WIDTH, DIAMETER_RANGE, KEYS_CONFIRM, KEYS_QUIT, KEYS_REDO,
    KEYS_UNDO, TRACKBAR_NAME, WINDOW_NAME,
)
from circdraw.panel import compose_frame
from circdraw.raster import rgb_to_bgr, to_uint8
from circdraw.session import EditSessionController
from circdraw.surface import CircleSurface


# -----------------------------------------------------------------------
# Script parsing
# -----------------------------------------------------------------------

_ARITY = {"click": 2, "diameter": 1, "confirm": 0, "undo": 0, "redo": 0}


def parse_script(text):
    """Parse replay commands into ``[(line_no, name, args), ...]``.

    Raises ValueError naming the line for unknown commands or bad arguments.
    """
    commands = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0]
        for chunk in line.split(";"):
            parts = chunk.split()
            if not parts:
                continue
            name, raw_args = parts[0].lower(), parts[1:]
            if name not in _ARITY:
                raise ValueError(f"line {line_no}: unknown command {parts[0]!r}")
            if len(raw_args) != _ARITY[name]:
                raise ValueError(
                    f"line {line_no}: {name} takes {_ARITY[name]} argument(s), "
                    f"got {len(raw_args)}")
            try:
                args = tuple(float(a) for a in raw_args)
            except ValueError:
                raise ValueError(
                    f"line {line_no}: non-numeric argument in {chunk.strip()!r}") from None
            commands.append((line_no, name, args))
    return commands


def apply_command(controller, name, args):
    """Dispatch one parsed command.  Returns True if the session changed."""
    if name == "click":
        return controller.click(*args)
    if name == "diameter":
        return controller.change_diameter(args[0])
    if name == "confirm":
        return controller.confirm()
    if name == "undo":
        return controller.undo()
    if name == "redo":
        return controller.redo()
    raise AssertionError(f"unparsed command {name!r}")


# -----------------------------------------------------------------------
# Headless replay
# -----------------------------------------------------------------------

def _frame_image(controller):
    return Image.fromarray(to_uint8(compose_frame(controller.surface, controller.state)))


def run_script(script, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, bounds=DIAMETER_RANGE):
    """Replay *script* (text) and return ``(frames, controller)``.

    One PIL frame is captured for the initial blank surface and one after
    every command.
    """
    commands = parse_script(script)
    controller = EditSessionController(CircleSurface(width, height), bounds=bounds)
    frames = [_frame_image(controller)]
    for _, name, args in commands:
        apply_command(controller, name, args)
        frames.append(_frame_image(controller))
    return frames, controller


def save_frames(frames, save_path):
    """Animated GIF for ``.gif`` paths, otherwise the final frame alone."""
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    if save_path.lower().endswith(".gif"):
        frames[0].save(save_path, save_all=True, append_images=frames[1:],
                       duration=400, loop=0)
    else:
        frames[-1].save(save_path)
    return save_path


def replay_file(script_path, save_path="outputs/replay.gif",
                width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    if not os.path.exists(script_path):
        raise FileNotFoundError(f"Cannot read script: {script_path}")
    with open(script_path) as f:
        frames, controller = run_script(f.read(), width, height)
    save_frames(frames, save_path)
    print(f"Replay saved to {save_path} ({len(frames)} frames, "
          f"{len(controller.history)} history entries, cursor {controller.history.cursor})")
    return frames


# -----------------------------------------------------------------------
# Interactive window
# -----------------------------------------------------------------------

def run_window(width=CANVAS_WIDTH, height=CANVAS_HEIGHT, bounds=DIAMETER_RANGE):
    """Open an OpenCV window and run the event loop until quit."""
    controller = EditSessionController(CircleSurface(width, height), bounds=bounds)

    def on_mouse(event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            controller.click(x, y)

    def on_trackbar(value):
        controller.change_diameter(value)

    def sync_trackbar(state):
        if cv2.getTrackbarPos(TRACKBAR_NAME, WINDOW_NAME) != int(state.slider_value):
            cv2.setTrackbarPos(TRACKBAR_NAME, WINDOW_NAME, int(state.slider_value))

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
    cv2.createTrackbar(TRACKBAR_NAME, WINDOW_NAME, int(bounds.default), int(bounds.max),
                       on_trackbar)
    cv2.setTrackbarMin(TRACKBAR_NAME, WINDOW_NAME, int(bounds.min))
    cv2.setMouseCallback(WINDOW_NAME, on_mouse)
    controller.listener = sync_trackbar

    try:
        while True:
            frame = compose_frame(controller.surface, controller.state)
            cv2.imshow(WINDOW_NAME, rgb_to_bgr(to_uint8(frame)))
            key = cv2.waitKey(20) & 0xFF
            if key in KEYS_QUIT:
                break
            if key in KEYS_UNDO:
                controller.undo()
            elif key in KEYS_REDO:
                controller.redo()
            elif key in KEYS_CONFIRM:
                controller.confirm()
            if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                break
    except KeyboardInterrupt:
        print("\nInterrupted, closing window ...")
    finally:
        cv2.destroyAllWindows()
    return controller


# -----------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------

def main(argv=None):
    p = argparse.ArgumentParser(description="Circle drawer with undo/redo")
    sub = p.add_subparsers(dest="command")

    win = sub.add_parser("window", help="Open the interactive drawing window")
    win.add_argument("--width", type=int, default=CANVAS_WIDTH)
    win.add_argument("--height", type=int, default=CANVAS_HEIGHT)

    rp = sub.add_parser("replay", help="Replay a command script to GIF/PNG")
    rp.add_argument("script", help="Path to a replay script")
    rp.add_argument("--width", type=int, default=CANVAS_WIDTH)
    rp.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    rp.add_argument("--save-path", default="outputs/replay.gif")

    args = p.parse_args(argv)

    if args.command == "window":
        run_window(width=args.width, height=args.height)

    elif args.command == "replay":
        replay_file(args.script, save_path=args.save_path,
                    width=args.width, height=args.height)

    else:
        p.print_help()


if __name__ == "__main__":
    main()
