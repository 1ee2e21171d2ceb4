"""The graphical sprite editor: canvas, tools, frame stack and animation preview."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from collections.abc import Iterator, Sequence
from functools import partial
from tkinter import filedialog, messagebox, simpledialog

from .editor import BACKGROUND, CANVAS_SIZE, CanvasGeometry, SpriteEditor, Tool, canvas_geometry
from .frame import CHANNEL_MAX, Color, Frame
from .frames import FrameManager
from .preview import animation_frames, frame_delay_ms, preview_geometry
from .startup import MAX_SIZE, MIN_SIZE, SizeForm, is_ssp_file
from .storage import SpriteFileError, load_sprite

WINDOW_BASE = Color(240, 240, 240)
GRID_COLOR = "gray"
PREVIEW_SIZE = 300
DEFAULT_FPS = 10
MAX_FPS = 60
_CHANNELS = ("red", "green", "blue", "alpha")


def _blend(color: Color, base: Color) -> Color:
    """Composite a colour over an opaque base and return the opaque result."""
    alpha = color.alpha
    mix = [
        round((top * alpha + bottom * (CHANNEL_MAX - alpha)) / CHANNEL_MAX)
        for top, bottom in (
            (color.red, base.red),
            (color.green, base.green),
            (color.blue, base.blue),
        )
    ]
    return Color(*mix)


def _tk_color(color: Color) -> str:
    """Return an opaque colour as '#rrggbb'."""
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


_CANVAS_BASE = _blend(BACKGROUND, WINDOW_BASE)


def _cell_items(
    geometry: CanvasGeometry, rows: Sequence[Sequence[Color]], base: Color = _CANVAS_BASE
) -> Iterator[tuple[int, int, int, int, str]]:
    """Yield (x0, y0, x1, y1, fill) for every cell of the pixel rows."""
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            left, top, width, height = geometry.cell_rect(x, y)
            yield left, top, left + width, top + height, _tk_color(_blend(color, base))


class _PreviewWindow:
    """A window that plays the frames as an animation."""

    def __init__(self, root: tk.Misc, frames: FrameManager) -> None:
        self.frames = frames
        self.top = tk.Toplevel(root)
        self.top.title("Preview")
        self.top.protocol("WM_DELETE_WINDOW", self.close)
        self.canvas = tk.Canvas(
            self.top, width=PREVIEW_SIZE, height=PREVIEW_SIZE, highlightthickness=0,
            background=_tk_color(_CANVAS_BASE),
        )
        self.canvas.grid(row=0, column=0, columnspan=3)
        self.fps = tk.IntVar(value=DEFAULT_FPS)
        tk.Scale(
            self.top, from_=1, to=MAX_FPS, orient=tk.HORIZONTAL, label="FPS", variable=self.fps
        ).grid(row=1, column=0, columnspan=3, sticky="ew")
        self.actual_size = tk.BooleanVar(value=False)
        tk.Radiobutton(
            self.top, text="Scaled", variable=self.actual_size, value=False
        ).grid(row=2, column=0)
        tk.Radiobutton(
            self.top, text="Actual size", variable=self.actual_size, value=True
        ).grid(row=2, column=1)
        self.animating = tk.BooleanVar(value=False)
        tk.Checkbutton(
            self.top, text="Animate", variable=self.animating, command=self._toggle
        ).grid(row=2, column=2)
        self._sequence: Iterator[Frame] | None = None
        self._pending: str | None = None

    def _toggle(self) -> None:
        if self.animating.get():
            self._sequence = animation_frames(self.frames)
            self._tick()
        else:
            self._cancel()

    def _cancel(self) -> None:
        if self._pending is not None:
            self.top.after_cancel(self._pending)
            self._pending = None

    def _tick(self) -> None:
        self._pending = None
        if not self.animating.get() or self._sequence is None:
            return
        frame = next(self._sequence, None)
        if frame is None:
            self.animating.set(False)
            return
        self._show(frame)
        self._pending = self.top.after(frame_delay_ms(self.fps.get()), self._tick)

    def _show(self, frame: Frame) -> None:
        geometry = preview_geometry(
            frame.width, frame.height, PREVIEW_SIZE, PREVIEW_SIZE, self.actual_size.get()
        )
        self.canvas.delete("all")
        for x0, y0, x1, y1, fill in _cell_items(geometry, frame.rows()):
            self.canvas.create_rectangle(x0, y0, x1, y1, fill=fill, outline="")

    def close(self) -> None:
        self._cancel()
        self.top.destroy()


class EditorApp:
    """The editor window bound to a sprite editing session."""

    def __init__(self, root: tk.Tk, editor: SpriteEditor) -> None:
        self.root = root
        self.editor = editor
        root.title("Sprite Editor")

        self.canvas = tk.Canvas(
            root, width=CANVAS_SIZE, height=CANVAS_SIZE, highlightthickness=0,
            background=_tk_color(_CANVAS_BASE),
        )
        self.canvas.grid(row=0, column=0, rowspan=2, padx=4, pady=4)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

        tools = tk.Frame(root)
        tools.grid(row=0, column=1, sticky="n", padx=4, pady=4)
        for text, tool in (("Draw", Tool.DRAW), ("Eraser", Tool.ERASE), ("Copy Color", Tool.PICK)):
            tk.Button(tools, text=text, command=partial(self.editor.select_tool, tool)).pack(fill="x")
        tk.Button(tools, text="Invert", command=self._invert).pack(fill="x")

        self._channel_vars: dict[str, tk.IntVar] = {}
        for channel in _CHANNELS:
            row = tk.Frame(tools)
            row.pack(fill="x")
            tk.Label(row, text=channel.capitalize(), width=6, anchor="w").pack(side="left")
            var = tk.IntVar(value=getattr(editor.color, channel))
            tk.Spinbox(row, from_=0, to=CHANNEL_MAX, textvariable=var, width=5).pack(side="left")
            var.trace_add("write", partial(self._channel_changed, channel))
            self._channel_vars[channel] = var
        self.color_preview = tk.Label(tools, width=12, relief="sunken")
        self.color_preview.pack(fill="x", pady=4)

        stack = tk.Frame(root)
        stack.grid(row=1, column=1, sticky="n", padx=4, pady=4)
        self.frame_list = tk.Listbox(stack, exportselection=False, height=10)
        self.frame_list.pack(fill="x")
        self.frame_list.bind("<<ListboxSelect>>", self._on_frame_selected)
        for text, command in (
            ("Add Frame", self._add_frame),
            ("Delete Frame", self._delete_frame),
            ("Duplicate Frame", self._duplicate_frame),
            ("Rotate", self._rotate_frame),
            ("Animate", self._open_preview),
            ("Save", self._save),
        ):
            tk.Button(stack, text=text, command=command).pack(fill="x")

        self.redraw()

    def _geometry(self) -> CanvasGeometry:
        return canvas_geometry(CANVAS_SIZE, CANVAS_SIZE, self.editor.width, self.editor.height)

    def redraw(self) -> None:
        """Repaint the canvas, the frame stack and the colour preview."""
        self.canvas.delete("all")
        for x0, y0, x1, y1, fill in _cell_items(self._geometry(), self.editor.canvas):
            self.canvas.create_rectangle(x0, y0, x1, y1, fill=fill, outline=GRID_COLOR)
        self.frame_list.delete(0, tk.END)
        for label in self.editor.frame_labels():
            self.frame_list.insert(tk.END, label)
        if self.editor.selected_index is not None:
            self.frame_list.selection_set(self.editor.selected_index)
        self._show_color()

    def _show_color(self) -> None:
        color = self.editor.color
        self.color_preview.configure(
            background=_tk_color(_blend(color, WINDOW_BASE)), text=color.hex_argb()
        )

    def _channel_changed(self, channel: str, *_: object) -> None:
        try:
            value = self._channel_vars[channel].get()
        except tk.TclError:
            return
        if not 0 <= value <= CHANNEL_MAX:
            return
        if value != getattr(self.editor.color, channel):
            self.editor.set_color_channel(channel, value)
        self._show_color()

    def _sync_channels(self) -> None:
        for channel, var in self._channel_vars.items():
            var.set(getattr(self.editor.color, channel))
        self._show_color()

    def _after_stroke(self, cell: tuple[int, int] | None) -> None:
        if cell is None:
            return
        if self.editor.tool is Tool.PICK:
            self._sync_channels()
        else:
            self.redraw()

    def _on_press(self, event: tk.Event) -> None:
        self._after_stroke(self.editor.press(event.x, event.y, self._geometry()))

    def _on_move(self, event: tk.Event) -> None:
        self._after_stroke(self.editor.move(event.x, event.y, self._geometry()))

    def _on_release(self, _event: tk.Event) -> None:
        self.editor.release()

    def _on_frame_selected(self, _event: tk.Event) -> None:
        selection = self.frame_list.curselection()
        if selection:
            self.editor.select_frame(selection[0])
            self.redraw()

    def _invert(self) -> None:
        self.editor.invert()
        self.redraw()

    def _add_frame(self) -> None:
        self.editor.add_frame()
        self.redraw()

    def _delete_frame(self) -> None:
        if self.editor.delete_selected_frame():
            self.redraw()

    def _duplicate_frame(self) -> None:
        if self.editor.duplicate_selected_frame() is not None:
            self.redraw()

    def _rotate_frame(self) -> None:
        try:
            self.editor.rotate_selected_frame()
        except ValueError as error:
            messagebox.showwarning("Error", str(error), parent=self.root)
            return
        self.redraw()

    def _open_preview(self) -> None:
        _PreviewWindow(self.root, self.editor.frames)

    def _save(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self.root,
            title="Save Sprite File",
            filetypes=[("Sprite Save Files", "*.ssp")],
        )
        if not path:
            return
        try:
            self.editor.save(path)
        except SpriteFileError:
            messagebox.showwarning("Error", "Failed to save the file.", parent=self.root)
        else:
            messagebox.showinfo("Success", "File saved successfully!", parent=self.root)


def _size(text: str) -> int:
    form = SizeForm()
    try:
        form.set_width_text(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error
    if not form.confirm_size():
        raise argparse.ArgumentTypeError(
            f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {text!r}"
        )
    return form.requested_size()[0]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line: a sprite file to open or a size for a new sprite."""
    parser = argparse.ArgumentParser(prog="spriteforge", description="Edit pixel-art sprites.")
    choice = parser.add_mutually_exclusive_group()
    choice.add_argument("file", nargs="?", help="a .ssp sprite file to open")
    choice.add_argument(
        "--size", type=_size, help=f"width and height of a new square sprite ({MIN_SIZE}-{MAX_SIZE})"
    )
    args = parser.parse_args(argv)
    if args.file is not None and not is_ssp_file(args.file):
        parser.error(f"not a .ssp file: {args.file}")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Start the sprite editor."""
    args = parse_args(argv)
    frames = FrameManager(1, 1)
    editor = SpriteEditor(frames, 1, 1)

    if args.file is not None:
        try:
            load_sprite(frames, args.file)
        except SpriteFileError as error:
            print(f"spriteforge: failed to load the file: {error}", file=sys.stderr)
            return 1
        if not len(frames) or frames.width <= 0 or frames.height <= 0:
            print("spriteforge: failed to load the file: it holds no frames", file=sys.stderr)
            return 1
        editor.initialize_from_loaded()
        root = tk.Tk()
    else:
        root = tk.Tk()
        size = args.size
        if size is None:
            root.withdraw()
            size = simpledialog.askinteger(
                "New Sprite",
                f"Sprite size ({MIN_SIZE}-{MAX_SIZE}):",
                minvalue=MIN_SIZE,
                maxvalue=MAX_SIZE,
                parent=root,
            )
            if size is None:
                root.destroy()
                return 0
            root.deiconify()
        editor.reinitialize(size, size)

    EditorApp(root, editor)
    root.mainloop()
    return 0