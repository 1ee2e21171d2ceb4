# spriteforge

spriteforge is a small editor for pixel-art sprites. A sprite is a grid of RGBA pixels and can hold any number of frames. Sprites made from the editor are square, between 1×1 and 64×64. In the editor you can:

- draw, erase and pick colours from the canvas;
- invert the colours of a frame;
- add, duplicate, delete and rotate frames;
- play the frames as an animation at a chosen frame rate.

Sprites are saved as `.ssp` files.

The editor window uses Tkinter, which ships with most Python installations. The frame model and the file format need only the standard library.

## Running the editor

Start a new sprite. A dialog asks for its size, from 1 to 64:

```
spriteforge
```

Start a new sprite of a given size:

```
spriteforge --size 16
```

Open an existing sprite:

```
spriteforge walk.ssp
```

A file name and `--size` cannot be given together. The command rejects a file name that does not end in `.ssp` (case is ignored). It also rejects a `--size` outside 1–64. If the file cannot be read, is not a valid sprite, or holds no frames, the command prints an error and exits with status 1.

### In the editor window

- **Draw**, **Eraser** and **Copy Color** choose what a click or drag on the canvas does. Erasing sets a pixel to fully transparent white. Copy Color takes the clicked pixel's colour and updates the colour fields.
- The **Red**, **Green**, **Blue** and **Alpha** fields (0–255) set the drawing colour. The swatch below them shows the colour and its `#aarrggbb` value.
- **Invert** inverts the red, green and blue of every pixel in the current frame. Alpha is kept.
- The frame list selects the frame shown on the canvas.
- **Add Frame** appends a blank frame.
- **Duplicate Frame** appends a copy of the selected frame.
- **Delete Frame** removes the selected frame. A sprite always keeps at least one frame, so deleting the last one is ignored.
- **Rotate** turns the selected frame, or the first frame if none is selected, 90° clockwise.
- **Animate** opens a preview window. Tick *Animate* there to loop the frames. The slider sets 1–60 frames per second (default 10). *Scaled* fits the frame to the preview; *Actual size* draws one screen pixel per sprite pixel. A running animation shows the frames as they were when it started.
- **Save** asks for a file name and adds `.ssp` if it is missing.

### What the editor does not do

There is no start screen and no *Open* command inside the window. An existing sprite is opened only by naming it on the command line. Sprites can be saved only as `.ssp` files; the editor does not import or export PNG or other image formats.

## Using it as a library

```python
from spriteforge.frame import Color
from spriteforge.frames import FrameManager
from spriteforge.storage import save_sprite, load_sprite

manager = FrameManager(16, 16)
manager.add_frame()
manager.update_pixel(0, 2, 3, Color(255, 0, 0, 255))  # frame 0, row 2, column 3
manager.copy_frame(0)
manager.rotate_clockwise(1)

save_sprite(manager, "walk.ssp")

restored = FrameManager(1, 1)
load_sprite(restored, "walk.ssp")
print(len(restored))  # 2
```

The modules:

- `spriteforge.frame`: `Color`, an immutable RGBA colour with `inverted()` and `hex_argb()`. `Frame`, a pixel grid with `set_pixel`, `pixel`, `rows`, `rotate` and `copy`. Only square frames can be rotated; any other frame raises `ValueError`.
- `spriteforge.frames`: `FrameManager`, the ordered list of frames. It has `add_frame`, `add_loaded_frame`, `delete_frame`, `copy_frame`, `update_pixel`, `pixels_for_frame`, `rotate_clockwise` and `reset`. An index out of range raises `IndexError`.
- `spriteforge.storage`: `sprite_to_dict`, `load_sprite_dict`, `save_sprite`, `load_sprite` and `SpriteFileError`.
- `spriteforge.editor`: `SpriteEditor`, the editing session without any window. It covers tools, colour, canvas, frame stack, mouse strokes and saving. Also `Tool`, and `canvas_geometry`, which returns a `CanvasGeometry` for fitting a sprite onto a display area.
- `spriteforge.preview`: `frame_delay_ms`, `preview_geometry` and `animation_frames`. `animation_frames` is an endless generator over a snapshot of the frames.
- `spriteforge.startup`: `SizeForm`, a width/height entry model with range confirmation. Also `ensure_ssp_suffix` and `is_ssp_file`.
- `spriteforge.app`: the Tkinter window (`EditorApp`), `parse_args` and `main`.

`SpriteFileError` is raised in these cases:

- saving a manager with no frames;
- a file that cannot be opened;
- a file that is not valid JSON;
- a file whose top level is not a JSON object;
- a file with a pixel that lies outside the stated width and height.

## The `.ssp` format

An `.ssp` file is a JSON document. It holds the sprite's `height` and `width`, and a list of `frames`. Each frame has an `index` and a flat list of `pixels`. Each pixel gives its `x` and `y` position and its `r`, `g`, `b` and `a` components. Files are written with sorted keys and an indent of four:

```json
{
    "frames": [
        {
            "index": 0,
            "pixels": [
                {"a": 0, "b": 255, "g": 255, "r": 255, "x": 0, "y": 0},
                {"a": 255, "b": 0, "g": 0, "r": 0, "x": 1, "y": 0}
            ]
        }
    ],
    "height": 1,
    "width": 2
}
```

When loading:

- A pixel the file leaves out is fully transparent white.
- A missing or non-integer number is read as 0.
- Colour components are clamped to 0–255.