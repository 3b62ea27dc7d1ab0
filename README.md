# fdfview

A viewer for `.fdf` height maps. It draws them as an isometric wireframe. The
map is rasterized into an in-memory 32-bit image with a Bresenham line
algorithm that blends colours along each edge. The image is shown in a Tk
window. From the keyboard you can move the view, rotate it, zoom it and
stretch the heights.

## Installing

```
pip install .
```

The window uses `tkinter` from the standard library, so Python must have been
built with Tk support. The package has no third-party dependencies.

## Running

```
fdfview path/to/map.fdf
```

The command needs exactly one argument. It exits with status 1 in these cases,
each with a message on standard error:

- the argument count is wrong (`Usage: <filename>`);
- the file does not exist;
- the file cannot be opened;
- the map is malformed;
- no window can be created.

Progress messages such as `Open file...` and `Parse file...` go to standard
output.

## Map format

Each line of the map is one row of the grid. Values in a row are separated by
spaces. Each value is an integer height, and may be followed by a comma and a
colour:

```
0 0 0 0
0 10,0xff0000 10 0
0 0 0 0
```

Rules for a map:

- Every row must hold as many values as the first row.
- A colour is `0x` followed by 2 to 6 hexadecimal digits.
- Points without a colour are white (`0xFFFFFF`).

A row of the wrong length raises `fdfview.mapfile.MapParseError` with the
message `Parse error in line N: wrong line length`. A bad value raises it with
the message `Parse error: malformed line`.

## Keys

| Key | Action |
| --- | --- |
| `w` `a` `s` `d` | move the view |
| Left / Right | rotate around the vertical axis |
| Up / Down | tilt |
| `-` / `=` | zoom out / in |
| Page Up / Page Down | stretch or flatten heights |
| Escape | close |

A motion lasts as long as its key is held. The view is redrawn at most 20
times a second. Closing the window also ends the program.

## Library use

You can use the modules without opening a window:

- `fdfview.mapfile`:
  - `parse_map(lines)` and `load_map(path)` return a `HeightMap` with
    `heights`, `colors`, `width` and `height`.
  - `format_grid(rows)` renders a grid as tab-separated text.
- `fdfview.scene.Scene(heightmap)` projects the map with its default
  isometric view.
  - `draw(image)` draws the wireframe into an image.
  - `key_press(key)`, `key_release(key)` and `step()` change the view. Key
    codes are in `fdfview.scene.Key`.
  - `project()` recomputes the points after a change.
- `fdfview.image.Image(width, height)` is the pixel buffer. It has
  `put_pixel`, `get_pixel`, `clear` and `rows`.
- `fdfview.drawing.draw_line(image, a, b)` draws one coloured segment between
  two `fdfview.geometry.Vec` points.
- `fdfview.colors` packs, unpacks, shades and blends `0xTTRRGGBB` colours.
- `fdfview.xpm`:
  - `xpm_to_image(lines)` loads an XPM picture from its strings.
  - `xpm_file_to_image(path)` loads one from a C-source XPM file.
  - Both return an `Image`. Colour names are resolved by
    `fdfview.colornames.text_to_rgb`.
- `fdfview.viewer.Viewer(heightmap)` holds the scene and its image.
  - `tick()` advances and redraws one frame when it is due.
  - `run()` opens the Tk window.
  - It accepts an `on_frame` callback that receives each rendered image.

## Tests

```
pip install .[test]
pytest
```