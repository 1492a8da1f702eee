# mlxkit

mlxkit is a small, dependency-free toolkit for working with RGBA images
without a window system. Everything runs in memory.

## Modules

- `mlxkit.image`: `Image` is a width by height buffer of RGBA pixels,
  four bytes per pixel, in a `bytearray` (`pixels`). `put_pixel(x, y, color)`
  and `get_pixel(x, y)` work with 32-bit `0xRRGGBBAA` colours.
  `resize(width, height)` scales the image with nearest-neighbour sampling.
  `Image.from_texture(texture)` copies a `Texture`, or any object with
  `width`, `height`, `pixels` and `bytes_per_pixel`, into a new image.
  `Instance` is one placement (`x`, `y`, `z`, `enabled`) of an image.
- `mlxkit.queue`: `RenderQueue` holds `DrawCall`s (an image and an
  instance index). New calls go to the front. `sort()` orders the calls by
  ascending instance depth. `remove_image(image)` removes and returns every
  call for one image.
- `mlxkit.context`: `Context` is the state of a virtual window. It keeps the
  images it created, the render queue of their instances, per-frame hooks,
  and the orthographic `projection_matrix()`. `Setting` and
  `set_setting`/`get_setting` hold the global window settings.
  `FULLSCREEN`, `MAXIMIZED`, `DECORATED` and `HEADLESS` are read when a
  context is created. `STRETCH_IMAGE` is read each time the projection
  matrix is built.
- `mlxkit.xpm42`: `parse_xpm42(stream)` and `load_xpm42(path)` decode the
  XPM42 format into an `Xpm` with RGBA `pixels`. XPM42 is a `!XPM42` line,
  then a `width height colours chars_per_pixel mode` header where mode is
  `c` or `m`, then colour entries `<chars> #RRGGBBAA`, then the pixel rows.
  In monochrome mode the colours are converted to grey.
- `mlxkit.pixels`: `pack_pixel`/`unpack_pixel` convert between a colour and
  its four bytes. `rgba_to_mono` converts to grey and keeps alpha.
  `fnv_hash` is 64-bit FNV-1a.
- `mlxkit.lines`: `LineReader(stream, buffer_size=32)` reads a text or
  binary stream a fixed number of units at a time. It yields lines with
  their newline kept. `read_line()` returns `None` at the end.
- `mlxkit.errors`: `MlxError` carries a `code` from `MlxErrno`.
  `strerror(code)` returns the description of a code.
- `mlxkit.strings`: `str_find`, `str_rfind` and `str_nfind` return an index
  or `None`. There are also `str_compare`, `str_ncompare`, `substr`,
  `str_join`, `str_trim`, and `split`, which drops empty words.
- `mlxkit.chars`: character tests (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `is_space`), `to_lower`/`to_upper`, `atoi`,
  `itoa` and `str_map_indexed`.
- `mlxkit.fdio`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream or to a file descriptor given as an integer. The default is
  standard output.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## A quick tour

```python
from mlxkit.context import Context, Setting, set_setting

set_setting(Setting.HEADLESS, True)

with Context(400, 400, "demo", False) as ctx:
    img = ctx.new_image(200, 200)
    img.put_pixel(10, 10, 0xFF0000FF)
    index = ctx.image_to_window(img, 100, 100)   # 0 for the first instance

    frames = 0

    def tick():
        global frames
        frames += 1
        if frames == 3:
            ctx.close_window()

    ctx.loop_hook(tick)
    ctx.loop()                      # runs frames until close_window()

    calls = ctx.render_frame()      # one more frame; returns the draw calls made
```

Loop hooks are called with no arguments. Each frame runs the hooks and stops
early once the window is asked to close. Then it sorts the render queue if
an instance was added or its depth changed, and returns the draw calls whose
image and instance are enabled. `close_hook(func)` sets the function that
`request_close()` calls. `resize_hook(func)` sets the function that
`set_window_size` calls with the new size when the size changes. Leaving the
`with` block calls `terminate()`, which releases the hooks, the queue and
the images.

### Loading an XPM42 file

```python
from mlxkit.image import Image
from mlxkit.xpm42 import load_xpm42

xpm = load_xpm42("sprite.xpm42")
print(xpm.width, xpm.height, xpm.mode)
image = Image.from_texture(xpm)
```

### Reading lines in chunks

```python
from mlxkit.lines import LineReader

with open("map.cub", "rb") as fh:
    for line in LineReader(fh, 32):
        print(line)
```

### Errors

Failures raise `mlxkit.errors.MlxError`:

- `INVDIM` for image sizes outside 1 to 32767.
- `INVPOS` for pixels outside the image.
- `INVEXT` for a path without `.xpm42`.
- `INVFILE` for a file that cannot be opened.
- `INVXPM` for malformed XPM42 data.

## What it does not do

mlxkit has no screen. A `Context` does not open a window, and it does not
upload or draw pixels anywhere. Frames only produce the ordered list of draw
calls and the projection matrix. There is no keyboard, mouse or cursor
input, no PNG decoding, and no text rendering. The package has no
command-line program.

## Running the tests

```
pytest
```