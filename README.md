# chromasock

chromasock reads a 24-bit or 32-bit BMP image and counts its distinct colours.
It sends the most frequent ones over TCP to a server, and the server draws
them as an SVG pie chart. The package also has a line echo server with its
client, and a few small console exercises.

## Installation

```
pip install .
```

To install the tools for running the tests:

```
pip install ".[test]"
pytest
```

## Colour palette server and client

Start the server. By default it listens on port 8089 on all interfaces:

```
chromasock-server
```

Options: `--host`, `--port`, `--svg` (the chart file, `pie_chart.svg` by
default) and `--browser` (the command used to open the chart, `firefox` by
default).

Send the palette of a BMP image to it:

```
chromasock-client picture.bmp
```

The client takes `--host` (default `127.0.0.1`) and `--port` (default 8089).
It counts the distinct colours of the image and sends a message of the form
`couleurs: N,#rrggbb,...`. N is the number of distinct colours, capped at
ten. The colours follow from most to least frequent, at most ten of them. The
least frequent colour of the image is never listed.

The server handles one connection at a time and reads a single message from
each. If the message's first word is `message:`, the server sends the
message back unchanged. Any other message is taken as a palette. The server
writes the chart file with one equal slice per colour, at most ten slices,
starting at the top and going clockwise. It then runs the browser command on
that file and sends no reply.

If the client is given more than one path, it sends no palette. It reads one
line from standard input instead, sends it as `message: <line>` and prints
the reply.

## Echo server and client

```
chromasock-echo-server
chromasock-echo-client
```

Both take `--host` and `--port`. The server serves each connection on its own
thread. It echoes back every message whose first word is `message:` and
ignores the others. The client reads lines from standard input until the end
of input. It sends each line as `message: <line>` and prints the reply.

## Exercises

```
chromasock-exercises bonjour
chromasock-exercises boucles
chromasock-exercises cercle
chromasock-exercises conditions
```

`bonjour` prints a greeting. `boucles` prints a five-row triangle with `*`
on its border and `#` inside. `cercle` prints the area and perimeter of a
circle of radius 6. `conditions` prints the numbers from 0 to 999.

## Library use

```python
from chromasock.bmp import analyse_bmp_image
from chromasock.colorclient import build_palette_message
from chromasock.piechart import render_pie_chart

counts = analyse_bmp_image("picture.bmp")   # ColorCount list, least frequent first
for entry in counts[-3:]:
    print(entry.color.hex(), entry.count)

message = build_palette_message("picture.bmp")
svg = render_pie_chart(["#ff0000", "#00ff00", "#0000ff"])
```

`chromasock.colors` provides `Color`, `ColorCount`, `BitDepth`,
`count_colors`, `sort_counts`, `format_colors` and `format_counts`.
`chromasock.bmp` provides `read_header`, `read_info_header` and
`decode_pixels`. Both modules raise `BmpError` for files that are not BMP
images or that use another bit depth.

## Limits

Only uncompressed 24-bit and 32-bit BMP pixel data is read. Other bit depths
and colour tables are not supported. Every slice of the pie chart has the same
size, whatever the colour counts are. The colour server keeps no history: each
chart overwrites the previous file.