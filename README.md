# couleurnet

Small tools for the colours in BMP images and for exchanging messages over
TCP. Port 8089 is the default.

- `couleurnet.bmp` reads uncompressed 24-bit and 32-bit BMP files.
  `analyse_bmp_image` counts each distinct colour and returns a
  `ColorCounter` sorted least frequent first. A file that is not a BMP image,
  or that uses another bit count, raises `BmpError`. `parse_header`,
  `parse_info_header` and `read_pixels` decode the parts of the file one at a time.
- `couleurnet.colors` holds `BitDepth`, `Color`, `ColorCount` and
  `ColorCounter`, and the functions `count_colors`, `sort_counts`,
  `format_colors` and `format_counter`.
- `couleurnet.pie_chart` draws a list of up to ten colours as an SVG pie
  chart (`render_pie_chart`, `write_pie_chart`). Each colour gets one tenth
  of the circle. `open_in_browser` opens a file with a browser command,
  `firefox` by default.
- `couleurnet.color_server` and `couleurnet.color_client` send the most
  frequent colours of an image to a server, which draws them as a pie chart.
- `couleurnet.echo_server` and `couleurnet.echo_client` form a simple echo
  service. Each message is tagged with `message: `.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Sending the colours of an image

Start the server:

```
couleurnet-color-server [--host HOST] [--port PORT] [--chart FILE]
```

The server takes one client at a time and reads one message from each
client. A message whose first word is `message:` is sent back unchanged.
Any other message is read as a comma-separated list. The first field is
skipped and the rest are taken as colours. They are written to the chart
file, `pie_chart.svg` by default, and the file is opened with `firefox`.

In a second terminal, give the client a BMP image:

```
couleurnet-color-client picture.bmp [--host HOST] [--port PORT]
```

The client connects to `127.0.0.1` by default. It sends a message of the
form `couleurs: <n>,#rrggbb,#rrggbb,...`. Here `<n>` is the number of
distinct colours, capped at ten. The colours that follow are the most
frequent ones, most frequent first, at most ten of them. The least frequent
colour is never listed. If more arguments follow the image path, the client
reads one line from standard input instead and sends it as a `message:`.
It then prints the reply.

## Echo service

```
couleurnet-echo-server [--host HOST] [--port PORT]
```

```
couleurnet-echo-client [--host HOST] [--port PORT]
```

The client reads lines from standard input and sends each one as
`message: <text>`. It prints every reply. It stops at the end of input or
when the server closes the connection. The server handles each client in
its own thread. It answers every message whose first word is `message:`
and ignores any other message. Press Ctrl+C to stop either server.

## Using the library

```python
from couleurnet.bmp import analyse_bmp_image
from couleurnet.colors import format_counter

counter = analyse_bmp_image("picture.bmp")
print(format_counter(counter))
```

```python
from couleurnet.pie_chart import write_pie_chart

write_pie_chart(["#ff0000", "#00ff00", "#0000ff"], "chart.svg")
```

## Limits

- Only uncompressed 24-bit and 32-bit BMP images can be analysed. Palette
  images and compressed images are rejected.
- Pie chart slices all have the same size. They do not reflect how often
  each colour occurs.
- Messages are read in a single receive of at most 1024 bytes.