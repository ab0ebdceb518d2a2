# pgmcomponents

Find the connected components in a greyscale binary PGM (`P5`) image, keep the
ones whose size you care about, and write them out as a black-and-white PGM.

A pixel is in the foreground when its grey value is at or above a threshold.
Foreground pixels that touch up, down, left or right (4-connectivity) belong
to the same component. Components are found in row-major scan order and are
numbered from 0.

## Installation

```
pip install .
```

## Command line

```
pgmcomponents [options] <inputPGMfile>
```

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `-t <threshold>` | grey level at or above which a pixel is foreground (taken modulo 256) | `128` |
| `-m <size>` | smallest component size kept during extraction | `1` |
| `-f <min> <max>` | after extraction, keep only components with `min <= size <= max` | no filtering |
| `-p` | print each component's id and pixel count, then the count, largest and smallest sizes | off |
| `-w <file>` | output PGM file | `output.pgm` |

Example:

```
pgmcomponents -t 35 -m 10 -f 5 6000 -p -w birds_out.pgm Birds.pgm
```

The command always writes an output image: white (255) where a kept component
lies and black (0) everywhere else. It exits with status 1 when no arguments
are given, on an unknown option, on a non-numeric option value, when no input
file is named, or when the input cannot be opened or is not a valid `P5`
image. A failure to write the output file is reported on standard error but
does not change the exit status.

## Library use

```python
from pgmcomponents.processor import PGMImageProcessor

processor = PGMImageProcessor.from_file("Birds.pgm")
count = processor.extract_components(35, 10)
processor.filter_components_by_size(5, 6000)

for comp in processor.components:
    processor.print_component_data(comp)

print(processor.component_count, processor.largest_size, processor.smallest_size)
processor.write_components("birds_out.pgm")
```

- `PGMImageProcessor(width, height, image)` can also be built directly from
  raw pixel bytes; the byte count must equal `width * height`.
- `extract_components(threshold, min_valid_size)` replaces any earlier
  components and returns how many were kept.
- `filter_components_by_size(min_size, max_size)` keeps only components in
  that inclusive range and returns how many remain.
- `largest_size` and `smallest_size` are 0 when there are no components.
- `format_component_data(comp)` returns the line that
  `print_component_data(comp)` prints, e.g.
  `Component ID: 0; Pixel Count: 42`.

Each `ConnectedComponent` (from `pgmcomponents.component`) carries its `id`,
its `size` and its list of `(x, y)` `pixels` in the order they were reached.

`from_file` raises `OSError` when the file cannot be read and
`PGMFormatError` (a `ValueError`) when the magic is not `P5`, the width and
height are missing or negative, or the pixel data is shorter than the header
says. A maximum grey value other than 255 only issues a warning.

## Limits

Only binary `P5` images with one byte per pixel are read; plain-text `P2`
images and 16-bit images are not supported. Output is always written as an
8-bit `P5` image.