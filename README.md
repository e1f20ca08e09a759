# lumentrace

Building blocks for a Monte Carlo path tracer: ray intersection geometry,
a bounding volume hierarchy, procedural and image textures, and helpers for
rendering an image in tiles on a pool of worker threads.

Points, vectors and colours are plain tuples of three floats.

## Installation

```
pip install lumentrace
```

For running the test suite:

```
pip install "lumentrace[test]"
pytest
```

## Geometry

Every object derives from `lumentrace.hittable.Hittable` and provides
`hit(ray, t_min, t_max)`, returning a `HitRecord` or `None`, and
`bounding_box(time0, time1)`, returning an `AABB` or `None`. Objects that can
be sampled as lights also provide `pdf_value(origin, v)` and `random(origin)`.

- `lumentrace.aabb`: `Ray` (with `at(t)`) and `AABB` (with `hit` and
  `surrounding_box`)
- `lumentrace.hit_record`: `HitRecord`, built with `HitRecord.from_ray`, which
  turns the normal to face against the incident ray and sets `front_face`
- `lumentrace.hittable`: `Hittable` and `get_sphere_uv`
- `lumentrace.hittable_list`: `HittableList`, which returns the closest hit of
  its objects
- `lumentrace.flip_face`: `FlipFace`, which inverts `front_face` of hits
- `lumentrace.translate`: `Translate(obj, displacement)`
- `lumentrace.rotate`: `Rotate(obj, axis, degrees)` with `Axis.X`, `Axis.Y`,
  `Axis.Z` (or 0, 1, 2); raises `ValueError` for any other axis or for an
  object without a bounding box
- `lumentrace.sphere`: `Sphere(center, radius, material)`; a negative radius
  gives inward normals
- `lumentrace.moving_sphere`: `MovingSphere`, moving linearly between two
  centres over a time interval
- `lumentrace.rects`: `XYRect`, `XZRect`, `YZRect`
- `lumentrace.box`: `Box(p0, p1, material)`, made of six rectangles
- `lumentrace.constant_medium`: `ConstantMedium(boundary, density,
  phase_function)` for smoke and fog
- `lumentrace.bvh`: `BVH.build(objects, time0, time1)`; raises `ValueError`
  for an empty list or an object without a bounding box

The `material` and `phase_function` arguments are stored as given and handed
back in each `HitRecord`; any object can be used.

## Textures

Each derives from `lumentrace.texture.Texture` and has `value(u, v, p)`
returning a colour.

- `SolidColour(colour)` and `SolidColour.from_rgb(r, g, b)`
- `Checker(odd, even, scale=10.0)`
- `Perlin(size=256, rng=None)` with `noise(p)` and `turbulence(p, depth)`
- `Noise(scale, turbulence_depth, turbulence_size, grid_size, axis, rng=None)`,
  a marble-like grey texture
- `ImageTexture(image)` from a Pillow image, or `ImageTexture.open(path)`,
  which raises `OSError` if the file cannot be read

## Example

```python
from lumentrace.aabb import Ray
from lumentrace.sphere import Sphere
from lumentrace.hittable_list import HittableList
from lumentrace.bvh import BVH

world = HittableList()
world.add(Sphere((0.0, 0.0, -1.0), 0.5, material=None))
world.add(Sphere((0.0, -100.5, -1.0), 100.0, material=None))

ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), 0.0)
rec = world.hit(ray, 0.001, float("inf"))
if rec is not None:
    print(rec.t, rec.point, rec.front_face)

bvh = BVH.build([Sphere((x, 0.0, -3.0), 0.4, material=None) for x in range(-3, 4)], 0.0, 1.0)
print(bvh.bounding_box(0.0, 1.0))
```

## Rendering in tiles

`lumentrace.tiles` splits an image into square tiles (`get_tile_count`,
`get_tile_bounds`, `TileBounds`), renders a tile into an RGBA `bytearray`
with a `trace(i, j)` callable (`render_tile`), and copies it into the image
buffer upside down (`copy_tile`). `lumentrace.threadpool.ThreadPool(size)`
runs jobs on worker threads; it can be used as a context manager, and a size
below one raises `PoolCreationError`.

```python
from lumentrace.threadpool import ThreadPool
from lumentrace.tiles import COLOR_CHANNELS, copy_tile, get_tile_bounds, get_tile_count, render_tile

width, height, tile_size = 64, 48, 16
image = bytearray(width * height * COLOR_CHANNELS)
n_tiles = get_tile_count(tile_size, width) * get_tile_count(tile_size, height)


def job(idx):
    bounds = get_tile_bounds(idx, tile_size, width, height)
    tile = render_tile(lambda i, j: bytes((255, 0, 0, 255)), bounds, tile_size)
    copy_tile(image, tile, bounds, tile_size, width, height)


with ThreadPool(4) as pool:
    for idx in range(n_tiles):
        pool.execute(lambda idx=idx: job(idx))
```

## What it does not do

There are no materials (no scattering, emission or importance-sampling
densities), no camera, no backgrounds, no ready-made scenes, no path tracing
loop that computes a pixel's colour, no image file output and no command-line
program. The caller supplies the `trace(i, j)` function and writes the
finished buffer out.