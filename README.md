# minirt

The core of a ray tracer for plain-text `.rt` scene descriptions. It reads a
scene into Python objects, intersects rays with spheres, planes, squares,
triangles and capped cylinders, tests for hard shadows, and shades a surface
point with ambient, diffuse and specular light plus a set of per-object
surface effects (wavy normals, checkerboards, rainbow colouring, bump maps
and image textures).

## Modules

* `minirt.vector` — `Vec3` (arithmetic, `dot`, `cross`, `length`,
  `normalized`) and `Matrix3` (`apply`).
* `minirt.scene` — the scene data types: `Scene`, `Camera`, `Light`,
  `Ambient`, `Sphere`, `Plane`, `Square`, `Triangle`, `Cylinder`, `Rgb`,
  `Texture`, `Bonus`, `Effect` and `Options`.
* `minirt.parsing` — numeric field parsing: `parse_float`, `parse_uint`,
  `parse_udouble`, `parse_coords`, `parse_rgb`, `check_digits`,
  `clamp_resolution`.
* `minirt.bonus_options` — surface-effect options: `plane_bonus`,
  `sphere_bonus`, `cylinder_bonus`, `parallel_direction`, `load_texture` and
  the default `pillow_texture_loader`.
* `minirt.loader` — `load_scene`, `parse_scene`, `count_elements`,
  `element_kind`.
* `minirt.options` — `parse_options` for the rendering flags.
* `minirt.intersect` — `Ray`, `PlaneHit`, `plane_hit`, `sphere_hit`,
  `cylinder_side_t`, `cap_hit`, `nearest_cap`, `inside_square`,
  `triangle_params`, `inside_triangle`, `triangle_hit`.
* `minirt.shadows` — `in_shadow` and one shadow test per shape.
* `minirt.shading` — `SurfacePoint`, `get_color` and the lighting, effect and
  filter functions it uses (`ambient`, `spot_light`, `disrupt`,
  `sepia_filter`, `average_colors`, …).
* `minirt.errors` — `MiniRTError` and `ErrorKind`.

## Scene files

A scene is a text file with one element per line. Every line starts with an
identifier; fields are separated by spaces, and vectors and colours are
comma-separated triples. Exactly one `R` and one `A` line are required; any
other non-empty line that is not one of the identifiers below is an error.

| Line | Fields |
| ---- | ------ |
| `R`  | width height |
| `A`  | intensity (0 to 1), colour |
| `c`  | position, orientation, field of view in degrees |
| `l`  | position, intensity (0 to 1), colour, optional `parallel:x,y,z` |
| `sp` | centre, diameter, colour, up to two effects |
| `pl` | point, normal, colour, up to two effects |
| `sq` | centre, normal, side, colour, up to two effects |
| `tr` | first, second and third vertex, colour, up to two effects |
| `cy` | base point, axis, diameter, height, colour, up to two effects |

Colours are integers from 0 to 255. Sizes are unsigned decimals; coordinates
may be negative. Elements of each kind are stored in reverse file order, so
the last camera in the file is `scene.cameras[0]`, the one `scene.camera()`
returns first.

```
R 800 600
A 0.2 255,255,255
c 0,0,-20 0,0,1 70
l -10,10,-10 0.7 255,255,255
sp 0,0,0 6 255,0,0 rainbow
pl 0,-3,0 0,1,0 200,200,200 checkered
cy 6,-3,2 0,1,0 2 5 0,120,255
```

### Surface effects

* Planes, squares and triangles: `normal-disruption`, `checkered`,
  `bumpmap:<image>`, `skybox:<image>`
* Spheres: `normal-disruption`, `rainbow`, `bumpmap:<image>`,
  `uv-map:<image>`
* Cylinders: `rainbow`

Image paths are opened through a texture loader, a callable taking a path
and returning a `Texture`. The default, `pillow_texture_loader`, reads any
image Pillow understands. `load_scene` and `parse_scene` accept another
loader, and an optional `(max_width, max_height)` that the resolution is
clamped to.

## Rendering options

`minirt.options.parse_options` turns flags into an `Options` value:

* `--save` sets `save`
* `--sepia-filter` sets `sepia`; `sepia_filter` then tones colours sepia
* `--antialiasing` sets `antialiasing`
* `--no-specular` sets `no_specular`; `spot_light` then drops highlights
* `--reference-axis` sets `reference_axis`

Unknown flags raise `MiniRTError` with `ErrorKind.BAD_FLAG`, repeated ones
with `ErrorKind.DOUBLE_FLAG`. Assign the result to `scene.options`.

## Example

```python
from minirt.intersect import Ray, sphere_hit
from minirt.loader import load_scene
from minirt.shading import SurfacePoint, get_color

scene = load_scene("scenes/example.rt", max_resolution=(1920, 1080))
sphere = scene.spheres[0]
eye = scene.camera().pos

ray = Ray(direction=(sphere.center - eye).normalized())
t = sphere_hit(sphere, ray, eye)
if t is not None:
    point = eye + ray.direction * t
    surface = SurfacePoint(
        p=point,
        normal=point - sphere.center,
        rgb=sphere.rgb,
        center=sphere.center,
        bonus=sphere.bonus,
    )
    print(f"{get_color(scene, surface):06x}")
```

`get_color` lights the point with every light of the scene, skipping the
direct contribution of any light that `in_shadow` finds blocked, and returns
a packed `0xRRGGBB` integer.

## What it does not do

The package stops at the colour of a single surface point. It has no
per-pixel render loop, does not build camera rays from pixel coordinates,
does not write image files and opens no window. The `save`, `antialiasing`
and `reference_axis` options are parsed but nothing in the package acts on
them; `average_colors` is there for combining samples of one pixel if you
write that loop yourself.

## Errors

Every problem with a scene or its options is raised as
`minirt.errors.MiniRTError`, whose `kind` is a member of
`minirt.errors.ErrorKind`: an unreadable scene file (`BAD_PATH`), a malformed
line (`BAD_SCENE`), a colour out of range (`BAD_RGB`), a light or ambient
intensity outside `[0, 1]` (`BAD_INTENSITY`), an unknown or repeated flag
(`BAD_FLAG`, `DOUBLE_FLAG`), a bad effect option (`BAD_BONUS`) or an
unreadable texture (`BAD_TEXTURE`).