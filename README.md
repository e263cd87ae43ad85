# nori

Building blocks for a small, educational ray tracer, written in plain Python
with no third-party dependencies.

## What is inside

- `nori.vector`: `Vector`, `Point` and `Normal`, immutable n-dimensional
  vectors with arithmetic, `dot`, `cross` (3D only), `norm`, `squared_norm`,
  `normalized`, `cwise_min`, `cwise_max` and `Vector.constant(value, dimension)`.
- `nori.color`: `Color3f`, a linear RGB color with element-wise arithmetic and
  `clamp()`, and `Color4f`, a color with a filter weight, with
  `Color4f.from_color3()` and `divide_by_filter_weight()`.
- `nori.dpdf`: `DiscretePDF`, which builds a discrete distribution with
  `append()` and `normalize()` and maps uniform samples to indices with
  `sample()`, `sample_with_pdf()`, `sample_reuse()` and
  `sample_reuse_with_pdf()`.
- `nori.bbox`: `BoundingBox`, an axis-aligned box with volume, surface area,
  containment, overlap, distance, expansion, clipping, merging and corner
  queries.
- `nori.frame`: `Frame`, an orthonormal coordinate frame with `to_local()`
  and `to_world()`, and the local spherical helpers `cos_theta`, `sin_theta`,
  `tan_theta`, `sin_theta2`, `sin_phi`, `cos_phi`, `sin_phi2` and `cos_phi2`.
- `nori.proplist`: `PropertyList`, a container of named properties typed by
  `PropertyType`, and the `NoriError` exception.
- `nori.object`: the abstract `NoriObject`, the `ClassType` enumeration with
  `class_type_name()`, and the `ObjectFactory` registry with its
  `register_class` decorator.
- `nori.rfilter`: the image reconstruction filters `GaussianFilter`
  (`"gaussian"`), `MitchellNetravaliFilter` (`"mitchell"`), `TentFilter`
  (`"tent"`) and `BoxFilter` (`"box"`), registered with the factory.
- `nori.arcball`: `Quaternion` and an `Arcball` controller that turns mouse
  drags into a 4x4 rotation matrix.

## Installation

```
pip install .
```

## Examples

Sampling a discrete distribution:

```python
from nori.dpdf import DiscretePDF

pdf = DiscretePDF()
for weight in (1.0, 3.0):
    pdf.append(weight)
pdf.normalize()              # returns the previous sum, 4.0
index = pdf.sample(0.8)      # -> 1
```

Growing a bounding box:

```python
from nori.bbox import BoundingBox
from nori.vector import Point

box = BoundingBox.empty(3)
box.expand_by(Point(0.0, 0.0, 0.0))
box.expand_by(Point(1.0, 2.0, 3.0))
box.volume()        # 6.0
box.major_axis()    # 2
```

Reading typed properties:

```python
from nori.proplist import PropertyList, PropertyType

props = PropertyList()
props.set("radius", PropertyType.FLOAT, 2.0)
props.get("radius", PropertyType.FLOAT)          # 2.0
props.get("stddev", PropertyType.FLOAT, 0.5)     # default: 0.5
props.get("radius", PropertyType.INTEGER)        # raises NoriError
```

Creating a reconstruction filter through the object factory:

```python
from nori.object import ObjectFactory
from nori.proplist import PropertyList
import nori.rfilter  # registers "gaussian", "mitchell", "tent" and "box"

gaussian = ObjectFactory.create("gaussian", PropertyList())
gaussian.eval(0.0)   # 1 - exp(-8)
```

Driving an arcball:

```python
from nori.arcball import Arcball

ball = Arcball()
ball.size = (800, 600)
ball.button((400, 300), True)
ball.motion((450, 300))
ball.button((450, 300), False)
ball.matrix()        # 4x4 rotation matrix as nested tuples
```

## What this package does not do

It holds the geometric and bookkeeping pieces only. It does not load scene
files, intersect rays with meshes, render images, or write image files; there
are no cameras, samplers, integrators or materials. It has no sample-warping
routines or statistical tests, no command-line program and no interactive
viewer: `Arcball` computes rotations but draws nothing.

## Running the tests

```
pip install .[test]
pytest
```