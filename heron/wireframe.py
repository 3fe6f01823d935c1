"""Wireframe outlines of 3D collision shapes for debug rendering."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from scipy.spatial import ConvexHull as _QHull

from heron.debug_color import Color
from heron.shapes import (
    Capsule,
    CollisionShape,
    Cone,
    ConvexHull,
    Cuboid,
    Cylinder,
    HeightField,
    Sphere,
)
from heron.vecmath import Quat, Vec2, Vec3

_log = logging.getLogger(__name__)

FRAC_PI_2 = math.pi / 2.0
_QUARTER_CIRCLE_SEGMENTS = 4

_CUBOID_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    (0, 5),
    (1, 6),
    (2, 7),
    (3, 4),
)

# For rounded cuboids: the directions in which each edge is pushed out so that
# it sits where the edge really is once the border radius is added.
_CUBOID_EDGE_BEVEL_MODS: tuple[tuple[Vec3, Vec3], ...] = (
    (Vec3.Z, Vec3.Y),
    (-Vec3.X, Vec3.Y),
    (-Vec3.Z, Vec3.Y),
    (Vec3.X, Vec3.Y),
    (Vec3.X, -Vec3.Y),
    (Vec3.Z, -Vec3.Y),
    (-Vec3.X, -Vec3.Y),
    (-Vec3.Z, -Vec3.Y),
    (Vec3.X, Vec3.Z),
    (-Vec3.X, Vec3.Z),
    (-Vec3.X, -Vec3.Z),
    (Vec3.X, -Vec3.Z),
)


@dataclass(frozen=True)
class Line:
    """A coloured line segment to draw."""

    start: Vec3
    end: Vec3
    duration: float
    color: Color


@dataclass
class DebugLines:
    """Collects the line segments to draw."""

    lines: list[Line] = field(default_factory=list)

    def line_colored(self, start: Vec3, end: Vec3, duration: float, color: Color) -> None:
        """Add a line from ``start`` to ``end`` drawn for ``duration`` seconds."""
        self.lines.append(Line(start, end, duration, color))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)


def _cuboid_vertices(half_length: Vec3) -> list[Vec3]:
    x, y, z = half_length
    return [
        Vec3(x, y, z),
        Vec3(-x, y, z),
        Vec3(-x, y, -z),
        Vec3(x, y, -z),
        Vec3(x, -y, -z),
        Vec3(x, -y, z),
        Vec3(-x, -y, z),
        Vec3(-x, -y, -z),
    ]


def _cuboid_corner_bevel_rotations() -> list[Quat]:
    # Rotations that carry a rounded corner from one cuboid vertex to the next,
    # following the order of the cuboid vertices.
    return [
        Quat.from_rotation_y(-FRAC_PI_2),
        Quat.from_rotation_y(-FRAC_PI_2),
        Quat.from_rotation_y(-FRAC_PI_2),
        Quat.from_rotation_z(-FRAC_PI_2),
        Quat.from_rotation_x(FRAC_PI_2),
        Quat.from_rotation_x(FRAC_PI_2),
        Quat.from_rotation_x(FRAC_PI_2),
    ]


def _add_quarter_circle(
    origin: Vec3, orient: Quat, radius: float, color: Color, lines: DebugLines
) -> None:
    angle = FRAC_PI_2 / _QUARTER_CIRCLE_SEGMENTS
    current = orient.mul_vec3(Vec3.X * radius)
    step = Quat.from_axis_angle(orient.mul_vec3(Vec3.Z), angle)
    for _ in range(_QUARTER_CIRCLE_SEGMENTS):
        following = step.mul_vec3(current)
        lines.line_colored(origin + current, origin + following, 0.0, color)
        current = following


def _add_semicircle(
    origin: Vec3, orient: Quat, radius: float, color: Color, lines: DebugLines
) -> None:
    turn = Quat.from_rotation_y(math.pi)
    _add_quarter_circle(origin, orient, radius, color, lines)
    _add_quarter_circle(origin, orient * turn, radius, color, lines)


def _add_circle(
    origin: Vec3, orient: Quat, radius: float, color: Color, lines: DebugLines
) -> None:
    turn = Quat.from_rotation_x(math.pi)
    _add_semicircle(origin, orient, radius, color, lines)
    _add_semicircle(origin, orient * turn, radius, color, lines)


def _add_rounded_corner(
    origin: Vec3, orient: Quat, radius: float, color: Color, lines: DebugLines
) -> None:
    x_spin = Quat.from_rotation_x(FRAC_PI_2)
    y_spin = Quat.from_rotation_y(-FRAC_PI_2)
    _add_quarter_circle(origin, orient * y_spin, radius, color, lines)
    _add_quarter_circle(origin, orient * x_spin, radius, color, lines)
    _add_quarter_circle(origin, orient, radius, color, lines)


def add_cuboid(
    origin: Vec3, orient: Quat, half_length: Vec3, color: Color, lines: DebugLines
) -> None:
    """Outline the twelve edges of a cuboid."""
    vertices = _cuboid_vertices(half_length)
    for a, b in _CUBOID_EDGES:
        lines.line_colored(
            origin + orient.mul_vec3(vertices[a]),
            origin + orient.mul_vec3(vertices[b]),
            0.0,
            color,
        )


def add_rounded_cuboid(
    origin: Vec3,
    orient: Quat,
    half_length: Vec3,
    radius: float,
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline a cuboid grown by ``radius``, with rounded corners and edges."""
    vertices = _cuboid_vertices(half_length)
    rotations = _cuboid_corner_bevel_rotations()
    direction = Quat.IDENTITY
    for i, vertex in enumerate(vertices):
        corner = origin + orient.mul_vec3(vertex)
        _add_rounded_corner(corner, orient * direction, radius, color, lines)
        direction = direction * rotations[i % len(rotations)]

    def bevel_points(index: int, point: Vec3) -> tuple[Vec3, Vec3]:
        mod0, mod1 = _CUBOID_EDGE_BEVEL_MODS[index]
        return (
            origin + orient.mul_vec3(point + mod0 * radius),
            origin + orient.mul_vec3(point + mod1 * radius),
        )

    for index, (a, b) in enumerate(_CUBOID_EDGES):
        p00, p01 = bevel_points(index, vertices[a])
        p10, p11 = bevel_points(index, vertices[b])
        lines.line_colored(p00, p10, 0.0, color)
        lines.line_colored(p01, p11, 0.0, color)


def add_sphere(
    origin: Vec3, orient: Quat, radius: float, color: Color, lines: DebugLines
) -> None:
    """Outline a sphere with three perpendicular circles."""
    x_rotate = Quat.from_rotation_x(FRAC_PI_2)
    y_rotate = Quat.from_rotation_y(FRAC_PI_2)
    _add_circle(origin, orient, radius, color, lines)
    _add_circle(origin, orient * x_rotate, radius, color, lines)
    _add_circle(origin, orient * y_rotate, radius, color, lines)


def add_capsule(
    origin: Vec3,
    orient: Quat,
    half_segment: float,
    radius: float,
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline a capsule aligned with the local y axis."""
    x_rotate = Quat.from_rotation_x(FRAC_PI_2)
    y_rotate = Quat.from_rotation_y(FRAC_PI_2)
    invert_semi = Quat.from_rotation_z(math.pi)

    def at(x: float, y: float, z: float) -> Vec3:
        return origin + orient.mul_vec3(Vec3(x, y, z))

    offsets = [(0.0, -radius), (0.0, radius), (-radius, 0.0), (radius, 0.0)]
    for x, z in offsets:
        lines.line_colored(at(x, half_segment, z), at(x, -half_segment, z), 0.0, color)

    lower_center = origin + orient.mul_vec3(-Vec3.Y * half_segment)
    upper_center = origin + orient.mul_vec3(Vec3.Y * half_segment)

    _add_semicircle(lower_center, orient * invert_semi * y_rotate, radius, color, lines)
    _add_semicircle(lower_center, orient * invert_semi, radius, color, lines)
    _add_circle(lower_center, orient * x_rotate, radius, color, lines)

    _add_semicircle(upper_center, orient * y_rotate, radius, color, lines)
    _add_semicircle(upper_center, orient, radius, color, lines)
    _add_circle(upper_center, orient * x_rotate, radius, color, lines)


def _radial_directions() -> Iterator[Vec3]:
    frac_pi_8 = math.pi / 8.0
    for factor in range(8):
        angle = 2.0 * factor * frac_pi_8
        yield Vec3(math.cos(angle), 0.0, math.sin(angle))


def add_cone(
    origin: Vec3,
    orient: Quat,
    half_height: float,
    radius: float,
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline a cone: its base circle and eight lines up to the tip."""
    base = orient * (Vec3.Y * -half_height) + origin
    top = orient * (Vec3.Y * half_height) + origin
    x_rotate = Quat.from_rotation_x(FRAC_PI_2)
    _add_circle(base, orient * x_rotate, radius, color, lines)
    for direction in _radial_directions():
        lines.line_colored(base + orient * direction * radius, top, 0.0, color)


def add_cylinder(
    origin: Vec3,
    orient: Quat,
    half_height: float,
    radius: float,
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline a cylinder: both end circles and eight vertical lines."""
    base = orient * (Vec3.Y * -half_height) + origin
    top = orient * (Vec3.Y * half_height) + origin
    x_rotate = Quat.from_rotation_x(FRAC_PI_2)
    _add_circle(base, orient * x_rotate, radius, color, lines)
    _add_circle(top, orient * x_rotate, radius, color, lines)
    for direction in _radial_directions():
        offset = orient * direction * radius
        lines.line_colored(base + offset, top + offset, 0.0, color)


def add_height_field(
    origin: Vec3,
    orient: Quat,
    size: Vec2,
    heights: Sequence[Sequence[float]],
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline a height field as a grid of triangles.

    Raises ValueError if ``heights`` is empty.
    """
    if not heights:
        raise ValueError("height field needs at least one row of heights")
    rows = len(heights) - 1
    x_length = len(heights[0]) - 1
    if rows == 0 or x_length == 0:
        return

    y_step = size.y / rows
    y_org = -size.y / 2.0
    x_step = size.x / x_length
    x_org = -size.x / 2.0

    def at(x: float, height: float, y: float) -> Vec3:
        return origin + orient.mul_vec3(Vec3(x, height, y))

    for y_i in range(rows):
        for x_i in range(x_length):
            x0 = x_org + x_i * x_step
            x1 = x_org + (x_i + 1) * x_step
            y0 = y_org + y_i * y_step
            y1 = y_org + (y_i + 1) * y_step
            p00 = at(x0, heights[x_i][y_i], y0)
            p01 = at(x1, heights[x_i + 1][y_i], y0)
            p10 = at(x0, heights[x_i][y_i + 1], y1)
            p11 = at(x1, heights[x_i + 1][y_i + 1], y1)
            lines.line_colored(p00, p01, 0.0, color)
            lines.line_colored(p00, p10, 0.0, color)
            lines.line_colored(p10, p11, 0.0, color)
            lines.line_colored(p01, p11, 0.0, color)
            lines.line_colored(p10, p01, 0.0, color)


def add_convex_hull(
    origin: Vec3,
    orient: Quat,
    points: Sequence[Vec3],
    color: Color,
    lines: DebugLines,
) -> None:
    """Outline the triangles of the convex hull of ``points``."""
    vertices = list(points)
    hull = _QHull([tuple(p) for p in vertices])
    for a, b, c in hull.simplices:
        p0 = origin + orient.mul_vec3(vertices[int(a)])
        p1 = origin + orient.mul_vec3(vertices[int(b)])
        p2 = origin + orient.mul_vec3(vertices[int(c)])
        lines.line_colored(p0, p1, 0.0, color)
        lines.line_colored(p0, p2, 0.0, color)
        lines.line_colored(p1, p2, 0.0, color)


def add_shape_outline(
    shape: CollisionShape, origin: Vec3, orient: Quat, color: Color, lines: DebugLines
) -> None:
    """Outline any supported collision shape placed at ``origin`` with ``orient``."""
    match shape:
        case Cuboid(half_extends=half, border_radius=None):
            add_cuboid(origin, orient, half, color, lines)
        case Cuboid(half_extends=half, border_radius=bevel):
            add_rounded_cuboid(origin, orient, half, bevel, color, lines)
        case Sphere(radius=radius):
            add_sphere(origin, orient, radius, color, lines)
        case Capsule(half_segment=half_segment, radius=radius):
            add_capsule(origin, orient, half_segment, radius, color, lines)
        case ConvexHull(points=points):
            # The border radius of a rounded hull is not drawn.
            add_convex_hull(origin, orient, points, color, lines)
        case HeightField(size=size, heights=heights):
            add_height_field(origin, orient, size, heights, color, lines)
        case Cone(half_height=half_height, radius=radius):
            add_cone(origin, orient, half_height, radius, color, lines)
        case Cylinder(half_height=half_height, radius=radius):
            add_cylinder(origin, orient, half_height, radius, color, lines)
        case _:
            _log.warning("Debug render for this shape %r is unimplemented", shape)