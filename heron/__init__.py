"""Physics components and resources for rigid-body simulation, with 3D debug wireframes."""

__version__ = "0.1.0"