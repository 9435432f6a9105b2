"""BoundedPath - Triangulated ribbon meshes between two closed boundaries.

BoundedPath builds a renderable ribbon mesh between an inner and an outer
boundary polygon (each sampled independently from a closed curve), derives a
centerline from the triangulation, and smooths that centerline with a small
Gaussian filter.

Example:
    $ boundedpath build track.json

This will create track-ribbon.obj containing the ribbon mesh and the
smoothed centerline.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
