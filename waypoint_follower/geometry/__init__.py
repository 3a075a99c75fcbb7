"""Frame transforms, angle helpers and planar geometry primitives."""
