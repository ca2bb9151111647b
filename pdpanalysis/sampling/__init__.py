from .grid_generator import GridGenerator, LinspaceGrid, CategoryGrid,\
        check_resolution, feature_grid, cartesian_grid
from .convex_hull import ConvexHullMask
