"""
Wang Fill - Wang tile auto-tiling library.

This package contains the Wang tile data model (adjacency ids, tile
catalogs), cell storage, grid topologies, and debug rendering.
"""
