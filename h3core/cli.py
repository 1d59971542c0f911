"""
CLI entry point for h3core.

Usage:
    # Inspect a cell
    python -m h3core info 8928308280fffff

    # Neighbors and k-rings
    python -m h3core neighbors 8928308280fffff
    python -m h3core disk 8928308280fffff -k 2
    python -m h3core edges 8928308280fffff

    # Boundary cells of a GeoJSON polygon
    python -m h3core trace area.geojson --resolution 9

    # Timing harness
    python -m h3core --config configs/benchmark.yaml benchmark
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import geopandas as gpd
import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import H3CoreConfig
from .errors import H3CoreError, PentagonError
from .geo import (
    BoundedCellSet,
    GeoLoop,
    GeoPolygon,
    LatLng,
    directed_edge_to_boundary,
    edge_length,
    get_edge_hexagons,
    hex_radius,
    lat_lng_to_cell,
    line_hex_estimate,
    line_trace_size,
    trace_polygon_edges,
)
from .grid import (
    get_directed_edge_destination,
    grid_disk_distances,
    neighbor_rotations,
    origin_to_directed_edges,
)
from .index import (
    AXIS_DIRECTIONS,
    CellFields,
    cell_to_string,
    is_pentagon,
    is_valid_cell,
    string_to_cell,
)

logger = logging.getLogger(__name__)


# ============================================================================
# SUBCOMMANDS
# ============================================================================

def cmd_info(args, config: H3CoreConfig) -> int:
    h = string_to_cell(args.cell)
    fields = CellFields.unpack(h)
    print(f"cell:       {cell_to_string(h)}")
    print(f"valid:      {is_valid_cell(h)}")
    print(f"resolution: {fields.resolution}")
    print(f"base cell:  {fields.base_cell}")
    print(f"digits:     {''.join(str(d) for d in fields.digits) or '-'}")
    print(f"pentagon:   {is_pentagon(h)}")
    if is_valid_cell(h):
        radius = hex_radius(h, config.distance_unit)
        print(f"radius:     {radius:.6f} {config.distance_unit}")
    return 0


def cmd_neighbors(args, config: H3CoreConfig) -> int:
    h = string_to_cell(args.cell)
    for direction in AXIS_DIRECTIONS:
        try:
            cell, rotations = neighbor_rotations(h, direction, 0)
        except PentagonError:
            print(f"{direction.name:>2}  -  (deleted pentagon direction)")
            continue
        target = cell_to_string(cell) if cell else "-"
        print(f"{direction.name:>2}  {target}  rotations={rotations}")
    return 0


def cmd_disk(args, config: H3CoreConfig) -> int:
    h = string_to_cell(args.cell)
    for cell, distance in grid_disk_distances(h, args.k):
        print(f"{distance}\t{cell_to_string(cell)}")
    return 0


def cmd_edges(args, config: H3CoreConfig) -> int:
    h = string_to_cell(args.cell)
    for edge in origin_to_directed_edges(h):
        destination = get_directed_edge_destination(edge)
        length = edge_length(edge, config.distance_unit)
        print(f"{cell_to_string(edge)}  -> {cell_to_string(destination)}  {length:.6f} {config.distance_unit}")
    return 0


def _load_polygons(path: Path) -> List[GeoPolygon]:
    gdf = gpd.read_file(path)
    if gdf.crs is not None and gdf.crs != 'EPSG:4326':
        gdf = gdf.to_crs('EPSG:4326')

    polygons = []
    for geometry in gdf.explode(index_parts=False).geometry:
        if geometry is None or geometry.geom_type != 'Polygon':
            kind = geometry.geom_type if geometry is not None else 'empty'
            logger.warning(f"Skipping {kind} geometry")
            continue
        polygons.append(GeoPolygon.from_shapely(geometry))
    return polygons


def cmd_trace(args, config: H3CoreConfig) -> int:
    polygons = _load_polygons(Path(args.geojson))
    if not polygons:
        logger.error(f"No polygons found in {args.geojson}")
        return 1

    total = 0
    for i, polygon in enumerate(polygons):
        cells = trace_polygon_edges(polygon, args.resolution, buffer=config.polygon_buffer)
        logger.info(
            f"Polygon {i}: {polygon.num_verts} vertices -> {len(cells)} boundary cells "
            f"(capacity {cells.capacity})"
        )
        for cell in cells.search:
            print(cell_to_string(cell))
        total += len(cells)

    logger.info(f"Traced {len(polygons)} polygon(s), {total} boundary cells")
    return 0


# ============================================================================
# BENCHMARK HARNESS
# ============================================================================

def _random_points(rng: np.random.Generator, n: int) -> np.ndarray:
    """Uniform points on the sphere as (lat, lng) radians, away from the poles."""
    lat = np.arcsin(rng.uniform(-0.999, 0.999, n))
    lng = rng.uniform(-np.pi, np.pi, n)
    return np.column_stack([lat, lng])


def run_benchmark(config: H3CoreConfig, show_progress: bool = True) -> pd.DataFrame:
    """
    Time neighbor resolution, edge boundaries, line estimates and ring tracing.

    Returns:
        DataFrame with one row per operation: calls, total and mean seconds
    """
    rng = np.random.default_rng(config.benchmark_seed)
    res = config.benchmark_resolution
    n = config.benchmark_iterations

    points = _random_points(rng, n)
    timings: Dict[str, List[float]] = {
        'neighbor_rotations': [],
        'directed_edge_to_boundary': [],
        'line_hex_estimate': [],
        'get_edge_hexagons': [],
    }

    for i in tqdm(range(n), desc=f"Benchmark res {res}", disable=not show_progress):
        origin = LatLng(float(points[i, 0]), float(points[i, 1]))
        cell = lat_lng_to_cell(origin, res)

        for direction in AXIS_DIRECTIONS:
            start = time.perf_counter()
            try:
                neighbor_rotations(cell, direction, 0)
            except PentagonError:
                # Deleted K direction of a pentagon cell.
                continue
            timings['neighbor_rotations'].append(time.perf_counter() - start)

        for edge in origin_to_directed_edges(cell):
            start = time.perf_counter()
            directed_edge_to_boundary(edge)
            timings['directed_edge_to_boundary'].append(time.perf_counter() - start)

        # Short edge so tracing stays bounded at fine resolutions.
        destination = LatLng(origin.lat + 1e-3, origin.lng + 1e-3)
        start = time.perf_counter()
        line_hex_estimate(origin, destination, res)
        timings['line_hex_estimate'].append(time.perf_counter() - start)

        loop = GeoLoop((origin, destination, LatLng(origin.lat, destination.lng)))
        capacity = max(line_trace_size(GeoPolygon(loop), res), 1)
        start = time.perf_counter()
        get_edge_hexagons(loop, res, BoundedCellSet(capacity))
        timings['get_edge_hexagons'].append(time.perf_counter() - start)

    summary = pd.DataFrame([
        {
            'operation': name,
            'calls': len(values),
            'total_s': float(np.sum(values)),
            'mean_us': float(np.mean(values) * 1e6) if values else float('nan'),
        }
        for name, values in timings.items()
    ])
    return summary


def cmd_benchmark(args, config: H3CoreConfig) -> int:
    if args.iterations is not None:
        config.benchmark_iterations = args.iterations
    if args.resolution is not None:
        config.benchmark_resolution = args.resolution
    config.validate()

    summary = run_benchmark(config)
    print(summary.to_string(index=False))
    return 0


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hexagonal grid index core: inspection, traversal and tracing",
    )
    parser.add_argument(
        "--config", default=None,
        help="YAML config file (see H3CoreConfig)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Logging level (overrides config, default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("info", help="Decode a cell index")
    p.add_argument("cell", help="Cell index in hexadecimal")
    p.set_defaults(func=cmd_info)

    p = sub.add_parser("neighbors", help="Neighbors in the six axis directions")
    p.add_argument("cell", help="Cell index in hexadecimal")
    p.set_defaults(func=cmd_neighbors)

    p = sub.add_parser("disk", help="Cells within k steps, with distances")
    p.add_argument("cell", help="Cell index in hexadecimal")
    p.add_argument("-k", type=int, default=1, help="Ring distance (default: 1)")
    p.set_defaults(func=cmd_disk)

    p = sub.add_parser("edges", help="Directed edges leaving a cell")
    p.add_argument("cell", help="Cell index in hexadecimal")
    p.set_defaults(func=cmd_edges)

    p = sub.add_parser("trace", help="Boundary cells of GeoJSON polygons")
    p.add_argument("geojson", help="Boundary file readable by geopandas (GeoJSON, GeoPackage, ...)")
    p.add_argument("-r", "--resolution", type=int, required=True, help="Cell resolution")
    p.set_defaults(func=cmd_trace)

    p = sub.add_parser("benchmark", help="Time the core operations")
    p.add_argument("--iterations", type=int, default=None,
                   help="Number of random points (overrides config)")
    p.add_argument("--resolution", type=int, default=None,
                   help="Resolution (overrides config)")
    p.set_defaults(func=cmd_benchmark)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = H3CoreConfig.from_yaml(args.config) if args.config else H3CoreConfig()
    if args.log_level:
        config.log_level = args.log_level

    try:
        config.validate()
    except H3CoreError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        return args.func(args, config)
    except H3CoreError as e:
        logger.error(f"{args.command} failed ({e.code.name}): {e}")
        return int(e.code)


if __name__ == "__main__":
    sys.exit(main())
