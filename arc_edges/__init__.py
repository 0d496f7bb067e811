from .types import ControlPolygon, EdgeTable, SampledPoint
from .validate import InputValidationError
from .config import ArcConfig, ArcOptions, get_arc_config, set_arc_config
from .geometry import derive_control_polygon, derive_control_polygons, fold_control_points
from .sampler import sample, sample_polygons, sample_positions
from .interpolate import interpolate_attributes, interpolate_column
from .assemble import ArcVariant, arc, arc0, arc2, compute_arcs
from .edges import edge_table, long_edge_table
from .tableio import iter_records, read_table, write_csv, write_json
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    'ArcConfig',
    'ArcOptions',
    'ArcVariant',
    'ControlPolygon',
    'EdgeTable',
    'InputValidationError',
    'SampledPoint',
    'arc',
    'arc0',
    'arc2',
    'compute_arcs',
    'derive_control_polygon',
    'derive_control_polygons',
    'edge_table',
    'fold_control_points',
    'generate_tikz_code',
    'generate_tikz_document',
    'get_arc_config',
    'interpolate_attributes',
    'interpolate_column',
    'iter_records',
    'latex_escape',
    'long_edge_table',
    'read_table',
    'sample',
    'sample_polygons',
    'sample_positions',
    'set_arc_config',
    'write_csv',
    'write_json',
]
