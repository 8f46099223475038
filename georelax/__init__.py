from .types import (
    DegenerateGeometryError,
    DuplicatePointError,
    GeoRelaxError,
    UnknownPointError,
)
from .geometry import (
    Vec2,
    add,
    angle_at_vertex,
    angle_between,
    cross,
    distance,
    dot,
    grid_key,
    norm,
    norm_sq,
    normalize,
    round_coordinate,
    round_vec,
    vec_from_key,
    vector,
)
from .constraints import (
    aligned_with,
    at_angle,
    at_distance_equal,
    at_middle_of,
    at_position,
    closer_to_than,
    combine,
    on_circle,
    translated_by_segment,
    translated_by_vector,
)
from .solver import (
    PassReport,
    Point,
    Relaxation,
    Scene,
    Solution,
    SolveOptions,
    get_default_options,
    score_solution,
    set_default_options,
    solve,
)
from .projections import heatmap, measure_report, point_coords, stability
from .scenes import build_folding_table
from .tikz import generate_tikz_code, generate_tikz_document

__all__ = [
    'DegenerateGeometryError',
    'DuplicatePointError',
    'GeoRelaxError',
    'UnknownPointError',
    'Vec2',
    'add',
    'angle_at_vertex',
    'angle_between',
    'cross',
    'distance',
    'dot',
    'grid_key',
    'norm',
    'norm_sq',
    'normalize',
    'round_coordinate',
    'round_vec',
    'vec_from_key',
    'vector',
    'aligned_with',
    'at_angle',
    'at_distance_equal',
    'at_middle_of',
    'at_position',
    'closer_to_than',
    'combine',
    'on_circle',
    'translated_by_segment',
    'translated_by_vector',
    'PassReport',
    'Point',
    'Relaxation',
    'Scene',
    'Solution',
    'SolveOptions',
    'get_default_options',
    'score_solution',
    'set_default_options',
    'solve',
    'heatmap',
    'measure_report',
    'point_coords',
    'stability',
    'build_folding_table',
    'generate_tikz_code',
    'generate_tikz_document',
]
