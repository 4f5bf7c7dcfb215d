from .ratio import SegmentRatio
from .types import IntersectionInfo, RobustnessEvent, RobustPoint, Segment, Side, SideInfo
from .side import side_by_triangle, side_value
from .config import RelateConfig, get_relate_config, set_relate_config
from .rescale import NoRescalePolicy, RescalePolicy, RobustnessPolicy, get_rescale_policy
from .policies import (
    IntersectionFraction,
    IntersectionPoints,
    IntersectionPointsPolicy,
    RelationKind,
    RelationPolicy,
    ResultPolicy,
    SegmentRelation,
    TupledPolicy,
)
from .cartesian import (
    intersection_points,
    log_robustness_event,
    promote_equal_points,
    relate,
    relate_segments,
    robust_endpoints,
)

__all__ = [
    'SegmentRatio',
    'IntersectionInfo',
    'RobustnessEvent',
    'RobustPoint',
    'Segment',
    'Side',
    'SideInfo',
    'side_by_triangle',
    'side_value',
    'RelateConfig',
    'get_relate_config',
    'set_relate_config',
    'NoRescalePolicy',
    'RescalePolicy',
    'RobustnessPolicy',
    'get_rescale_policy',
    'IntersectionFraction',
    'IntersectionPoints',
    'IntersectionPointsPolicy',
    'RelationKind',
    'RelationPolicy',
    'ResultPolicy',
    'SegmentRelation',
    'TupledPolicy',
    'intersection_points',
    'log_robustness_event',
    'promote_equal_points',
    'relate',
    'relate_segments',
    'robust_endpoints',
]
