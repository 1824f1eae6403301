"""Ground-truth sources answering which POI kind sits at a canvas coordinate."""

from .ground_truth import ClassificationGroundTruth, GroundTruth, PoiDatabaseGroundTruth, build_ground_truth

__all__ = [
    "ClassificationGroundTruth",
    "GroundTruth",
    "PoiDatabaseGroundTruth",
    "build_ground_truth",
]
