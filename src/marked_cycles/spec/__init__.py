"""Constants, error taxonomy, cell types and the cover mesh contract."""

from .errors import (
    CoverError,
    LaminationError,
    UnassignedAngleError,
    AdjacencyError,
    FaceTracingError,
    EulerCharacteristicError,
    AngleRangeError,
)
from .structures import (
    Wake,
    Edge,
    Face,
    CoverMeshContract,
    validate_cover_mesh,
    create_cover_mesh,
)
