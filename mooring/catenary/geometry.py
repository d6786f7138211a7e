"""
Mooring Geometry Models

Derivation of catenary geometry from a validated line input.

The simplified model is a provisional placeholder pending
standards-based mechanics (API RP 2SK / DNV-OS-E301 / ISO 19901-7).
A rigorous elastic-catenary solver plugs in as another GeometryModel
without touching validation, safety checks or curve sampling.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Type
import logging
import math

from mooring.errors import ErrorCode, GeometryError

from .models import CatenaryGeometry, LineInput

logger = logging.getLogger(__name__)


# =============================================================================
# MODEL INTERFACE
# =============================================================================

class GeometryModel(ABC):
    """
    Strategy interface for turning a line input into catenary geometry.

    Implementations receive input that has already passed validation and
    must be pure: identical input yields identical output.
    """

    name: str = "abstract"

    @abstractmethod
    def compute_geometry(self, line: LineInput) -> CatenaryGeometry:
        """Derive angles, lengths, anchor tension and safety factor."""


# =============================================================================
# SIMPLIFIED MODEL
# =============================================================================

class SimplifiedGeometryModel(GeometryModel):
    """
    Simplified reference model.

    fairlead angle  = atan2(d, L/2)
    grounded length = max(0, L - sqrt(d² + (L/2)²))
    anchor distance = sqrt(L² - d²)
    anchor angle    = atan2(d, anchor distance)
    anchor tension  = T·exp(-w·grounded length / T)
    safety factor   = MBL / T

    Ignores elasticity, seabed friction and dynamic effects. Stiffness is
    accepted but unused.
    """

    name = "simplified"

    def compute_geometry(self, line: LineInput) -> CatenaryGeometry:
        tension = float(line.fairlead_tension)
        depth = float(line.water_depth)
        length = float(line.component_length)
        half_length = length / 2.0

        fairlead_angle_rad = math.atan2(depth, half_length)

        # No squared terms, so any finite length stays in float range
        hypot = math.hypot(depth, half_length)
        grounded_length = max(0.0, length - hypot)

        slack = length - depth
        if slack < 0:
            raise GeometryError(
                f"Anchor distance undefined: L - d = {slack}",
                field="component_length",
                actual=length,
                expected=f">= {depth}",
                code=ErrorCode.GEO_NEGATIVE_RADICAND,
            )
        anchor_distance = math.sqrt(slack) * math.sqrt(length + depth)

        anchor_angle_rad = math.atan2(depth, anchor_distance)

        # Underflows to 0 when T << w·grounded length; still a valid result
        anchor_tension = tension * math.exp(
            -line.component_weight * grounded_length / tension
        )
        if anchor_tension == 0.0:
            logger.warning(
                f"Anchor tension underflowed to 0 (T={tension}, "
                f"w={line.component_weight}, grounded={grounded_length:.3f})"
            )

        safety_factor = line.component_mbl / tension

        return CatenaryGeometry(
            fairlead_angle_deg=math.degrees(fairlead_angle_rad),
            grounded_length=grounded_length,
            anchor_distance=anchor_distance,
            anchor_angle_deg=math.degrees(anchor_angle_rad),
            anchor_tension=anchor_tension,
            safety_factor=safety_factor,
        )


# =============================================================================
# MODEL REGISTRY
# =============================================================================

_MODELS: Dict[str, Type[GeometryModel]] = {}


def register_geometry_model(model_cls: Type[GeometryModel]) -> Type[GeometryModel]:
    """
    Register a geometry model class under its name.

    Usable as a class decorator.
    """
    if not model_cls.name or model_cls.name == GeometryModel.name:
        raise ValueError(f"Geometry model {model_cls.__name__} must define a name")
    _MODELS[model_cls.name] = model_cls
    logger.debug(f"Registered geometry model: {model_cls.name}")
    return model_cls


def get_geometry_model(name: str = "simplified") -> GeometryModel:
    """
    Instantiate a registered geometry model.

    Raises:
        KeyError: If no model is registered under name
    """
    if name not in _MODELS:
        raise KeyError(
            f"Unknown geometry model: {name}. Available: {sorted(_MODELS)}"
        )
    return _MODELS[name]()


def list_geometry_models() -> List[str]:
    return sorted(_MODELS)


register_geometry_model(SimplifiedGeometryModel)
