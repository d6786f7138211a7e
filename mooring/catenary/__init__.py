"""
Mooring Catenary Engine

Validation, catenary geometry, safety-factor checks and curve sampling
for a single mooring line.

The geometry is a simplified placeholder model. It is isolated behind
GeometryModel so a standards-based elastic-catenary solver can replace
it without touching the rest of the engine.
"""

from .models import (
    LineInput,
    CurvePoint,
    CatenaryGeometry,
    CatenaryResult,
    SafetyCheck,
)

from .config import EngineConfig

from .validation import validate_input

from .geometry import (
    GeometryModel,
    SimplifiedGeometryModel,
    register_geometry_model,
    get_geometry_model,
    list_geometry_models,
)

from .curve import sample_curve

from .safety import check_safety, safety_status

from .engine import CatenaryEngine, compute

from .components import (
    ComponentCategory,
    ComponentSpec,
    COMPONENT_CATEGORIES,
    COMPONENT_DEFAULTS,
    get_component_defaults,
    get_available_sizes,
    get_component_options,
)

from .schema import LineInputForm, parse_form

from .display import DisplayUnits, format_result

__all__ = [
    # Records
    "LineInput",
    "CurvePoint",
    "CatenaryGeometry",
    "CatenaryResult",
    "SafetyCheck",
    # Config
    "EngineConfig",
    # Operations
    "validate_input",
    "compute",
    "check_safety",
    "safety_status",
    "sample_curve",
    "CatenaryEngine",
    # Geometry models
    "GeometryModel",
    "SimplifiedGeometryModel",
    "register_geometry_model",
    "get_geometry_model",
    "list_geometry_models",
    # Catalog
    "ComponentCategory",
    "ComponentSpec",
    "COMPONENT_CATEGORIES",
    "COMPONENT_DEFAULTS",
    "get_component_defaults",
    "get_available_sizes",
    "get_component_options",
    # Forms
    "LineInputForm",
    "parse_form",
    # Display
    "DisplayUnits",
    "format_result",
]
