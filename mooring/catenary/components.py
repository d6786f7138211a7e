"""
Mooring Component Catalog

Default specifications for common mooring line components. Values
follow typical industry catalogs; all in SI units:
- sizes in millimeters (mm)
- lengths in meters (m)
- weights in kilograms per meter (kg/m)
- stiffness (E) in N/m²
- MBL in newtons (N)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from mooring.core.enums import ComponentType

from .models import LineInput


@dataclass(frozen=True)
class ComponentCategory:
    """Catalog family with its sizes and grade/construction/material options."""
    component_type: ComponentType
    description: str
    sizes: tuple
    options: tuple
    option_kind: str  # "grade", "construction" or "material"


@dataclass(frozen=True)
class ComponentSpec:
    """Default values for one catalog entry."""
    component_type: ComponentType
    size_mm: int
    weight: float
    stiffness: float
    mbl: float
    default_length: float
    grade: Optional[str] = None
    construction: Optional[str] = None
    material: Optional[str] = None

    @property
    def size_label(self) -> str:
        return f"{self.size_mm}mm"

    def to_line_input(
        self,
        fairlead_tension: float,
        water_depth: float,
        length: Optional[float] = None,
    ) -> LineInput:
        """Build a LineInput from this component's defaults."""
        return LineInput(
            fairlead_tension=fairlead_tension,
            water_depth=water_depth,
            component_type=self.component_type,
            component_length=self.default_length if length is None else length,
            component_weight=self.weight,
            component_stiffness=self.stiffness,
            component_mbl=self.mbl,
            component_size=self.size_label,
        )


COMPONENT_CATEGORIES: Dict[ComponentType, ComponentCategory] = {
    ComponentType.CHAIN: ComponentCategory(
        ComponentType.CHAIN,
        "Studless and Studlink Chain",
        ("76mm", "84mm", "92mm", "100mm", "111mm", "120mm", "132mm", "142mm", "162mm"),
        ("R3", "R3S", "R4", "R4S", "R5"),
        "grade",
    ),
    ComponentType.WIRE_ROPE: ComponentCategory(
        ComponentType.WIRE_ROPE,
        "Steel Wire Rope",
        ("52mm", "60mm", "70mm", "80mm", "90mm", "100mm", "110mm"),
        ("6x19", "6x36", "6x41"),
        "construction",
    ),
    ComponentType.SYNTHETIC_ROPE: ComponentCategory(
        ComponentType.SYNTHETIC_ROPE,
        "HMPE and Aramid Ropes",
        ("80mm", "90mm", "100mm", "120mm", "140mm", "160mm"),
        ("HMPE", "Aramid"),
        "material",
    ),
    ComponentType.POLYESTER_ROPE: ComponentCategory(
        ComponentType.POLYESTER_ROPE,
        "Polyester Mooring Ropes",
        ("120mm", "140mm", "160mm", "180mm", "200mm"),
        ("Parallel Strand", "Braided"),
        "construction",
    ),
}


def _chain(size: int, weight: float, mbl: float) -> ComponentSpec:
    # Studless chain, R3 grade
    return ComponentSpec(ComponentType.CHAIN, size, weight, 5.9e10, mbl, 300.0, grade="R3")


def _wire(size: int, weight: float, mbl: float) -> ComponentSpec:
    # 6x36 construction
    return ComponentSpec(ComponentType.WIRE_ROPE, size, weight, 1.0e11, mbl, 500.0, construction="6x36")


def _synthetic(size: int, weight: float, mbl: float) -> ComponentSpec:
    return ComponentSpec(ComponentType.SYNTHETIC_ROPE, size, weight, 2.5e10, mbl, 800.0, material="HMPE")


def _polyester(size: int, weight: float, mbl: float) -> ComponentSpec:
    return ComponentSpec(
        ComponentType.POLYESTER_ROPE, size, weight, 1.8e10, mbl, 1000.0, construction="Parallel Strand",
    )


COMPONENT_DEFAULTS: Dict[str, ComponentSpec] = {
    "Chain-76mm": _chain(76, 113.5, 4_370_000),
    "Chain-84mm": _chain(84, 138.7, 5_320_000),
    "Chain-92mm": _chain(92, 166.2, 6_380_000),
    "Wire-70mm": _wire(70, 21.5, 3_180_000),
    "Wire-80mm": _wire(80, 28.1, 4_150_000),
    "Wire-90mm": _wire(90, 35.6, 5_250_000),
    "Synthetic-100mm": _synthetic(100, 6.2, 4_500_000),
    "Synthetic-120mm": _synthetic(120, 8.9, 6_480_000),
    "Polyester-140mm": _polyester(140, 12.5, 4_900_000),
    "Polyester-160mm": _polyester(160, 16.3, 6_400_000),
}

_KEY_PREFIX = {
    ComponentType.CHAIN: "Chain",
    ComponentType.WIRE_ROPE: "Wire",
    ComponentType.SYNTHETIC_ROPE: "Synthetic",
    ComponentType.POLYESTER_ROPE: "Polyester",
}


def _size_label(size: Union[str, int]) -> str:
    text = str(size).strip().lower()
    return text if text.endswith("mm") else f"{text}mm"


def get_component_defaults(
    component_type: Union[ComponentType, str],
    size: Union[str, int],
) -> Optional[ComponentSpec]:
    """
    Look up catalog defaults for a component type and size.

    Args:
        component_type: ComponentType or label ("Chain", "Wire Rope", ...)
        size: Size label ("76mm") or diameter in mm (76)

    Returns:
        ComponentSpec, or None when the catalog has no entry
    """
    try:
        ctype = ComponentType.parse(component_type)
    except ValueError:
        return None
    return COMPONENT_DEFAULTS.get(f"{_KEY_PREFIX[ctype]}-{_size_label(size)}")


def get_available_sizes(component_type: Union[ComponentType, str]) -> List[str]:
    """Sizes offered for a component type (empty for unknown types)."""
    try:
        ctype = ComponentType.parse(component_type)
    except ValueError:
        return []
    return list(COMPONENT_CATEGORIES[ctype].sizes)


def get_component_options(component_type: Union[ComponentType, str]) -> List[str]:
    """Grade, construction or material options for a component type."""
    try:
        ctype = ComponentType.parse(component_type)
    except ValueError:
        return []
    return list(COMPONENT_CATEGORIES[ctype].options)
