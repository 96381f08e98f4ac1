from __future__ import annotations

from importlib import import_module
from pathlib import Path

from ..building import BuildingBlueprint
from ..constants import BuildingType

# Dynamically load all blueprint modules in this package.  A module may
# expose a single ``BLUEPRINT`` or a ``BLUEPRINTS`` sequence.
BLUEPRINTS: dict[BuildingType, BuildingBlueprint] = {}
package_path = Path(__file__).parent
for path in sorted(package_path.glob("*.py")):
    if path.stem.startswith("__"):
        continue
    module_name = f"{__name__}.{path.stem}"
    module = import_module(module_name)
    found = list(getattr(module, "BLUEPRINTS", ()))
    bp = getattr(module, "BLUEPRINT", None)
    if bp is not None:
        found.append(bp)
    for bp in found:
        if isinstance(bp, BuildingBlueprint):
            BLUEPRINTS[bp.type] = bp


def blueprint_for(building: BuildingType) -> BuildingBlueprint:
    """Return the catalog entry for ``building``."""
    return BLUEPRINTS[building]


__all__ = ["BLUEPRINTS", "blueprint_for"]
