"""Input boundary, recompute orchestration and the window shell.

The window shell (bethe_bloch.app.viewer) imports pyplot and is not imported
here; run it with ``python -m bethe_bloch.app.viewer``.
"""

from bethe_bloch.app.controls import ParameterEditor
from bethe_bloch.app.orchestrator import (
    InputCycle,
    RecomputeOrchestrator,
    RenderReport,
    affected_charts,
)

__all__ = [
    "ParameterEditor",
    "InputCycle",
    "RenderReport",
    "RecomputeOrchestrator",
    "affected_charts",
]
