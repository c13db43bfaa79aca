"""Stage registry: every pipeline step is a standalone function registered via decorator.

Usage:
    @stage(id="S1.02", phase=Phase.COMPOSITE, dependencies=["S1.01"])
    def theme_tint(ctx: RenderContext) -> None:
        apply_tint(ctx.surface, ctx.request.theme)

Adding a new stage = creating one module with the decorator under
``app/engine/compose`` or ``app/engine/derive``. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from app.engine.context import RenderContext

logger = logging.getLogger(__name__)


class Phase(enum.IntEnum):
    SURFACE = 0  # decode-side: build the render surface
    COMPOSITE = 1  # draw onto the surface; base is encoded after this phase
    DERIVATIVE = 2  # re-decode base, post-process into a new variant


@dataclass
class StageSpec:
    id: str
    phase: Phase
    fn: Callable[["RenderContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of all pipeline stages. Read-only once modules are imported."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_phase(self, phase: Phase) -> list[StageSpec]:
        return self.resolve_order({s.id for s in self._stages.values() if s.phase == phase})

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.phase, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Dependency-respecting order; ties broken by (phase, id).

        Dependencies that live outside ``requested_ids`` are treated as
        already satisfied, so a single phase can be ordered on its own.
        """
        if requested_ids is None:
            pool = dict(self._stages)
        else:
            unknown = requested_ids - self._stages.keys()
            if unknown:
                raise KeyError(f"Unknown stage(s): {sorted(unknown)}")
            pool = {sid: self._stages[sid] for sid in requested_ids}

        pending = {sid: {d for d in spec.dependencies if d in pool} for sid, spec in pool.items()}
        ordered: list[StageSpec] = []

        while pending:
            ready = [pool[sid] for sid, deps in pending.items() if not deps]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(pending)}")
            nxt = min(ready, key=lambda s: (s.phase, s.id))
            ordered.append(nxt)
            del pending[nxt.id]
            for deps in pending.values():
                deps.discard(nxt.id)

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    phase: Phase,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["RenderContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                phase=phase,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
