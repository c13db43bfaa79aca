"""Pipeline orchestrator: surface -> composite stages -> encode base -> derivatives.

Unlike an analysis pipeline, a failed stage is fatal: the error is logged
and re-raised, and no partial variant list ever reaches the caller.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from concurrent.futures import ThreadPoolExecutor

from app.engine.codec import decode_image, encode_png
from app.engine.config import RenderConfig
from app.engine.context import RenderContext
from app.engine.registry import Phase, StageRegistry, StageSpec, get_registry
from app.models.requests import GenerationRequest

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ("app.engine.compose", "app.engine.derive")


class Pipeline:
    """Runs registered stages over a RenderContext."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or RenderConfig()

    def run(self, ctx: RenderContext) -> RenderContext:
        """Build base, encode it, then derive the remaining variants."""
        start = time.perf_counter()
        ctx.config = self.config

        ordered = self.registry.resolve_order()
        drawing = [s for s in ordered if s.phase < Phase.DERIVATIVE]
        derivatives = [s for s in ordered if s.phase == Phase.DERIVATIVE]
        logger.info(
            "Pipeline: %d stages queued (%d derivative)",
            len(ordered),
            len(derivatives),
        )

        for spec in drawing:
            self._run_stage(spec, ctx)

        # Base is final from here on; derivatives only ever see its bytes
        ctx.base_png = encode_png(ctx.require_surface())

        if self.config.parallel_derivatives and len(derivatives) > 1:
            with ThreadPoolExecutor(max_workers=len(derivatives)) as pool:
                futures = [pool.submit(self._execute, spec, ctx) for spec in derivatives]
                elapsed = [fut.result() for fut in futures]
            # Bookkeeping on the calling thread, in resolved order
            for spec, ms in zip(derivatives, elapsed):
                self._record(spec, ctx, ms)
        else:
            for spec in derivatives:
                self._run_stage(spec, ctx)

        variants = ctx.variants
        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d variants from %dx%d source in %.0fms",
            len(variants),
            ctx.source.width,
            ctx.source.height,
            total,
        )
        return ctx

    def run_phase(self, ctx: RenderContext, phase: Phase) -> RenderContext:
        """Run only the stages of one phase (no base encoding)."""
        for spec in self.registry.get_phase(phase):
            self._run_stage(spec, ctx)
        return ctx

    def generate(self, request: GenerationRequest, image_bytes: bytes) -> list[bytes]:
        """Decode ``image_bytes`` and return [base, toned, edge_glow] PNGs."""
        ctx = RenderContext(request=request, source=decode_image(image_bytes), config=self.config)
        return self.run(ctx).variants

    def _run_stage(self, spec: StageSpec, ctx: RenderContext) -> None:
        self._record(spec, ctx, self._execute(spec, ctx))

    @staticmethod
    def _execute(spec: StageSpec, ctx: RenderContext) -> float:
        """Run one stage; returns its wall time in ms."""
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            logger.warning("  %s FAILED: %s", spec.id, e)
            raise
        return (time.perf_counter() - t0) * 1000

    @staticmethod
    def _record(spec: StageSpec, ctx: RenderContext, elapsed: float) -> None:
        ctx.completed_stages.append(spec.id)
        ctx.timings_ms[spec.id] = round(elapsed, 1)
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def load_stages() -> None:
    """Import all stage modules so @stage decorators fire (idempotent)."""
    for package_name in _STAGE_PACKAGES:
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline(config: RenderConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    load_stages()
    return Pipeline(config=config)


def generate_variants(
    request: GenerationRequest,
    image_bytes: bytes,
    config: RenderConfig | None = None,
) -> list[bytes]:
    return create_pipeline(config).generate(request, image_bytes)
