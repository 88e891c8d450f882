# uicraft/orchestration/orchestrator.py
"""
Generation orchestrator - prompt in, plan + component code + explanation out.

Flow per run:
    detect mode -> plan (structured) -> code (text) -> sanitize -> explanation

Fallback policy:
- ONLY a quota / rate-limit ProviderError from the primary adapter fails over.
- Fail-over reruns the whole sequence on the fallback adapter, exactly once.
- The fallback path synthesizes its explanation instead of a third call.
- Any other error, and any fallback error, propagates unmodified.

The orchestrator keeps no per-run state on self, so one instance serves
concurrent runs.
"""
import uuid
from typing import Optional

from uicraft.core.config import Settings
from uicraft.core.exceptions import GenerationError, ProviderError
from uicraft.core.logging import log, log_section
from uicraft.core.types import (
    EDIT_THRESHOLD,
    GenerationRequest,
    GenerationResult,
    Mode,
    detect_mode,
)
from uicraft.core.whitelist import DEFAULT_WHITELIST, ComponentWhitelist, load_whitelist
from uicraft.llm.adapter import ProviderAdapter, build_adapters
from uicraft.llm.prompts import (
    build_explainer_prompt,
    build_generator_prompt,
    build_planner_prompt,
    fallback_explanation,
)
from uicraft.orchestration.sanitizer import sanitize_code
from uicraft.orchestration.state import RunState, RunTrace


class GenerationOrchestrator:
    """
    Drives one generation run against a primary and a fallback adapter.
    """

    def __init__(
        self,
        primary: ProviderAdapter,
        fallback: ProviderAdapter,
        whitelist: ComponentWhitelist = DEFAULT_WHITELIST,
        edit_threshold: int = EDIT_THRESHOLD,
    ):
        self.primary = primary
        self.fallback = fallback
        self.whitelist = whitelist
        self.edit_threshold = edit_threshold

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationOrchestrator":
        primary, fallback = build_adapters(settings)
        return cls(
            primary,
            fallback,
            whitelist=load_whitelist(settings.generation.whitelist_path),
            edit_threshold=settings.generation.edit_threshold,
        )

    async def generate(
        self,
        prompt: str,
        current_code: str = "",
        trace: Optional[RunTrace] = None,
    ) -> GenerationResult:
        """
        Run the full pipeline for one request.

        Raises:
            GenerationError: prompt is empty after trim
            ProviderError / PlanParseError: provider failure that did not
                qualify for fallback, or any fallback failure
        """
        request = GenerationRequest(prompt=prompt or "", current_code=current_code or "")
        if not request.prompt.strip():
            raise GenerationError("Prompt must not be empty")

        trace = trace or RunTrace(request_id=uuid.uuid4().hex[:8])
        rid = trace.request_id

        mode = detect_mode(request.current_code, self.edit_threshold)
        trace.advance(RunState.MODE_DETECTED)
        log_section("ORCHESTRATOR", f"Generation started ({mode.value} mode)", request_id=rid)
        log("ORCHESTRATOR", f"Prompt: {request.prompt[:200]}", request_id=rid)

        try:
            return await self._run(self.primary, request, mode, trace, degraded=False)
        except ProviderError as e:
            if not e.is_quota:
                trace.advance(RunState.ABORTED)
                log("ORCHESTRATOR", f"Primary failed without fallback ({e.kind}): {e.message}", request_id=rid)
                raise
            trace.advance(RunState.PRIMARY_FAILED)
            log("ORCHESTRATOR", f"{self.primary.name} quota exhausted, switching to {self.fallback.name}", request_id=rid)
        except Exception as e:
            trace.advance(RunState.ABORTED)
            log("ORCHESTRATOR", f"Primary failed without fallback: {e}", request_id=rid)
            raise

        try:
            return await self._run(self.fallback, request, mode, trace, degraded=True)
        except Exception as e:
            trace.advance(RunState.FALLBACK_FAILED)
            trace.advance(RunState.ABORTED)
            log("ORCHESTRATOR", f"Fallback {self.fallback.name} failed: {e}", request_id=rid)
            raise

    async def _run(
        self,
        adapter: ProviderAdapter,
        request: GenerationRequest,
        mode: Mode,
        trace: RunTrace,
        degraded: bool,
    ) -> GenerationResult:
        rid = trace.request_id

        planner_prompt = build_planner_prompt(request.prompt, request.current_code, mode, self.whitelist)
        log("PROMPT", f"Planner prompt ({len(planner_prompt)} chars)", request_id=rid)
        trace.advance(RunState.PLAN_REQUESTED)
        plan = await adapter.produce_structured_plan(planner_prompt)
        trace.advance(RunState.PLAN_RECEIVED)
        log("ORCHESTRATOR", f"Plan received from {adapter.name}", request_id=rid)

        generator_prompt = build_generator_prompt(plan, request.current_code, mode, self.whitelist)
        log("PROMPT", f"Generator prompt ({len(generator_prompt)} chars)", request_id=rid)
        trace.advance(RunState.CODE_REQUESTED)
        raw_code = await adapter.produce_text(generator_prompt)
        generated_code = sanitize_code(raw_code)
        trace.advance(RunState.CODE_RECEIVED)
        if not generated_code:
            log("ORCHESTRATOR", "Sanitized code is empty", request_id=rid)

        trace.advance(RunState.EXPLANATION_REQUESTED)
        if degraded:
            explanation = fallback_explanation(request.prompt)
        else:
            explanation = await adapter.produce_text(build_explainer_prompt(request.prompt))

        trace.advance(RunState.DONE)
        log("ORCHESTRATOR", f"Generation complete via {adapter.name}", request_id=rid)
        return GenerationResult(
            plan=plan,
            generated_code=generated_code,
            explanation=explanation,
            provider=adapter.name,
        )


# Lazily built from settings on first use
_orchestrator: Optional[GenerationOrchestrator] = None


def get_orchestrator() -> GenerationOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        from uicraft.core.config import settings
        _orchestrator = GenerationOrchestrator.from_settings(settings)
    return _orchestrator


async def generate(prompt: str, current_code: str = "") -> GenerationResult:
    """Convenience entry point using the configured adapters."""
    return await get_orchestrator().generate(prompt, current_code)
