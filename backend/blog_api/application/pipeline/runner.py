"""Runs validate → stages → handler and hands the outcome to the normalizer."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, Protocol, TypeVar

from blog_api.application.pipeline.context import RawRequest, RequestContext
from blog_api.application.pipeline.result import Failure, StageResult, Success
from blog_api.application.pipeline.validation import RequestShape, validate_request

R = TypeVar("R")

Stage = Callable[[RequestContext], Awaitable[StageResult[RequestContext]]]
Handler = Callable[[RequestContext], Awaitable[R]]


class OutcomeNormalizer(Protocol[R]):
    def finalize(self, outcome: StageResult[R]) -> R:
        """Return the handler's response, or render the failure as one."""
        ...


class RequestPipeline(Generic[R]):
    """Ordered middleware chain for one request.

    Validation always runs first, then each stage in the order given.  The
    first ``Failure`` ends the chain; later stages and the handler never run.
    Anything a stage or handler raises becomes a ``Failure`` too, so the
    normalizer is the single place a response is produced from an error.
    """

    def __init__(self, normalizer: OutcomeNormalizer[R]):
        self._normalizer = normalizer

    async def run(
        self,
        raw: RawRequest,
        shape: RequestShape,
        handler: Handler[R],
        stages: Sequence[Stage] = (),
    ) -> R:
        outcome = await self._execute(raw, shape, handler, stages)
        return self._normalizer.finalize(outcome)

    async def _execute(
        self,
        raw: RawRequest,
        shape: RequestShape,
        handler: Handler[R],
        stages: Sequence[Stage],
    ) -> StageResult[R]:
        result = validate_request(shape, raw)
        for stage in stages:
            if isinstance(result, Failure):
                return result
            try:
                result = await stage(result.value)
            except Exception as exc:
                return Failure(exc)

        if isinstance(result, Failure):
            return result
        try:
            return Success(await handler(result.value))
        except Exception as exc:
            return Failure(exc)
