"""GenerateService — policy in, ServiceResult out.

Runs the CharsetBuilder and PasswordGenerator pipeline and maps each
domain error onto a ServiceError code the CLI can report.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from securepass.domain.charsets import build_char_pool
from securepass.domain.errors import PasswordGenerationError
from securepass.domain.generator import generate_password
from securepass.services.result import ServiceError, ServiceResult
from securepass.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from securepass.domain.charsets import PolicyConfig
    from securepass.domain.entropy import EntropySource

logger = logging.getLogger(__name__)

OP = "generate_password"
DEFAULT_MIN_LENGTH = 8


class GenerateService:
    """Generate one password per call.

    Args:
        min_length: Shortest password the service will produce.  Requests
            below it (but still >= 1) fail with ``LENGTH_TOO_SHORT``.
        source: Entropy capability forwarded to the generator.  None means a
            fresh OS-backed source per call.
    """

    def __init__(
        self,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        source: EntropySource | None = None,
    ) -> None:
        self._min_length = min_length
        self._source = source

    @traced
    def generate(self, policy: PolicyConfig) -> ServiceResult:
        """Build the pool for *policy* and draw a password from it."""
        if 1 <= policy.length < self._min_length:
            return ServiceResult(
                ok=False,
                op=OP,
                error=ServiceError(
                    code="LENGTH_TOO_SHORT",
                    message=(
                        f"Password length must be at least {self._min_length} characters"
                    ),
                    detail={"length": policy.length, "min_length": self._min_length},
                ),
            )

        try:
            with trace_span("build_pool") as span:
                pool = build_char_pool(policy)
                if span:
                    span.annotate("pool_size", len(pool))
            with trace_span("draw") as span:
                password = generate_password(pool, policy.length, source=self._source)
                if span:
                    span.annotate("length", policy.length)
        except PasswordGenerationError as exc:
            logger.debug("Generation failed: %s", exc.code)
            return ServiceResult(
                ok=False,
                op=OP,
                error=ServiceError(
                    code=exc.code,
                    message=str(exc),
                    detail=policy.model_dump(),
                ),
            )

        return ServiceResult(
            ok=True,
            op=OP,
            data={
                "password": password,
                "length": len(password),
                "pool_size": len(pool),
                "classes": [str(c) for c in pool.classes],
            },
        )
