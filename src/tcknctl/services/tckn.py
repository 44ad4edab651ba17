"""TcknService — generate and validate identifiers behind ServiceResult.

Wraps :mod:`tcknctl.domain.tckn` so the CLI never handles domain
exceptions directly.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tcknctl.domain.tckn import RandomSourceError, generate, validate
from tcknctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tcknctl.domain.tckn import RandomSource

logger = logging.getLogger(__name__)


class TcknService:
    """Generates and validates TCKN values.

    Usage::

        svc = TcknService(seed=42)
        svc.generate()              # reproducible for a given seed
        svc.validate("12345678950")

    Args:
        rng: Random source for generation. Takes precedence over *seed*.
        seed: Seed for a private ``random.Random`` when *rng* is not given.
    """

    def __init__(self, rng: RandomSource | None = None, *, seed: int | None = None) -> None:
        self._seed = seed
        if rng is None and seed is not None:
            rng = random.Random(seed)
        self._rng = rng

    def generate(self) -> ServiceResult:
        """Generate one identifier and validate it."""
        op = "generate"
        try:
            value = generate(self._rng)
        except RandomSourceError as exc:
            logger.warning("TCKN generation failed: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="RANDOM_SOURCE_FAILED",
                    message=str(exc),
                    detail={"cause": type(exc.__cause__).__name__} if exc.__cause__ else {},
                ),
            )

        valid = validate(value)
        logger.debug("Generated TCKN %s (valid=%s)", value, valid)
        return ServiceResult(
            ok=True,
            op=op,
            data={"tckn": value, "valid": valid},
            meta={"seed": self._seed} if self._seed is not None else None,
        )

    def validate(self, value: str, *, strict: bool = False) -> ServiceResult:
        """Validate *value*.

        An invalid value is a normal outcome (``ok=True, valid=False``)
        unless *strict* is set, in which case it is an ``INVALID_TCKN`` error.
        """
        op = "validate"
        valid = validate(value)
        logger.debug("Validated TCKN %r (valid=%s)", value, valid)
        if strict and not valid:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_TCKN",
                    message=f"Not a valid TCKN: {value!r}",
                    detail={"tckn": value},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"tckn": value, "valid": valid})
