"""Tests for TcknService."""

from __future__ import annotations

import random
from collections.abc import Sequence

from tcknctl.domain.tckn import validate
from tcknctl.services.tckn import TcknService


class _FailingSource:
    def choice(self, seq: Sequence[str]) -> str:
        raise OSError("entropy pool unavailable")


class TestGenerate:
    def test_returns_valid_tckn(self) -> None:
        result = TcknService().generate()
        assert result.ok
        assert result.op == "generate"
        assert result.data["valid"] is True
        assert validate(result.data["tckn"])

    def test_seed_is_reproducible(self) -> None:
        first = TcknService(seed=42).generate()
        second = TcknService(seed=42).generate()
        assert first.data["tckn"] == second.data["tckn"]

    def test_seed_recorded_in_meta(self) -> None:
        result = TcknService(seed=42).generate()
        assert result.meta == {"seed": 42}

    def test_unseeded_has_no_meta(self) -> None:
        assert TcknService().generate().meta is None

    def test_injected_rng_takes_precedence(self) -> None:
        expected = TcknService(rng=random.Random(1)).generate().data["tckn"]
        result = TcknService(rng=random.Random(1), seed=99).generate()
        assert result.data["tckn"] == expected

    def test_successive_calls_advance_the_source(self) -> None:
        svc = TcknService(seed=3)
        values = {svc.generate().data["tckn"] for _ in range(20)}
        assert len(values) > 1

    def test_random_source_failure(self) -> None:
        result = TcknService(rng=_FailingSource()).generate()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "RANDOM_SOURCE_FAILED"
        assert result.error.detail == {"cause": "OSError"}
        assert result.data == {}


class TestValidate:
    def test_valid(self) -> None:
        result = TcknService().validate("12345678950")
        assert result.ok
        assert result.op == "validate"
        assert result.data == {"tckn": "12345678950", "valid": True}

    def test_invalid_is_not_an_error(self) -> None:
        result = TcknService().validate("12345678951")
        assert result.ok
        assert result.data["valid"] is False

    def test_strict_invalid_is_an_error(self) -> None:
        result = TcknService().validate("01234567891", strict=True)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_TCKN"
        assert result.error.detail == {"tckn": "01234567891"}

    def test_strict_valid_passes(self) -> None:
        result = TcknService().validate("12345678950", strict=True)
        assert result.ok
        assert result.data["valid"] is True
