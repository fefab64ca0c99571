"""Rate limiter de janela deslizante (60s) para chamadas à W-API.

Rejeita imediatamente quando a cota está esgotada; nunca enfileira.
Estado compartilhado acessado apenas pelo event loop (sem locks).
"""

from __future__ import annotations

import math
import time
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

WINDOW_SECONDS: float = 60.0


@dataclass(frozen=True, slots=True)
class AdmissionDecision:
    """Resultado de admit()."""

    allowed: bool
    retry_after_ms: int = 0


class SlidingWindowRateLimiter:
    """Janela deslizante de timestamps das requisições admitidas.

    Args:
        limit: Máximo de requisições por janela. <= 0 desliga o limite.
        window_seconds: Tamanho da janela.
        clock: Relógio monotônico em segundos.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float = WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = limit
        self._window_seconds = window_seconds
        self._clock = clock
        self._window: deque[float] = deque()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def enabled(self) -> bool:
        return self._limit > 0

    def admit(self) -> AdmissionDecision:
        """Admite ou rejeita uma requisição agora.

        Rejeição informa os ms até o timestamp mais antigo sair da janela.
        """
        if not self.enabled:
            return AdmissionDecision(allowed=True)

        now = self._clock()
        self._prune(now)

        if len(self._window) >= self._limit:
            oldest = self._window[0]
            remaining_s = oldest + self._window_seconds - now
            return AdmissionDecision(
                allowed=False,
                retry_after_ms=max(1, math.ceil(remaining_s * 1000)),
            )

        self._window.append(now)
        return AdmissionDecision(allowed=True)

    def remaining(self) -> int | None:
        """Requisições ainda disponíveis na janela (None se desligado)."""
        if not self.enabled:
            return None
        self._prune(self._clock())
        return max(0, self._limit - len(self._window))

    def reset(self) -> None:
        self._window.clear()

    def _prune(self, now: float) -> None:
        cutoff = now - self._window_seconds
        while self._window and self._window[0] < cutoff:
            self._window.popleft()
