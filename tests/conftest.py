from __future__ import annotations

from typing import Callable, Optional

import pytest

from pingstatus.models import ServiceDescriptor


@pytest.fixture
def make_descriptor() -> Callable[..., ServiceDescriptor]:
    def _make(
        url: str = "https://a.test",
        name: Optional[str] = "A",
        keep_history: int = 100,
        timeout_ms: int = 10000,
    ) -> ServiceDescriptor:
        return ServiceDescriptor(
            name=name, url=url, keep_history=keep_history, timeout_ms=timeout_ms
        )

    return _make
