from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from sendly import SendlyClient

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture()
def sleeper() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def make_client(sleeper: RecordingSleep) -> Callable[..., SendlyClient]:
    def factory(handler: Handler, **overrides) -> SendlyClient:
        options = dict(base_url="https://api.example.com/api/v1", max_retries=3, sleep=sleeper)
        options.update(overrides)
        return SendlyClient("sk_test_key", transport=httpx.MockTransport(handler), **options)

    return factory
