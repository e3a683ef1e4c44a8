# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import threading
import time
from collections import Counter

from upcheck.config import ProbeSettings
from upcheck.errors import ErrorCategory
from upcheck.http.adapters import StubHttpClient
from upcheck.http.models import HttpRequest, HttpResponse
from upcheck.http.retry import attempt_with_retry
from upcheck.models import Failure, Success
from upcheck.scan.collect import collect
from upcheck.scan.dispatch import Dispatcher


class InFlightClient:
    """Counts concurrent requests; every request answers 200 after a short pause."""

    def __init__(self, delay: float = 0.002):
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls = 0
        self._lock = threading.Lock()

    def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
        with self._lock:
            self.calls += 1
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            time.sleep(self.delay)
            return HttpResponse(ok=True, status_code=200)
        finally:
            with self._lock:
                self.in_flight -= 1

    def close(self) -> None:
        return None


class BarrierClient:
    """Only answers once ``parties`` requests are simultaneously in flight."""

    def __init__(self, parties: int):
        self.barrier = threading.Barrier(parties, timeout=10)

    def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
        self.barrier.wait()
        return HttpResponse(ok=True, status_code=204)

    def close(self) -> None:
        return None


def _run(dispatcher: Dispatcher, targets):
    return collect(dispatcher.dispatch(targets))


def test_one_result_per_target_including_duplicates():
    targets = ["http://a.test", "http://b.test", "http://a.test", "http://c.test", "http://a.test"]
    client = StubHttpClient({"http://a.test": HttpResponse(ok=True, status_code=200)})
    results = _run(Dispatcher(client, ProbeSettings(workers=2, max_retries=1)), targets)

    assert len(results) == len(targets)
    assert Counter(r.target for r in results) == Counter(targets)
    by_target = {r.target: r for r in results}
    assert by_target["http://a.test"].outcome == Success(200)
    assert isinstance(by_target["http://b.test"].outcome, Failure)
    assert by_target["http://b.test"].attempts == 2


def test_empty_target_list_completes_immediately():
    assert _run(Dispatcher(StubHttpClient(), ProbeSettings()), []) == []


def test_concurrency_limit_bounds_in_flight_probes():
    client = InFlightClient()
    targets = [f"http://host{i}.test" for i in range(500)]
    results = _run(Dispatcher(client, ProbeSettings(workers=10, max_retries=0)), targets)

    assert len(results) == 500
    assert sorted(r.target for r in results) == sorted(targets)
    assert client.calls == 500
    assert client.max_in_flight <= 10


def test_unbounded_runs_one_worker_per_target():
    client = BarrierClient(parties=20)
    targets = [f"http://host{i}.test" for i in range(20)]
    results = _run(Dispatcher(client, ProbeSettings(workers=0, max_retries=0)), targets)

    assert len(results) == 20
    assert all(r.outcome == Success(204) for r in results)


def test_pool_size():
    assert Dispatcher(StubHttpClient(), ProbeSettings(workers=0)).pool_size(37) == 37
    assert Dispatcher(StubHttpClient(), ProbeSettings(workers=4)).pool_size(2) == 2
    assert Dispatcher(StubHttpClient(), ProbeSettings(workers=4)).pool_size(100) == 4
    assert Dispatcher(StubHttpClient(), ProbeSettings(workers=4)).pool_size(0) == 1


def test_crashing_unit_is_reported_as_failure():
    targets = [f"http://host{i}.test" for i in range(5)]
    client = StubHttpClient({t: HttpResponse(ok=True, status_code=200) for t in targets})

    def crashing_retry(client, target, **kwargs):
        if target == "http://host2.test":
            raise RuntimeError("worker exploded")
        return attempt_with_retry(client, target, **kwargs)

    results = _run(Dispatcher(client, ProbeSettings(), retry_fn=crashing_retry), targets)

    assert len(results) == 5
    by_target = {r.target: r for r in results}
    crashed = by_target.pop("http://host2.test")
    assert isinstance(crashed.outcome, Failure)
    assert crashed.outcome.category == ErrorCategory.CRASH
    assert crashed.outcome.message == "probe crashed: worker exploded"
    assert all(r.outcome == Success(200) for r in by_target.values())


def test_unit_killed_by_base_exception_still_reports():
    targets = ["http://ok.test", "http://exit.test"]
    client = StubHttpClient({"http://ok.test": HttpResponse(ok=True, status_code=200)})

    def exiting_retry(client, target, **kwargs):
        if target == "http://exit.test":
            raise SystemExit(3)
        return attempt_with_retry(client, target, **kwargs)

    results = _run(Dispatcher(client, ProbeSettings(), retry_fn=exiting_retry), targets)

    by_target = {r.target: r for r in results}
    assert len(results) == 2
    assert by_target["http://ok.test"].outcome == Success(200)
    assert by_target["http://exit.test"].outcome.category == ErrorCategory.CRASH


def test_ok_and_timeout_scenario():
    timeout_response = HttpResponse(ok=False, error_message="timeout: timed out", error_category=ErrorCategory.TIMEOUT)

    class SlowTimeoutClient(StubHttpClient):
        def request(self, request: HttpRequest) -> HttpResponse:
            response = super().request(request)
            if response.error_category == ErrorCategory.TIMEOUT:
                time.sleep(0.05)
            return response

    client = SlowTimeoutClient(
        {
            "http://ok.test": HttpResponse(ok=True, status_code=200),
            "http://timeout.test": timeout_response,
        }
    )
    settings = ProbeSettings(timeout=1, max_retries=2)
    results = _run(Dispatcher(client, settings), ["http://ok.test", "http://timeout.test"])
    by_target = {r.target: r for r in results}

    ok = by_target["http://ok.test"]
    assert ok.verdict()[:2] == ("up", 200)
    assert ok.attempts == 1

    down = by_target["http://timeout.test"]
    assert down.verdict()[0] == "down"
    assert down.outcome.message.startswith("timeout")
    assert down.attempts == 3
    assert client.calls_for("http://timeout.test") == 3
    assert down.elapsed >= 0.15
    assert all(req.timeout == 1 for req in client.requests)
