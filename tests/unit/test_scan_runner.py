# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from upcheck.config import ProbeSettings
from upcheck.http.adapters import StubHttpClient
from upcheck.http.models import HttpResponse
from upcheck.models import ProbeResult, ScanReport, Success
from upcheck.scan.channel import ResultChannel
from upcheck.scan.engine import ScanEngine


def test_scan_engine_builds_report():
    client = StubHttpClient(
        {
            "http://up.test": HttpResponse(ok=True, status_code=200),
            "http://teapot.test": HttpResponse(ok=True, status_code=418),
        }
    )
    engine = ScanEngine(client, ProbeSettings(workers=2, max_retries=1))
    report = engine.run(["http://up.test", "http://teapot.test", "http://down.test"])

    assert report.total == 3
    assert report.up == 2
    assert report.down == 1
    assert report.duration >= 0
    verdicts = {target: (status, detail) for target, status, detail, _ in report.verdicts()}
    assert verdicts["http://up.test"] == ("up", 200)
    assert verdicts["http://teapot.test"] == ("up", 418)
    assert verdicts["http://down.test"][0] == "down"


def test_scan_engine_uses_injected_dispatcher():
    class DummyDispatcher:
        def __init__(self):
            self.calls = []

        def dispatch(self, targets):
            self.calls.append(list(targets))
            channel = ResultChannel()
            for target in targets:
                channel.send(ProbeResult(target=target, outcome=Success(200), elapsed=0.0))
            channel.close()
            return channel

    dispatcher = DummyDispatcher()
    engine = ScanEngine(StubHttpClient(), ProbeSettings(), dispatcher=dispatcher)
    report = engine.run(("http://a.test", "http://b.test"))
    assert dispatcher.calls == [["http://a.test", "http://b.test"]]
    assert report.up == 2


def test_scan_report_to_dict():
    report = ScanReport(
        results=[ProbeResult(target="http://a.test", outcome=Success(200), elapsed=0.1234567)],
        duration=1.5,
    )
    data = report.to_dict()
    assert data["total"] == 1
    assert data["up"] == 1
    assert data["down"] == 0
    assert data["duration"] == 1.5
    assert data["results"][0]["elapsed"] == 0.123457
