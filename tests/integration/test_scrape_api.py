"""API 통합 테스트 (전략/인증은 dependency override로 주입)"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from playwright.async_api import Error as PlaywrightError

from conftest import CountingSessionManager, FakePage, FakeStrategy
from gas_safe.api import get_auth_policy, get_strategy
from gas_safe.app import create_app
from gas_safe.core.exceptions import BrowserLaunchException, BrowserPoolExhaustedException
from gas_safe.core.security import NoAuth, RequireKey
from gas_safe.crawlers import DegradedScrapeExecutor, LiveScrapeExecutor
from gas_safe.crawlers.extractor import TERMINAL_SELECTOR
from gas_safe.engine import EngineerRecord, ScrapeResult
from tests.fixtures import API_PAYLOADS, REGISTER_PAGES

ENDPOINT = "/api/gas-safe-scrape"


def make_client(strategy, policy=None, raise_server_exceptions: bool = True) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_strategy] = lambda: strategy
    app.dependency_overrides[get_auth_policy] = lambda: policy or NoAuth()
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


def make_live_strategy(page_factory):
    manager = CountingSessionManager(page_factory, pool_size=2, acquire_timeout_s=0.5)
    return LiveScrapeExecutor(session_manager=manager), manager


class TestHealthAPI:
    """헬스 체크 API 테스트"""

    def test_health_check(self):
        strategy = FakeStrategy()
        client = make_client(strategy)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "gas-safe-puppeteer"}
        assert strategy.calls == 0

    def test_health_needs_no_api_key(self):
        client = make_client(FakeStrategy(), policy=RequireKey("secret"))
        assert client.get("/health").status_code == 200

    def test_root_endpoint(self):
        response = make_client(FakeStrategy()).get("/")

        assert response.status_code == 200
        data = response.json()
        assert "service" in data
        assert "version" in data


class TestValidation:
    """입력 검증 (400, 전략 호출 없음)"""

    @pytest.mark.parametrize("name", ["empty", "all_blank"])
    def test_missing_fields_rejected(self, name):
        strategy = FakeStrategy()
        response = make_client(strategy).post(ENDPOINT, json=API_PAYLOADS[name])

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "gas_safe_number" in body["error"]
        assert strategy.calls == 0

    def test_malformed_body_rejected(self):
        strategy = FakeStrategy()
        response = make_client(strategy).post(ENDPOINT, json={"engineer_name": ["a", "b"]})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert strategy.calls == 0

    @pytest.mark.parametrize("name", ["by_number", "by_engineer", "by_business"])
    def test_single_field_accepted_live(self, name):
        strategy = FakeStrategy()
        response = make_client(strategy).post(ENDPOINT, json=API_PAYLOADS[name])

        assert response.status_code == 200
        assert strategy.calls == 1

    @pytest.mark.parametrize("name", ["by_number", "by_engineer", "by_business"])
    def test_single_field_accepted_degraded(self, name):
        response = make_client(DegradedScrapeExecutor()).post(ENDPOINT, json=API_PAYLOADS[name])

        assert response.status_code == 200
        assert response.json()["count"] == 1

    def test_numeric_gas_safe_number(self):
        strategy = FakeStrategy()
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": 123456})

        assert response.status_code == 200
        assert strategy.last_query.effective_term == "123456"

    def test_effective_term_priority(self):
        strategy = FakeStrategy()
        make_client(strategy).post(ENDPOINT, json=API_PAYLOADS["number_and_name"])

        assert strategy.last_query.effective_term == "G1"


class TestAuth:
    """API 키 게이트"""

    def test_missing_key_rejected(self):
        strategy = FakeStrategy()
        client = make_client(strategy, policy=RequireKey("secret"))

        response = client.post(ENDPOINT, json=API_PAYLOADS["by_number"])

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid API key"
        assert strategy.calls == 0

    def test_wrong_key_rejected(self):
        client = make_client(FakeStrategy(), policy=RequireKey("secret"))
        response = client.post(ENDPOINT, json=API_PAYLOADS["by_number"], headers={"x-api-key": "nope"})

        assert response.status_code == 401

    def test_header_key_accepted(self):
        client = make_client(FakeStrategy(), policy=RequireKey("secret"))
        response = client.post(ENDPOINT, json=API_PAYLOADS["by_number"], headers={"x-api-key": "secret"})

        assert response.status_code == 200

    def test_query_param_key_accepted(self):
        client = make_client(FakeStrategy(), policy=RequireKey("secret"))
        response = client.post(f"{ENDPOINT}?api_key=secret", json=API_PAYLOADS["by_number"])

        assert response.status_code == 200

    def test_no_key_configured(self):
        client = make_client(FakeStrategy(), policy=NoAuth())
        assert client.post(ENDPOINT, json=API_PAYLOADS["by_number"]).status_code == 200


class TestScrapeOutcomes:
    """전략 결과 → HTTP 응답 매핑"""

    def test_end_to_end_single_match(self):
        strategy, manager = make_live_strategy(
            lambda: FakePage(html=REGISTER_PAGES["single_match"])
        )
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "123456"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "count": 1,
            "data": [
                {
                    "gasSafeNumber": "123456",
                    "businessName": "ABC Plumbing Services Ltd",
                    "engineerName": "John Smith",
                    "address": "123 High Street, London, SW1A 1AA",
                    "phone": "020 1234 5678",
                    "categories": "CCN1, CPA1, CENWAT, HTR1, WAT1",
                    "expiryDate": "31/12/2024",
                }
            ],
        }
        assert (manager.launches, manager.releases) == (1, 1)

    def test_selector_timeout_returns_200_failure_without_leak(self):
        strategy, manager = make_live_strategy(lambda: FakePage(timeout_on={TERMINAL_SELECTOR}))
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "123456"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["count"] == 0
        assert body["data"] == []
        assert "error" in body
        assert (manager.launches, manager.releases) == (1, 1)
        assert manager.in_use == 0

    @pytest.mark.parametrize(
        "failing_step, error",
        [
            ("goto", PlaywrightError("net::ERR_NAME_NOT_RESOLVED at https://www.gassaferegister.co.uk/find-an-engineer/")),
            (TERMINAL_SELECTOR, PlaywrightError("Target page, context or browser has been closed")),
        ],
    )
    def test_browser_errors_return_200_failure(self, failing_step, error):
        strategy, manager = make_live_strategy(lambda: FakePage(errors={failing_step: error}))
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "123456"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["data"] == []
        assert body["count"] == 0
        assert "error" in body
        assert (manager.launches, manager.releases) == (1, 1)

    def test_degraded_business_name(self):
        response = make_client(DegradedScrapeExecutor()).post(ENDPOINT, json={"business_name": "Acme Ltd"})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["count"] == 1
        assert body["data"][0]["businessName"] == "Acme Ltd"
        assert body["note"]

    def test_missing_optional_fields_omitted(self):
        strategy = FakeStrategy(result=ScrapeResult.from_records([EngineerRecord(gas_safe_number="42")]))
        body = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "42"}).json()

        assert body["data"] == [{"gasSafeNumber": "42"}]

    def test_launch_failure_is_500(self):
        strategy = FakeStrategy(error=BrowserLaunchException("chrome missing"))
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "1"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "Traceback" not in response.text

    def test_pool_exhausted_is_503(self):
        strategy = FakeStrategy(error=BrowserPoolExhaustedException(pool_size=2, waited_s=10.0))
        response = make_client(strategy).post(ENDPOINT, json={"gas_safe_number": "1"})

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert "busy" in body["error"]
        assert "message" not in body

    def test_unexpected_error_is_500(self):
        strategy = FakeStrategy(error=RuntimeError("something odd"))
        client = make_client(strategy, raise_server_exceptions=False)

        response = client.post(ENDPOINT, json={"gas_safe_number": "1"})

        assert response.status_code == 500
        body = response.json()
        assert body == {"success": False, "error": "Internal server error", "message": "something odd"}
