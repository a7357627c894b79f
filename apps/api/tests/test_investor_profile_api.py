"""HTTP tests for the investor profile endpoints.

Public endpoints run against the plain app; saved-report endpoints run with
auth bypassed and a mocked AsyncSession (see conftest.make_fake_db).
"""

import uuid
from dataclasses import asdict
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.database import get_db
from app.main import app
from app.models.enums import PlanStatus
from app.models.investment_plan import InvestmentPlan
from app.modules.investor_profile.allocation import build_allocation
from app.modules.investor_profile.service import restore_report
from tests.conftest import SAMPLE_USER_ID, make_fake_db, make_token

pytestmark = pytest.mark.anyio

BASE = "/v1/investor-profile"

ANSWERS = {
    "name": "Ada",
    "goal-primary": "retirement",
    "goal-timeline": 20,
    "risk-scenario": "hold",
    "pref-assets": ["us-stocks", "bonds"],
}


# ── Public endpoints ─────────────────────────────────────────────────────────


async def test_questionnaire_layout(client: AsyncClient):
    resp = await client.get(f"{BASE}/questions")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["sections"]) == 7
    assert body["total_pages"] == 21
    assert len(body["pages"]) == 21
    first = body["pages"][0]["questions"][0]
    assert first["id"] == "goal-primary"
    assert first["kind"] == "single_choice"
    assert body["defaults"]["goal-amount"] == 50_000


async def test_questionnaire_hides_scenario_deltas(client: AsyncClient):
    body = (await client.get(f"{BASE}/questions")).json()
    scenario = body["pages"][-1]["questions"][0]
    assert scenario["kind"] == "scenario"
    assert scenario["choice_a"]["label"]
    assert "deltas" not in scenario["choice_a"]
    assert "deltas" not in scenario["choice_b"]


async def test_list_investor_types(client: AsyncClient):
    resp = await client.get(f"{BASE}/investor-types")
    assert resp.status_code == 200
    types = resp.json()
    assert len(types) == 16
    assert len({t["code"] for t in types}) == 16


async def test_glossary(client: AsyncClient):
    resp = await client.get(f"{BASE}/glossary")
    assert resp.status_code == 200
    assert len(resp.json()) == 10


async def test_allocation_calculator(client: AsyncClient):
    resp = await client.post(f"{BASE}/allocation", json={"risk_score": 50})
    assert resp.status_code == 200
    body = resp.json()
    assert body["allocation_total"] == 91
    assert [a["category"] for a in body["allocation"]][:2] == ["US Equities", "International Equities"]
    assert [r["ticker"] for r in body["recommendations"]] == ["VTI", "VXUS", "BND", "VNQ", "O"]


@pytest.mark.parametrize("score", [5, 95])
async def test_allocation_rejects_out_of_range_score(client: AsyncClient, score):
    resp = await client.post(f"{BASE}/allocation", json={"risk_score": score})
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "validation_error"
    assert body["detail"][0]["loc"][-1] == "risk_score"


async def test_preview_defaults(client: AsyncClient):
    resp = await client.post(f"{BASE}/preview", json={"responses": {}})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user_name"] == "Investor"
    assert body["risk_profile"]["score"] == 65
    assert body["investor_type"]["code"] == "PIAC"
    assert body["investor_type"]["dimensions"] == {"risk": 50, "decision": 50, "time": 50, "focus": 50}
    assert [a["percentage"] for a in body["allocation"]] == [38, 16, 24, 10, 7, 5]
    assert body["allocation_total"] == 100
    assert body["investment_amount"] == 50_000


async def test_preview_is_deterministic(client: AsyncClient):
    first = await client.post(f"{BASE}/preview", json={"responses": ANSWERS})
    second = await client.post(f"{BASE}/preview", json={"responses": ANSWERS})
    assert first.json() == second.json()


@pytest.mark.parametrize(
    "answers",
    [{"pref-style": ["passive"]}, {"pref-assets": 5}, {"pref-assets": "crypto"}],
)
async def test_preview_tolerates_mistyped_preferences(client: AsyncClient, answers):
    baseline = await client.post(f"{BASE}/preview", json={"responses": {}})
    resp = await client.post(f"{BASE}/preview", json={"responses": answers})
    assert resp.status_code == 200
    assert resp.json() == baseline.json()


async def test_preview_rejects_non_object_responses(client: AsyncClient):
    resp = await client.post(f"{BASE}/preview", json={"responses": ["hold"]})
    assert resp.status_code == 422


# ── Auth ─────────────────────────────────────────────────────────────────────


async def test_saved_report_requires_auth(client: AsyncClient):
    resp = await client.get(f"{BASE}/report")
    assert resp.status_code == 401
    assert resp.json()["error"] == "http_401"
    assert resp.headers["www-authenticate"] == "Bearer"


async def test_bearer_token_reaches_service():
    db = make_fake_db()
    app.dependency_overrides[get_db] = lambda: db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            resp = await ac.get(
                f"{BASE}/report", headers={"Authorization": f"Bearer {make_token()}"}
            )
    finally:
        app.dependency_overrides.pop(get_db, None)
    assert resp.status_code == 404
    assert resp.json()["message"] == "No saved investment plan"
    db.execute.assert_awaited_once()


# ── Saved reports ────────────────────────────────────────────────────────────


async def test_create_report_persists_plan(authed_client: AsyncClient, fake_db):
    resp = await authed_client.post(f"{BASE}/report", json={"responses": ANSWERS})
    assert resp.status_code == 201
    body = resp.json()
    assert body["user_name"] == "Ada"
    assert body["responses"] == ANSWERS
    assert body["plan_content"].startswith("# Ada's Personalized Investment Plan")

    fake_db.add.assert_called_once()
    plan = fake_db.add.call_args.args[0]
    assert isinstance(plan, InvestmentPlan)
    assert plan.user_id == SAMPLE_USER_ID
    assert plan.status == PlanStatus.COMPLETE
    assert plan.risk_score == body["risk_profile"]["score"]
    assert plan.investor_type == body["investor_type"]["code"]
    assert plan.responses["answers"] == ANSWERS
    assert str(plan.id) == body["id"]
    fake_db.flush.assert_awaited()


async def test_create_report_replaces_existing_plan(authed_client: AsyncClient, fake_db):
    await authed_client.post(f"{BASE}/report", json={"responses": {}})
    plan = fake_db.add.call_args.args[0]
    fake_db.execute.return_value.scalar_one_or_none.return_value = plan

    resp = await authed_client.post(f"{BASE}/report", json={"responses": ANSWERS})
    assert resp.status_code == 201
    assert resp.json()["id"] == str(plan.id)
    fake_db.add.assert_called_once()
    assert plan.name == "Ada"


async def test_get_report_round_trip(authed_client: AsyncClient, fake_db):
    created = (await authed_client.post(f"{BASE}/report", json={"responses": ANSWERS})).json()
    fake_db.execute.return_value.scalar_one_or_none.return_value = fake_db.add.call_args.args[0]

    resp = await authed_client.get(f"{BASE}/report")
    assert resp.status_code == 200
    assert resp.json() == created


async def test_get_report_not_found(authed_client: AsyncClient):
    resp = await authed_client.get(f"{BASE}/report")
    assert resp.status_code == 404
    assert resp.json()["error"] == "http_404"


async def test_delete_report(authed_client: AsyncClient, fake_db):
    plan = InvestmentPlan(id=uuid.uuid4(), user_id=SAMPLE_USER_ID)
    fake_db.execute.return_value.scalar_one_or_none.return_value = plan

    resp = await authed_client.delete(f"{BASE}/report")
    assert resp.status_code == 204
    fake_db.delete.assert_awaited_once_with(plan)


async def test_delete_report_not_found(authed_client: AsyncClient, fake_db):
    resp = await authed_client.delete(f"{BASE}/report")
    assert resp.status_code == 404
    fake_db.delete.assert_not_awaited()


# ── Restoring older rows ─────────────────────────────────────────────────────


def test_restore_report_fills_missing_pieces():
    created = datetime(2026, 1, 15, tzinfo=timezone.utc)
    plan = InvestmentPlan(
        id=uuid.uuid4(),
        user_id=SAMPLE_USER_ID,
        responses=None,
        risk_score=None,
        created_at=created,
    )
    restored = restore_report(plan)

    assert restored.user_name == "Investor"
    assert restored.risk_profile.score == 50
    assert restored.risk_profile.label == "Moderate"
    assert restored.investor_type.code == "GAPD"
    assert restored.investor_type.name == "The Steward"
    assert restored.investor_type.dimensions.risk == 50
    assert [a.model_dump() for a in restored.allocation] == [
        asdict(a) | {"subcategories": [asdict(s) for s in a.subcategories]}
        for a in build_allocation(50, [])
    ]
    assert restored.allocation_total == 91
    assert restored.key_metrics.time_horizon == "10 years"
    assert restored.investment_amount == 50_000
    assert restored.generated_at == created
    assert restored.responses == {}
    assert restored.plan_content == ""


def test_restore_report_prefers_stored_label():
    plan = InvestmentPlan(
        id=uuid.uuid4(),
        user_id=SAMPLE_USER_ID,
        name="Ada",
        risk_score=72,
        risk_profile="Moderately Aggressive",
        investor_type="PAAD",
        responses={"answers": {"goal-timeline": 3}, "investment_amount": 250_000},
        updated_at=datetime(2026, 2, 1, tzinfo=timezone.utc),
    )
    restored = restore_report(plan)
    assert restored.risk_profile.label == "Moderately Aggressive"
    assert restored.investor_type.code == "PAAD"
    assert restored.investment_amount == 250_000
    assert restored.key_metrics.time_horizon == "3 years"
    assert restored.narrative.rebalancing.startswith("Review your portfolio monthly")
