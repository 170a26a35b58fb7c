# -*- coding: utf-8 -*-

from __future__ import annotations

import base64
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fastapi.testclient import TestClient


class TestAppFlow(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="metabalance-test-"))
        data_root = cls._tmp / "data"
        os.environ["METABALANCE_DATA_ROOT"] = str(data_root)
        os.environ["METABALANCE_DB_PATH"] = str(data_root / "metabalance.db")
        os.environ["METABALANCE_JWT_SECRET"] = "test-secret"
        # No provider keys: AI and food lookups fail unless patched.
        for key in ("METABALANCE_LLM_API_KEY", "XAI_API_KEY", "SPOONACULAR_API_KEY", "METABALANCE_OWNER_EMAIL"):
            os.environ.pop(key, None)

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "metabalance" or name.startswith("metabalance."):
                sys.modules.pop(name, None)

        from metabalance.api import app  # noqa: WPS433 (import inside test for env control)
        from metabalance.dates import today_key, week_range  # noqa: WPS433

        cls.app = app
        cls.today = today_key()
        start, end = week_range(cls.today)
        cls.week_start = start.date().isoformat()
        cls.week_end = end.date().isoformat()

        cls.client = TestClient(app)
        resp = cls.client.post(
            "/api/auth/register",
            json={"email": "flow@example.com", "password": "password123", "name": "Flow"},
        )
        assert resp.status_code == 200, resp.text

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _new_client(self, email: str) -> TestClient:
        client = TestClient(self.app)
        resp = client.post("/api/auth/register", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        return client

    def test_auth_required(self) -> None:
        unauth = TestClient(self.app)
        self.assertEqual(unauth.get("/api/meals").status_code, 401)
        self.assertEqual(unauth.get("/api/goals/streaks").status_code, 401)
        self.assertEqual(unauth.get("/api/health").status_code, 200)
        unauth.close()

    def test_register_login_and_me(self) -> None:
        resp = self.client.post("/api/auth/register", json={"email": "flow@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 400)

        resp = self.client.post("/api/auth/login", json={"email": "flow@example.com", "password": "wrong-password"})
        self.assertEqual(resp.status_code, 401)

        resp = self.client.post("/api/auth/login", json={"email": "flow@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]

        bearer = TestClient(self.app)
        resp = bearer.get("/api/auth/me", headers={"authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["name"], "Flow")
        self.assertFalse(resp.json()["is_owner"])

        resp = bearer.get("/api/auth/me", headers={"authorization": f"Bearer {token.rsplit('.', 1)[0]}.{'A' * 43}"})
        self.assertEqual(resp.status_code, 401)
        bearer.close()

    def test_profile_and_nutrition_goals(self) -> None:
        client = self._new_client("profile@example.com")
        self.assertIsNone(client.get("/api/profile").json())
        self.assertEqual(client.get("/api/profile/nutrition-goals").json()["daily_calories"], 2000)
        self.assertEqual(client.get("/api/profile/metabolism").status_code, 400)

        resp = client.put(
            "/api/profile",
            json={
                "current_weight": 200,
                "target_weight": 170,
                "height": 70,
                "age": 40,
                "gender": "male",
                "activity_level": "moderate",
                "has_diabetes": True,
            },
        )
        self.assertEqual(resp.json(), {"success": True})

        profile = client.get("/api/profile").json()
        self.assertTrue(profile["has_diabetes"])
        self.assertFalse(profile["has_nafld"])
        self.assertEqual(profile["daily_reminder_time"], "09:00")

        # Partial update keeps earlier fields.
        client.put("/api/profile", json={"stress_level": "high"})
        profile = client.get("/api/profile").json()
        self.assertEqual(profile["current_weight"], 200)
        self.assertEqual(profile["stress_level"], "high")

        goals = client.get("/api/profile/nutrition-goals").json()
        self.assertEqual(goals["daily_calories"], 2326)
        self.assertEqual(goals["daily_protein"], 150)
        self.assertEqual(goals["daily_fats"], 70)
        self.assertEqual(goals["daily_carbs"], 274)

        metabolism = client.get("/api/profile/metabolism").json()
        self.assertEqual(metabolism["activity_multiplier"], 1.55)
        self.assertEqual(metabolism["bmr"], 1823)
        client.close()

    def test_meals_water_goals_and_streaks(self) -> None:
        client = self._new_client("tracker@example.com")
        resp = client.post(
            "/api/meals",
            json={
                "logged_at": f"{self.today}T12:00:00Z",
                "meal_type": "lunch",
                "food_name": "Grilled chicken salad",
                "calories": 450,
                "protein": 42,
                "carbs": 12,
                "fats": 20,
            },
        )
        self.assertEqual(resp.status_code, 200)
        meal_id = resp.json()["id"]

        meals = client.get("/api/meals", params={"date": self.today}).json()
        self.assertEqual([m["id"] for m in meals], [meal_id])

        totals = client.get("/api/meals/totals", params={"date": self.today}).json()
        self.assertEqual(totals["calories"], 450)
        self.assertEqual(totals["fiber"], 0)

        weekly = client.get("/api/meals/weekly", params={"start": self.week_start, "end": self.week_end}).json()
        self.assertEqual([d["date"] for d in weekly["days"]], [self.today])

        self.assertEqual(client.get("/api/meals", params={"date": "not-a-date"}).status_code, 400)

        # Reaching the water target marks the water goal.
        resp = client.put("/api/water", json={"date": self.today, "glasses": 8})
        self.assertEqual(resp.json()["glasses"], 8)
        goal = client.get("/api/goals/daily", params={"date": self.today}).json()
        self.assertTrue(goal["water_goal_complete"])
        self.assertEqual(goal["win_score"], 1)

        resp = client.put(
            "/api/goals/daily",
            json={"date": self.today, "meal_logging_complete": True, "protein_goal_complete": True},
        )
        self.assertEqual(resp.json()["win_score"], 3)

        resp = client.post("/api/goals/daily/toggle", json={"date": self.today, "goal_id": "exercise"})
        self.assertEqual(resp.json()["win_score"], 4)
        resp = client.post("/api/goals/daily/toggle", json={"date": self.today, "goal_id": "exercise"})
        self.assertEqual(resp.json()["win_score"], 3)

        streaks = client.get("/api/goals/streaks").json()
        self.assertEqual(streaks["current_streak"], 1)
        self.assertEqual(streaks["total_days"], 1)

        week = client.get("/api/goals/week", params={"week_start": self.week_start}).json()
        self.assertEqual(len(week), 1)

        self.assertEqual(client.delete(f"/api/meals/{meal_id}").json(), {"success": True})
        self.assertEqual(client.get("/api/meals", params={"date": self.today}).json(), [])
        client.close()

    def test_water_glasses_bounds(self) -> None:
        client = self._new_client("water@example.com")
        self.assertEqual(client.put("/api/water", json={"date": self.today, "glasses": 21}).status_code, 422)
        self.assertEqual(client.put("/api/water", json={"date": self.today, "glasses": -1}).status_code, 422)
        self.assertEqual(client.put("/api/water", json={"date": self.today, "glasses": 20}).json()["glasses"], 20)
        client.close()

    def test_fasting_schedules(self) -> None:
        client = self._new_client("fasting@example.com")
        self.assertIsNone(client.get("/api/fasting/schedules/active").json())

        first = client.post(
            "/api/fasting/schedules",
            json={"fasting_type": "tre", "eating_window_start": 12, "eating_window_end": 20, "start_date": self.today},
        ).json()
        self.assertTrue(first["is_active"])
        second = client.post(
            "/api/fasting/schedules",
            json={"fasting_type": "adf", "fasting_days": "mon,wed,fri", "start_date": self.today},
        ).json()

        # Only the newest schedule stays active.
        self.assertEqual(client.get("/api/fasting/schedules/active").json()["id"], second["id"])
        schedules = client.get("/api/fasting/schedules").json()
        self.assertEqual(len(schedules), 2)
        self.assertEqual([s["id"] for s in schedules if s["is_active"]], [second["id"]])

        bad_window = client.post(
            "/api/fasting/schedules",
            json={"fasting_type": "tre", "eating_window_start": 24, "start_date": self.today},
        )
        self.assertEqual(bad_window.status_code, 422)

        client.post(
            "/api/fasting/logs",
            json={"schedule_id": second["id"], "date": "2026-01-05", "adhered": True},
        )
        resp = client.post(
            "/api/fasting/logs",
            json={
                "schedule_id": second["id"],
                "date": "2026-01-06",
                "adhered": False,
                "actual_eating_start": "11:00",
                "notes": "birthday lunch",
            },
        )
        self.assertFalse(resp.json()["adhered"])

        logs = client.get(f"/api/fasting/schedules/{second['id']}/logs").json()
        self.assertEqual([log["date"] for log in logs], ["2026-01-06", "2026-01-05"])
        ranged = client.get(
            f"/api/fasting/schedules/{second['id']}/logs",
            params={"start": "2026-01-05", "end": "2026-01-05"},
        ).json()
        self.assertEqual([log["adhered"] for log in ranged], [True])
        self.assertEqual(client.get(f"/api/fasting/schedules/{first['id']}/logs").json(), [])

        other = self._new_client("fasting-other@example.com")
        resp = other.post("/api/fasting/logs", json={"schedule_id": second["id"], "date": self.today, "adhered": True})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(other.get(f"/api/fasting/schedules/{second['id']}/logs").status_code, 404)
        self.assertIsNone(other.get("/api/fasting/schedules/active").json())
        other.close()
        client.close()

    def test_supplements(self) -> None:
        client = self._new_client("supplements@example.com")
        created = client.post(
            "/api/supplements",
            json={
                "name": "Berberine HCl",
                "type": "berberine",
                "dosage": "500mg",
                "frequency": "3x daily",
                "timing": "with meals",
                "start_date": self.today,
            },
        ).json()
        self.assertTrue(created["is_active"])
        probiotic = client.post(
            "/api/supplements",
            json={"name": "Probiotic", "type": "probiotic", "start_date": self.today},
        ).json()
        self.assertEqual(client.post("/api/supplements", json={"name": "X", "type": "fish"}).status_code, 422)

        # Partial update leaves other fields alone.
        updated = client.patch(f"/api/supplements/{created['id']}", json={"dosage": "1000mg"}).json()
        self.assertEqual(updated["dosage"], "1000mg")
        self.assertEqual(updated["timing"], "with meals")
        self.assertTrue(updated["is_active"])

        client.patch(f"/api/supplements/{probiotic['id']}", json={"is_active": False})
        active = client.get("/api/supplements/active").json()
        self.assertEqual([s["id"] for s in active], [created["id"]])
        self.assertEqual(len(client.get("/api/supplements").json()), 2)

        client.post(
            "/api/supplements/logs",
            json={"supplement_id": created["id"], "taken_at": "2026-01-05T08:00:00+01:00", "adhered": True},
        )
        client.post(
            "/api/supplements/logs",
            json={"supplement_id": created["id"], "taken_at": "2026-01-06T08:00:00Z", "adhered": False},
        )
        logs = client.get(f"/api/supplements/{created['id']}/logs").json()
        self.assertEqual([log["taken_at"] for log in logs], ["2026-01-06T08:00:00.000Z", "2026-01-05T07:00:00.000Z"])
        ranged = client.get(f"/api/supplements/{created['id']}/logs", params={"end": "2026-01-05"}).json()
        self.assertEqual(len(ranged), 1)

        other = self._new_client("supplements-other@example.com")
        self.assertEqual(other.patch(f"/api/supplements/{created['id']}", json={"dosage": "1mg"}).status_code, 404)
        self.assertEqual(other.delete(f"/api/supplements/{created['id']}").status_code, 404)
        self.assertEqual(other.get(f"/api/supplements/{created['id']}/logs").status_code, 404)
        resp = other.post(
            "/api/supplements/logs",
            json={"supplement_id": created["id"], "taken_at": "2026-01-07T08:00:00Z", "adhered": True},
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(other.get("/api/supplements").json(), [])
        other.close()

        self.assertEqual(client.delete(f"/api/supplements/{created['id']}").json(), {"success": True})
        self.assertEqual(client.delete(f"/api/supplements/{created['id']}").status_code, 404)
        self.assertEqual([s["id"] for s in client.get("/api/supplements").json()], [probiotic["id"]])
        client.close()

    def test_other_users_ids_are_not_visible(self) -> None:
        owner = self._new_client("owner-ids@example.com")
        other = self._new_client("other-ids@example.com")

        meal = owner.post(
            "/api/meals",
            json={"logged_at": f"{self.today}T12:00:00Z", "meal_type": "lunch", "food_name": "Soup"},
        ).json()
        # Deleting someone else's meal is a no-op.
        self.assertEqual(other.delete(f"/api/meals/{meal['id']}").json(), {"success": True})
        self.assertEqual([m["id"] for m in owner.get("/api/meals", params={"date": self.today}).json()], [meal["id"]])
        self.assertEqual(other.get("/api/meals", params={"date": self.today}).json(), [])

        reply = '{"title": "Hi", "content": "Drink water.", "type": "tip"}'
        with mock.patch("metabalance.llm.complete", return_value=reply):
            insight = owner.get("/api/insights/today").json()
        self.assertEqual(other.post(f"/api/insights/{insight['id']}/viewed").status_code, 404)
        self.assertFalse(owner.get("/api/insights/today").json()["viewed"])

        fast = owner.post("/api/journey/fasting/sessions", json={"fasting_type": "24hr", "target_duration": 24}).json()
        self.assertEqual(other.post(f"/api/journey/fasting/sessions/{fast['id']}/end", json={}).status_code, 404)
        self.assertIsNone(other.get("/api/journey/fasting/sessions/active").json())
        self.assertFalse(owner.get("/api/journey/fasting/sessions/active").json()["completed"])

        other.close()
        owner.close()

    def test_progress_export_and_achievements(self) -> None:
        client = self._new_client("progress@example.com")
        client.put("/api/profile", json={"current_weight": 260, "target_weight": 200})
        client.post(
            "/api/progress",
            json={"logged_at": "2026-01-01T08:00:00Z", "weight": 260, "mood": "fair"},
        )
        client.post(
            "/api/progress",
            json={"logged_at": f"{self.today}T08:00:00Z", "weight": 248.5, "energy_level": "high"},
        )
        client.post(
            "/api/meals",
            json={"logged_at": f"{self.today}T08:30:00Z", "meal_type": "breakfast", "food_name": "Eggs"},
        )

        latest = client.get("/api/progress/latest").json()
        self.assertEqual(latest["weight"], 248.5)
        self.assertEqual(len(client.get("/api/progress").json()), 2)

        export = client.get("/api/progress/export").json()
        self.assertEqual(export["filename"], f"metabalance-progress-{self.today}.pdf")
        self.assertTrue(base64.b64decode(export["pdf"]).startswith(b"%PDF"))

        resp = client.post("/api/achievements/check")
        unlocked = {a["id"] for a in resp.json()["new_achievements"]}
        self.assertEqual(unlocked, {"weight_5lbs", "weight_10lbs", "first_meal_logged"})

        # Unlocking is idempotent.
        self.assertEqual(client.post("/api/achievements/check").json()["new_achievements"], [])

        unviewed = client.get("/api/achievements/unviewed").json()
        self.assertEqual({u["achievement_id"] for u in unviewed}, unlocked)

        client.post("/api/achievements/viewed", json={"achievement_ids": ["weight_5lbs"]})
        self.assertEqual(len(client.get("/api/achievements/unviewed").json()), 2)
        client.post("/api/achievements/viewed", json={"achievement_ids": []})
        self.assertEqual(len(client.get("/api/achievements/unviewed").json()), 2)

        everything = client.get("/api/achievements").json()
        self.assertEqual(len(everything), 15)
        by_id = {a["id"]: a for a in everything}
        self.assertTrue(by_id["weight_10lbs"]["unlocked"])
        self.assertFalse(by_id["streak_7"]["unlocked"])
        self.assertIsNone(by_id["streak_7"]["unlocked_at"])
        client.close()

    def test_daily_insight_generated_once(self) -> None:
        client = self._new_client("insight@example.com")
        reply = '{"title": "Nice", "content": "Start lunch with protein.", "type": "tip"}'
        with mock.patch("metabalance.llm.complete", return_value=reply) as complete:
            first = client.get("/api/insights/today").json()
            second = client.get("/api/insights/today").json()
        self.assertEqual(complete.call_count, 1)
        self.assertEqual(first["id"], second["id"])
        self.assertEqual(first["content"], "Start lunch with protein.")
        self.assertEqual(first["insight_type"], "tip")
        self.assertFalse(first["viewed"])

        self.assertEqual(client.post(f"/api/insights/{first['id']}/viewed").status_code, 200)
        self.assertTrue(client.get("/api/insights/today").json()["viewed"])
        self.assertEqual(client.post("/api/insights/missing/viewed").status_code, 404)
        client.close()

    def test_daily_insight_falls_back_without_llm(self) -> None:
        from metabalance.insights.coach import FALLBACK_CONTENT  # noqa: WPS433

        client = self._new_client("fallback@example.com")
        insight = client.get("/api/insights/today").json()
        self.assertEqual(insight["content"], FALLBACK_CONTENT)
        self.assertEqual(insight["insight_type"], "tip")
        client.close()

    def test_chat_history(self) -> None:
        client = self._new_client("chat@example.com")
        with mock.patch("metabalance.llm.call_llm", return_value="Try a 16:8 window.") as call_llm:
            resp = client.post("/api/chat/messages", json={"content": "How should I fast?"})
        self.assertEqual(resp.json(), {"response": "Try a 16:8 window."})

        sent = call_llm.call_args[0][0]
        self.assertEqual(sent[0]["role"], "system")
        self.assertEqual(sent[-1], {"role": "user", "content": "How should I fast?"})
        self.assertEqual(sum(1 for m in sent if m["role"] == "user"), 1)

        history = client.get("/api/chat/history").json()
        self.assertEqual([m["role"] for m in history], ["user", "assistant"])

        # Without a key the error surfaces and no reply is stored.
        self.assertEqual(client.post("/api/chat/messages", json={"content": "again"}).status_code, 500)
        self.assertEqual(len(client.get("/api/chat/history").json()), 3)

        client.delete("/api/chat/history")
        self.assertEqual(client.get("/api/chat/history").json(), [])
        client.close()

    def test_research_digest(self) -> None:
        from metabalance.research.prompts import RESEARCH_PROMPTS  # noqa: WPS433

        client = self._new_client("research@example.com")
        digest = {category: f"{category} findings" for category in RESEARCH_PROMPTS}
        with mock.patch("metabalance.llm.gather_llm", new=mock.AsyncMock(return_value=digest)):
            resp = client.get("/api/research/latest")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["glp1"], "glp1 findings")

        history = client.get("/api/research/history").json()
        self.assertEqual(len(history), 6)
        fasting = client.get("/api/research/latest/fasting").json()
        self.assertEqual(fasting["content"], "fasting findings")

        resp = client.put(f"/api/research/{fasting['id']}/bookmark", json={"bookmarked": True})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(client.get("/api/research/latest/fasting").json()["bookmarked"])
        client.close()

    def test_food_lookup(self) -> None:
        search_payload = [{"id": 9266, "name": "pineapple", "image": "pineapple.jpg"}]
        with mock.patch("metabalance.food.client._get", return_value=search_payload) as get:
            resp = self.client.get("/api/food/search", params={"query": "pine", "limit": 5})
        self.assertEqual(resp.json()[0]["id"], 9266)
        self.assertEqual(get.call_args[0][1]["number"], 5)

        info_payload = {
            "id": 9266,
            "name": "pineapple",
            "nutrition": {
                "nutrients": [
                    {"name": "Calories", "amount": 49.6},
                    {"name": "Protein", "amount": 0.5},
                    {"name": "Carbohydrates", "amount": 13.1},
                ]
            },
        }
        with mock.patch("metabalance.food.client._get", return_value=info_payload):
            resp = self.client.get("/api/food/nutrition/9266", params={"amount": 100, "unit": "g"})
        body = resp.json()
        self.assertEqual(body["calories"], 50)
        self.assertEqual(body["carbs"], 13)
        self.assertEqual(body["fats"], 0)

        # Missing key is a server configuration error.
        self.assertEqual(self.client.get("/api/food/search", params={"query": "pine"}).status_code, 500)

    def test_weekly_reflection(self) -> None:
        client = self._new_client("reflect@example.com")
        client.put("/api/goals/daily", json={"date": self.today, "meal_logging_complete": True})
        payload = {
            "week_start": self.week_start,
            "week_end": self.week_end,
            "went_well": "Logged every meal",
            "challenges": "Late-night snacking",
            "next_week_plan": "Close the kitchen at 8pm",
        }
        with mock.patch("metabalance.llm.complete", return_value="Keep the kitchen rule.") as complete:
            first = client.post("/api/reflections", json=payload).json()
        self.assertEqual(first["ai_insights"], "Keep the kitchen rule.")
        self.assertEqual(first["days_logged"], 1)
        self.assertEqual(first["avg_win_score"], 1)
        self.assertIn("Logged 1/7 days", complete.call_args[0][1])

        # Resubmitting replaces the week's reflection; no key means canned feedback.
        second = client.post("/api/reflections", json={**payload, "went_well": "Stayed on plan"}).json()
        self.assertEqual(second["id"], first["id"])
        self.assertEqual(second["went_well"], "Stayed on plan")
        self.assertTrue(second["ai_insights"])

        fetched = client.get("/api/reflections", params={"week_start": self.week_start}).json()
        self.assertEqual(fetched["id"], first["id"])
        self.assertEqual(len(client.get("/api/reflections/recent").json()), 1)
        client.close()


if __name__ == "__main__":
    unittest.main()
