# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient


class TestProgramApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="metabalance-program-"))
        data_root = cls._tmp / "data"
        os.environ["METABALANCE_DATA_ROOT"] = str(data_root)
        os.environ["METABALANCE_DB_PATH"] = str(data_root / "metabalance.db")
        os.environ["METABALANCE_JWT_SECRET"] = "test-secret"

        for name in list(sys.modules.keys()):
            if name == "metabalance" or name.startswith("metabalance."):
                sys.modules.pop(name, None)

        from metabalance.api import app  # noqa: WPS433 (import inside test for env control)
        from metabalance.dates import today_key  # noqa: WPS433

        cls.app = app
        cls.today = today_key()

    @classmethod
    def tearDownClass(cls) -> None:
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _client(self, email: str) -> TestClient:
        client = TestClient(self.app)
        resp = client.post("/api/auth/register", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.addCleanup(client.close)
        return client

    # ---- journey ----

    def test_journey_phases(self) -> None:
        client = self._client("phases@example.com")
        self.assertIsNone(client.get("/api/journey/phases/current").json())

        phases = client.post("/api/journey/phases", json={"start_weight": 312, "target_weight": 212}).json()
        self.assertEqual([p["phase_number"] for p in phases], [1, 2, 3, 4])
        self.assertEqual([p["goal_weight_loss"] for p in phases], [22.0, 28.0, 28.0, 22.0])
        self.assertEqual([p["status"] for p in phases], ["active", "upcoming", "upcoming", "upcoming"])
        self.assertEqual(phases[0]["end_date"], phases[1]["start_date"])

        current = client.get("/api/journey/phases/current").json()
        self.assertEqual(current["phase_number"], 1)

        init = client.get("/api/journey/initialization").json()
        self.assertEqual((init["current_phase"], init["completed_phases"]), (1, 0))
        self.assertEqual(init["initial_weight"], 312)

        # Re-planning replaces phases rather than adding to them.
        client.post("/api/journey/phases", json={"start_weight": 300, "target_weight": 250})
        phases = client.get("/api/journey/phases").json()
        self.assertEqual(len(phases), 4)
        self.assertEqual(phases[1]["goal_weight_loss"], 14.0)

        resp = client.put("/api/journey/phases/progress", json={"phase_number": 1, "actual_weight_loss": 9.456})
        self.assertEqual(resp.json()["actual_weight_loss"], 9.46)

        advanced = client.post("/api/journey/advance", json={"new_phase": 2}).json()
        self.assertEqual((advanced["current_phase"], advanced["completed_phases"]), (2, 1))
        statuses = [p["status"] for p in client.get("/api/journey/phases").json()]
        self.assertEqual(statuses, ["completed", "active", "upcoming", "upcoming"])

        client.delete("/api/journey")
        self.assertEqual(client.get("/api/journey/phases").json(), [])
        self.assertIsNone(client.get("/api/journey/initialization").json())

    def test_journey_phase_errors(self) -> None:
        client = self._client("phase-errors@example.com")
        resp = client.put("/api/journey/phases/progress", json={"phase_number": 2, "actual_weight_loss": 3})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(client.post("/api/journey/advance", json={"new_phase": 2}).status_code, 404)

    def test_journey_supplements(self) -> None:
        client = self._client("journey-supps@example.com")
        catalog = client.get("/api/journey/supplements").json()
        self.assertEqual(len(catalog), 16)
        self.assertEqual([s["phase_introduced"] for s in catalog], sorted(s["phase_introduced"] for s in catalog))

        phase_one = client.get("/api/journey/supplements/phase/1").json()
        self.assertEqual(
            {s["name"] for s in phase_one},
            {"Electrolyte Complex", "Magnesium Glycinate", "B-Complex Vitamin", "Vitamin D3", "Berberine"},
        )

        supplement_id = phase_one[0]["id"]
        payload = {"supplement_id": supplement_id, "date": self.today, "taken": True}
        first = client.post("/api/journey/supplements/log", json=payload).json()
        second = client.post("/api/journey/supplements/log", json={**payload, "taken": False, "notes": "skipped"}).json()
        self.assertEqual(first["id"], second["id"])
        self.assertFalse(second["taken"])

        log = client.get("/api/journey/supplements/log", params={"date": self.today}).json()
        self.assertEqual(len(log), 1)

        missing = client.post("/api/journey/supplements/log", json={**payload, "supplement_id": "nope"})
        self.assertEqual(missing.status_code, 404)

        reminder = client.post(
            "/api/journey/supplements/reminders",
            json={"supplement_id": supplement_id, "reminder_time": "08:30"},
        ).json()
        self.assertTrue(reminder["enabled"])
        self.assertEqual(reminder["frequency"], "daily")

        client.put(
            f"/api/journey/supplements/reminders/{reminder['id']}",
            json={"reminder_time": "09:00", "enabled": False},
        )
        self.assertEqual(client.get("/api/journey/supplements/reminders").json(), [])

        bad_time = client.post(
            "/api/journey/supplements/reminders",
            json={"supplement_id": supplement_id, "reminder_time": "25:00"},
        )
        self.assertEqual(bad_time.status_code, 422)

    def test_extended_fasting(self) -> None:
        client = self._client("extended@example.com")
        self.assertIsNone(client.get("/api/journey/fasting/sessions/active").json())

        first = client.post(
            "/api/journey/fasting/sessions",
            json={"fasting_type": "24hr", "target_duration": 24, "weight_before": 250},
        ).json()
        active = client.get("/api/journey/fasting/sessions/active").json()
        self.assertEqual(active["id"], first["id"])

        ended = client.post(
            f"/api/journey/fasting/sessions/{first['id']}/end",
            json={"weight_after": 247.5, "electrolytes_log": "LMNT x2"},
        ).json()
        self.assertTrue(ended["completed"])
        self.assertEqual(ended["actual_duration"], 0)
        self.assertIsNotNone(ended["end_time"])

        again = client.post(f"/api/journey/fasting/sessions/{first['id']}/end", json={"weight_after": 240})
        self.assertEqual(again.status_code, 400)
        unchanged = client.get("/api/journey/fasting/sessions").json()[0]
        self.assertEqual((unchanged["end_time"], unchanged["weight_after"]), (ended["end_time"], 247.5))

        client.post("/api/journey/fasting/sessions", json={"fasting_type": "3-5day", "target_duration": 72})

        stats = client.get("/api/journey/fasting/stats").json()
        self.assertEqual(stats["total_fasts"], 2)
        self.assertEqual(stats["completed_fasts"], 1)
        self.assertEqual(stats["abandoned_fasts"], 1)
        self.assertEqual(stats["total_weight_lost"], "2.5")

        self.assertEqual(len(client.get("/api/journey/fasting/sessions").json()), 2)

        other = self._client("extended-other@example.com")
        resp = other.post(f"/api/journey/fasting/sessions/{first['id']}/end", json={})
        self.assertEqual(resp.status_code, 404)

    def test_blood_work(self) -> None:
        client = self._client("labs@example.com")
        self.assertIsNone(client.get("/api/journey/blood-work/latest").json())

        client.post("/api/journey/blood-work", json={"test_date": "2026-01-10", "glucose": 104.457, "tsh": 2.34567})
        client.post("/api/journey/blood-work", json={"test_date": "2026-04-10", "a1c": 5.4, "hdl": 48})

        history = client.get("/api/journey/blood-work").json()
        self.assertEqual(len(history), 2)
        self.assertEqual(history[0]["a1c"], 5.4)
        self.assertEqual(history[1]["glucose"], 104.46)
        self.assertEqual(history[1]["tsh"], 2.346)

        latest = client.get("/api/journey/blood-work/latest").json()
        self.assertEqual(latest["id"], history[0]["id"])

    # ---- emotional eating ----

    def test_emotional_eating_episodes(self) -> None:
        client = self._client("emotions@example.com")
        base = {"food_consumed": "Ice cream", "intensity": 7}
        client.post(
            "/api/emotional-eating/episodes",
            json={**base, "trigger_emotion": "stress", "coping_strategy_used": "walk", "effectiveness_rating": 6},
        )
        client.post("/api/emotional-eating/episodes", json={**base, "trigger_emotion": "stress", "intensity": 8})
        client.post("/api/emotional-eating/episodes", json={**base, "trigger_emotion": "boredom", "intensity": 4})

        analytics = client.get("/api/emotional-eating/analytics").json()
        self.assertEqual(analytics["total_episodes"], 3)
        self.assertEqual(analytics["emotion_counts"], {"stress": 2, "boredom": 1})
        self.assertEqual(analytics["coping_usage_rate"], 33)
        self.assertEqual(analytics["avg_coping_effectiveness"], 6.0)
        self.assertEqual(analytics["period_days"], 30)

        self.assertEqual(len(client.get("/api/emotional-eating/episodes", params={"limit": 2}).json()), 2)
        ranged = client.get(
            "/api/emotional-eating/episodes",
            params={"start": self.today, "end": self.today},
        ).json()
        self.assertEqual(len(ranged), 3)

        # An episode in the last second of a day belongs to that day.
        client.post(
            "/api/emotional-eating/episodes",
            json={**base, "trigger_emotion": "anxiety", "timestamp": "2026-01-05T23:59:59Z"},
        )
        late = client.get(
            "/api/emotional-eating/episodes",
            params={"start": "2026-01-05", "end": "2026-01-05"},
        ).json()
        self.assertEqual([e["trigger_emotion"] for e in late], ["anxiety"])
        self.assertEqual(late[0]["timestamp"], "2026-01-05T23:59:59.000Z")

        invalid = client.post("/api/emotional-eating/episodes", json={**base, "trigger_emotion": "joy"})
        self.assertEqual(invalid.status_code, 422)
        empty_food = client.post(
            "/api/emotional-eating/episodes",
            json={"trigger_emotion": "anger", "food_consumed": "", "intensity": 5},
        )
        self.assertEqual(empty_food.status_code, 422)

    def test_medications(self) -> None:
        client = self._client("meds@example.com")
        older = client.post(
            "/api/emotional-eating/medications",
            json={
                "name": "Metformin",
                "type": "other",
                "dosage": "500mg",
                "frequency": "twice daily",
                "start_date": "2025-06-01",
            },
        ).json()
        newer = client.post(
            "/api/emotional-eating/medications",
            json={
                "name": "Semaglutide",
                "type": "glp1_agonist",
                "dosage": "0.25mg",
                "frequency": "weekly",
                "start_date": "2026-01-15",
            },
        ).json()
        self.assertTrue(newer["active"])

        meds = client.get("/api/emotional-eating/medications").json()
        self.assertEqual([m["id"] for m in meds], [newer["id"], older["id"]])

        updated = client.patch(
            f"/api/emotional-eating/medications/{older['id']}",
            json={"active": False, "side_effects": "mild nausea"},
        ).json()
        self.assertFalse(updated["active"])
        self.assertEqual(updated["dosage"], "500mg")
        active = client.get("/api/emotional-eating/medications", params={"active_only": True}).json()
        self.assertEqual([m["id"] for m in active], [newer["id"]])

        for _ in range(3):
            client.post(
                "/api/emotional-eating/medications/logs",
                json={"medication_id": newer["id"], "taken_at": f"{self.today}T07:00:00Z", "dosage_taken": "0.25mg"},
            )
        logs = client.get("/api/emotional-eating/medications/logs", params={"medication_id": newer["id"]}).json()
        self.assertEqual(len(logs), 3)

        adherence = client.get(
            f"/api/emotional-eating/medications/{newer['id']}/adherence",
            params={"days": 30},
        ).json()
        self.assertEqual(adherence["total_doses"], 3)
        self.assertEqual(adherence["expected_doses"], 30)
        self.assertEqual(adherence["adherence_rate"], 10)
        self.assertEqual(adherence["medication_name"], "Semaglutide")

        # One dose over eight days is 12.5%, reported as 13.
        single = client.post(
            "/api/emotional-eating/medications",
            json={
                "name": "Naltrexone",
                "type": "other",
                "dosage": "50mg",
                "frequency": "daily",
                "start_date": "2026-01-01",
            },
        ).json()
        client.post(
            "/api/emotional-eating/medications/logs",
            json={"medication_id": single["id"], "taken_at": f"{self.today}T07:00:00Z", "dosage_taken": "50mg"},
        )
        adherence = client.get(
            f"/api/emotional-eating/medications/{single['id']}/adherence",
            params={"days": 8},
        ).json()
        self.assertEqual(adherence["adherence_rate"], 13)

        other = self._client("meds-other@example.com")
        resp = other.patch(f"/api/emotional-eating/medications/{newer['id']}", json={"notes": "x"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(other.get("/api/emotional-eating/medications/missing/adherence").status_code, 404)

    # ---- mindfulness ----

    def test_mindfulness_catalog_is_public(self) -> None:
        anonymous = TestClient(self.app)
        self.addCleanup(anonymous.close)
        exercises = anonymous.get("/api/mindfulness/exercises").json()
        self.assertEqual(len(exercises), 10)
        self.assertEqual([e["sort_order"] for e in exercises], list(range(1, 11)))
        self.assertEqual(exercises[0]["name"], "Box Breathing")
        self.assertIn("Reduces stress", exercises[0]["benefits"])

        grounding = anonymous.get("/api/mindfulness/exercises/category/grounding").json()
        self.assertEqual([e["name"] for e in grounding], ["5-4-3-2-1 Grounding", "STOP Technique"])
        self.assertEqual(anonymous.get("/api/mindfulness/exercises/urge-surfing").json()["duration"], 10)
        self.assertEqual(anonymous.get("/api/mindfulness/exercises/nope").status_code, 404)

        # Sessions still require sign-in.
        self.assertEqual(anonymous.get("/api/mindfulness/stats").status_code, 401)
        resp = anonymous.post("/api/mindfulness/sessions", json={"exercise_id": "box-breathing"})
        self.assertEqual(resp.status_code, 401)

    def test_mindfulness_sessions(self) -> None:
        client = self._client("calm@example.com")
        stats = client.get("/api/mindfulness/stats").json()
        self.assertEqual(stats["total_sessions"], 0)
        self.assertIsNone(stats["favorite_exercise"])

        self.assertEqual(client.post("/api/mindfulness/sessions", json={"exercise_id": "nope"}).status_code, 404)

        ids = []
        for exercise_id in ("box-breathing", "box-breathing", "urge-surfing"):
            resp = client.post(
                "/api/mindfulness/sessions",
                json={"exercise_id": exercise_id, "trigger": "craving", "mood_before": "low", "craving_intensity_before": 8},
            )
            ids.append(resp.json()["session_id"])

        for session_id, minutes in zip(ids[:2], (5, 6)):
            done = client.post(
                f"/api/mindfulness/sessions/{session_id}/complete",
                json={"duration_minutes": minutes, "mood_after": "good", "craving_intensity_after": 3},
            ).json()
            self.assertTrue(done["completed"])

        stats = client.get("/api/mindfulness/stats").json()
        self.assertEqual(stats["total_sessions"], 2)
        self.assertEqual(stats["total_minutes"], 11)
        self.assertEqual(stats["sessions_this_week"], 2)
        self.assertEqual(stats["current_streak"], 1)
        self.assertEqual(stats["favorite_exercise"]["id"], "box-breathing")

        recent = client.get("/api/mindfulness/sessions").json()
        self.assertEqual(len(recent), 3)
        self.assertEqual({r["exercise"]["id"] for r in recent}, {"box-breathing", "urge-surfing"})

        categories = client.get("/api/mindfulness/stats/categories").json()
        self.assertEqual(categories, [{"category": "breathing", "count": 2, "total_minutes": 11}])

        other = self._client("calm-other@example.com")
        resp = other.post(f"/api/mindfulness/sessions/{ids[2]}/complete", json={"duration_minutes": 4})
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
