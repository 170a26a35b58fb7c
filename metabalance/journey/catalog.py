# -*- coding: utf-8 -*-
"""Journey supplement catalog shared by every user."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List

from ..app_db import db_conn
from ..config import settings

log = logging.getLogger(__name__)

# (name, dosage, frequency, monthly cost, category, phase introduced, benefits, brands)
_SUPPLEMENTS = (
    ("Electrolyte Complex", "1000-2000mg sodium daily", "daily", 30.0, "foundation", 1,
     "Hydration, muscle function, prevents cramping during fasting", "LMNT, Nuun, Ultima Replenisher"),
    ("Magnesium Glycinate", "300-400mg daily", "daily", 20.0, "foundation", 1,
     "Sleep quality, stress reduction, muscle relaxation", "Thorne, NOW Foods, Doctor's Best"),
    ("B-Complex Vitamin", "1 capsule daily", "daily", 16.0, "foundation", 1,
     "Energy production, metabolism support, nervous system health", "Thorne, Jarrow Formulas, Garden of Life"),
    ("Vitamin D3", "2000-4000 IU daily", "daily", 12.0, "foundation", 1,
     "Immune function, mood support, bone health", "Nature Made, Thorne, Nordic Naturals"),
    ("Ashwagandha", "300-600mg daily", "daily", 18.0, "advanced", 2,
     "Cortisol reduction, stress management, hormonal balance", "KSM-66, Gaia Herbs, Organic India"),
    ("Rhodiola Rosea", "200mg daily", "daily", 22.0, "advanced", 2,
     "Adaptogenic support, energy, mental clarity during fasting", "NOW Foods, Gaia Herbs, Nature's Way"),
    ("Lactobacillus gasseri", "500mg-1 billion CFU daily", "daily", 35.0, "advanced", 2,
     "Weight loss support, gut health, metabolic optimization", "Culturelle, Garden of Life, Jarrow Formulas"),
    ("Bifidobacterium lactis B420", "1-2 billion CFU daily", "daily", 35.0, "advanced", 2,
     "Body composition improvement, gut barrier integrity", "Thorne, Klaire Labs, VSL#3"),
    ("Omega-3 Fish Oil", "2-3g EPA/DHA daily", "daily", 20.0, "advanced", 2,
     "Inflammation reduction, heart health, brain function", "Nordic Naturals, Carlson Labs, Thorne"),
    ("Capsinoids", "6-12mg daily", "daily", 20.0, "advanced", 2,
     "Brown fat activation, metabolic boost (5-10%), thermogenesis", "Capsimax, NOW Foods, Jarrow Formulas"),
    ("L-Glutamine", "5-10g daily", "daily", 20.0, "advanced", 3,
     "Gut barrier repair, intestinal health, reduced inflammation", "Thorne, NOW Foods, Jarrow Formulas"),
    ("Collagen Peptides", "10-20g daily", "daily", 25.0, "advanced", 3,
     "Gut lining support, skin health, joint health", "Vital Proteins, Sports Research, Ancient Nutrition"),
    ("L-Theanine", "100-200mg as needed", "as-needed", 15.0, "optional", 3,
     "Stress reduction during extended fasts, mental clarity", "Thorne, NOW Foods, Jarrow Formulas"),
    ("Berberine", "500mg 2-3x daily", "daily", 25.0, "optional", 1,
     "Blood sugar regulation, insulin sensitivity, metabolic support", "Thorne, Integrative Therapeutics, NOW Foods"),
    ("NMN (Nicotinamide Mononucleotide)", "250-500mg daily", "daily", 45.0, "optional", 2,
     "NAD+ boost, cellular energy, metabolic health", "ProHealth, Tru Niagen, Elysium Health"),
    ("Resveratrol", "250-500mg daily", "daily", 30.0, "optional", 2,
     "Longevity support, antioxidant, metabolic enhancement", "Thorne, Life Extension, NOW Foods"),
)


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def catalog_rows() -> List[Dict[str, Any]]:
    return [
        {
            "id": slugify(name),
            "name": name,
            "dosage": dosage,
            "frequency": frequency,
            "monthly_cost": cost,
            "category": category,
            "phase_introduced": phase,
            "benefits": benefits,
            "brands": brands,
            "sort_order": index,
        }
        for index, (name, dosage, frequency, cost, category, phase, benefits, brands) in enumerate(_SUPPLEMENTS, 1)
    ]


def seed_journey_supplements() -> int:
    """Insert any catalog entries that are missing; returns how many were added."""
    rows = catalog_rows()
    with db_conn(settings.app_db_path) as conn:
        before = conn.total_changes
        conn.executemany(
            """
            INSERT OR IGNORE INTO journey_supplements (
                id, name, dosage, frequency, monthly_cost, category,
                phase_introduced, benefits, brands, sort_order
            ) VALUES (
                :id, :name, :dosage, :frequency, :monthly_cost, :category,
                :phase_introduced, :benefits, :brands, :sort_order
            )
            """,
            rows,
        )
        added = conn.total_changes - before
    if added:
        log.info("seeded %d journey supplements", added)
    return added


def list_catalog(*, up_to_phase: int = 0) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM journey_supplements"
    params: List[Any] = []
    if up_to_phase:
        sql += " WHERE phase_introduced <= ?"
        params.append(int(up_to_phase))
    sql += " ORDER BY phase_introduced ASC, category ASC, sort_order ASC"
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    return [dict(r) for r in rows]


def catalog_entry_exists(supplement_id: str) -> bool:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT 1 FROM journey_supplements WHERE id = ?", (supplement_id,)).fetchone()
    return row is not None
