# -*- coding: utf-8 -*-
"""Built-in MB-EAT (mindfulness-based eating awareness) exercises."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso

log = logging.getLogger(__name__)

EXERCISES: List[Dict[str, Any]] = [
    {
        "id": "box-breathing",
        "name": "Box Breathing",
        "description": "A calming technique used by Navy SEALs. Breathe in a square pattern to reduce stress and cravings.",
        "category": "breathing",
        "duration": 5,
        "difficulty": "beginner",
        "instructions": (
            "1. Sit comfortably with your back straight\n"
            "2. Breathe in slowly through your nose for 4 seconds\n"
            "3. Hold your breath for 4 seconds\n"
            "4. Exhale slowly through your mouth for 4 seconds\n"
            "5. Hold your breath for 4 seconds\n"
            "6. Repeat the cycle 4-6 times\n"
            "7. Notice how your body feels calmer"
        ),
        "benefits": ["Reduces stress", "Calms nervous system", "Decreases food cravings", "Improves focus"],
        "best_for": "During cravings, before meals, when stressed",
    },
    {
        "id": "relaxation-breath-4-7-8",
        "name": "4-7-8 Relaxation Breath",
        "description": "Dr. Andrew Weil's breathing technique that activates the parasympathetic nervous system.",
        "category": "breathing",
        "duration": 3,
        "difficulty": "beginner",
        "instructions": (
            "1. Place the tip of your tongue behind your upper front teeth\n"
            "2. Exhale completely through your mouth, making a whoosh sound\n"
            "3. Close your mouth and inhale quietly through your nose for 4 counts\n"
            "4. Hold your breath for 7 counts\n"
            "5. Exhale completely through your mouth for 8 counts\n"
            "6. This is one breath cycle\n"
            "7. Repeat 3-4 times"
        ),
        "benefits": ["Promotes relaxation", "Reduces anxiety", "Helps with emotional eating urges", "Improves sleep"],
        "best_for": "Before bed, during emotional moments, when anxious",
    },
    {
        "id": "urge-surfing",
        "name": "Urge Surfing",
        "description": (
            "Learn to ride out food cravings like waves. Based on MB-EAT research showing this technique "
            "reduces binge eating by 70%."
        ),
        "category": "urge_surfing",
        "duration": 10,
        "difficulty": "intermediate",
        "instructions": (
            "1. When a craving hits, pause and acknowledge it\n"
            "2. Notice where you feel the craving in your body\n"
            "3. Describe the sensation: Is it tight? Warm? Pulsing?\n"
            "4. Imagine the craving as a wave in the ocean\n"
            "5. Watch the wave build - cravings peak at about 20-30 minutes\n"
            "6. Stay curious, not judgmental\n"
            "7. Breathe deeply and let the wave crest\n"
            "8. Notice as the intensity naturally decreases\n"
            "9. The wave will pass - cravings are temporary\n"
            "10. Congratulate yourself for riding it out"
        ),
        "benefits": [
            "Reduces binge eating episodes",
            "Builds craving tolerance",
            "Increases self-awareness",
            "Breaks automatic eating patterns",
        ],
        "best_for": "During intense food cravings, emotional eating urges",
    },
    {
        "id": "mindful-eating-practice",
        "name": "Mindful Eating Practice",
        "description": (
            "The core MB-EAT technique. Eat one meal or snack with full attention to transform your "
            "relationship with food."
        ),
        "category": "mindful_eating",
        "duration": 20,
        "difficulty": "beginner",
        "instructions": (
            "1. Choose a small portion of food (a piece of fruit or small snack)\n"
            "2. Before eating, take 3 deep breaths\n"
            "3. Look at the food - notice colors, textures, shapes\n"
            "4. Smell the food - what aromas do you notice?\n"
            "5. Take a small bite and place your utensil down\n"
            "6. Chew slowly - aim for 20-30 chews\n"
            "7. Notice the flavors, textures, temperature\n"
            "8. Swallow completely before the next bite\n"
            "9. Check in: How hungry are you now? (1-10 scale)\n"
            "10. Continue eating slowly, stopping when satisfied (not stuffed)\n"
            "11. Express gratitude for the nourishment"
        ),
        "benefits": [
            "Reduces overeating by 25%",
            "Increases meal satisfaction",
            "Improves digestion",
            "Builds food awareness",
        ],
        "best_for": "Every meal, especially when prone to overeating",
    },
    {
        "id": "hunger-fullness-check",
        "name": "Hunger-Fullness Check",
        "description": "A quick body scan to assess true hunger vs. emotional hunger before eating.",
        "category": "mindful_eating",
        "duration": 2,
        "difficulty": "beginner",
        "instructions": (
            "1. Pause before eating anything\n"
            "2. Place your hand on your stomach\n"
            '3. Ask yourself: "Am I physically hungry?"\n'
            "4. Rate your hunger from 1-10:\n"
            "   - 1-3: Very hungry (stomach growling, low energy)\n"
            "   - 4-6: Moderately hungry (could eat, but not urgent)\n"
            "   - 7-10: Not hungry (eating for other reasons)\n"
            '5. If 7-10, ask: "What am I really feeling?"\n'
            "6. Consider: Am I bored? Stressed? Sad? Tired?\n"
            "7. If not truly hungry, try a different activity first\n"
            "8. If truly hungry (1-6), eat mindfully"
        ),
        "benefits": [
            "Distinguishes physical from emotional hunger",
            "Prevents unnecessary eating",
            "Builds body awareness",
        ],
        "best_for": "Before every meal or snack",
    },
    {
        "id": "progressive-body-scan",
        "name": "Progressive Body Scan",
        "description": "A full-body relaxation technique that releases tension and reduces stress-related eating.",
        "category": "body_scan",
        "duration": 15,
        "difficulty": "beginner",
        "instructions": (
            "1. Lie down or sit comfortably\n"
            "2. Close your eyes and take 3 deep breaths\n"
            "3. Focus on your feet - notice any tension, then relax\n"
            "4. Move to your calves - tense for 5 seconds, then release\n"
            "5. Continue to thighs, hips, stomach\n"
            "6. Notice your stomach - is there tension? Hunger? Emotion?\n"
            "7. Move to chest, shoulders, arms, hands\n"
            "8. Relax your neck, jaw, face, forehead\n"
            "9. Scan your whole body - notice areas still holding tension\n"
            "10. Breathe into those areas and let go\n"
            "11. Rest in this relaxed state for 1-2 minutes\n"
            "12. Slowly open your eyes"
        ),
        "benefits": ["Reduces physical tension", "Decreases cortisol", "Interrupts stress eating", "Improves sleep"],
        "best_for": "Before bed, during high stress, after difficult emotions",
    },
    {
        "id": "five-minute-meditation",
        "name": "5-Minute Mindfulness Meditation",
        "description": "A quick meditation to center yourself and reduce emotional reactivity to food triggers.",
        "category": "meditation",
        "duration": 5,
        "difficulty": "beginner",
        "instructions": (
            "1. Sit comfortably with feet flat on floor\n"
            "2. Close your eyes or soften your gaze\n"
            "3. Take 3 deep breaths to settle in\n"
            "4. Focus on the sensation of breathing\n"
            "5. Notice the breath entering and leaving your nostrils\n"
            "6. When your mind wanders (it will), gently return to breath\n"
            "7. Don't judge yourself for wandering - just return\n"
            "8. Continue for 5 minutes\n"
            "9. Before opening eyes, set an intention for mindful eating\n"
            "10. Slowly open your eyes"
        ),
        "benefits": [
            "Reduces emotional reactivity",
            "Improves impulse control",
            "Decreases stress eating",
            "Builds awareness",
        ],
        "best_for": "Morning routine, before meals, during emotional moments",
    },
    {
        "id": "loving-kindness-body-acceptance",
        "name": "Loving-Kindness for Body Acceptance",
        "description": "A compassion meditation to heal negative body image and reduce shame-based eating.",
        "category": "meditation",
        "duration": 10,
        "difficulty": "intermediate",
        "instructions": (
            "1. Sit comfortably and close your eyes\n"
            "2. Place your hand over your heart\n"
            "3. Take 3 deep breaths\n"
            '4. Repeat silently: "May I be healthy"\n'
            '5. "May I be at peace with my body"\n'
            '6. "May I treat myself with kindness"\n'
            '7. "May I nourish myself with love"\n'
            "8. Picture yourself at your healthiest\n"
            "9. Send compassion to any body parts you struggle with\n"
            '10. Repeat: "My body deserves care and respect"\n'
            "11. Rest in this feeling of self-compassion\n"
            "12. Slowly open your eyes"
        ),
        "benefits": [
            "Reduces body shame",
            "Decreases emotional eating",
            "Improves self-compassion",
            "Supports sustainable weight loss",
        ],
        "best_for": "When feeling body shame, after overeating, morning routine",
    },
    {
        "id": "grounding-5-4-3-2-1",
        "name": "5-4-3-2-1 Grounding",
        "description": (
            "A sensory grounding technique to interrupt emotional eating urges by bringing you to the "
            "present moment."
        ),
        "category": "grounding",
        "duration": 3,
        "difficulty": "beginner",
        "instructions": (
            "1. When a craving or emotional eating urge hits, pause\n"
            "2. Name 5 things you can SEE (look around the room)\n"
            "3. Name 4 things you can TOUCH (feel textures around you)\n"
            "4. Name 3 things you can HEAR (listen carefully)\n"
            "5. Name 2 things you can SMELL (or imagine smells)\n"
            "6. Name 1 thing you can TASTE (notice your mouth)\n"
            "7. Take a deep breath\n"
            '8. Ask yourself: "What do I really need right now?"\n'
            "9. The craving may have passed or reduced\n"
            "10. Choose a mindful response"
        ),
        "benefits": [
            "Interrupts automatic eating",
            "Reduces anxiety",
            "Brings awareness to present",
            "Creates pause before eating",
        ],
        "best_for": "During cravings, anxiety, emotional moments",
    },
    {
        "id": "stop-technique",
        "name": "STOP Technique",
        "description": "A quick mindfulness tool from DBT to interrupt emotional eating before it starts.",
        "category": "grounding",
        "duration": 2,
        "difficulty": "beginner",
        "instructions": (
            "S - STOP what you're doing\n"
            "  Freeze. Don't reach for food yet.\n"
            "\n"
            "T - TAKE a step back\n"
            "  Remove yourself from the kitchen/food area if possible.\n"
            "  Take 3 deep breaths.\n"
            "\n"
            "O - OBSERVE\n"
            "  What am I feeling? (emotion)\n"
            "  What am I thinking? (thoughts)\n"
            "  What triggered this urge?\n"
            "  Am I physically hungry or emotionally hungry?\n"
            "\n"
            "P - PROCEED mindfully\n"
            "  If truly hungry: eat mindfully\n"
            "  If emotional: try a coping skill first\n"
            "  Options: call a friend, take a walk, journal, do breathing exercise"
        ),
        "benefits": [
            "Interrupts binge eating",
            "Creates decision point",
            "Increases awareness",
            "Builds impulse control",
        ],
        "best_for": "When about to emotionally eat, during binges, when triggered",
    },
]


def seed_exercises() -> int:
    """Insert missing built-in exercises; returns how many were added."""
    now = utc_now_iso()
    rows = [
        (
            e["id"],
            e["name"],
            e["description"],
            e["category"],
            e["duration"],
            e["difficulty"],
            e["instructions"],
            json.dumps(e["benefits"]),
            e["best_for"],
            sort_order,
            now,
        )
        for sort_order, e in enumerate(EXERCISES, 1)
    ]
    with db_conn(settings.app_db_path) as conn:
        before = conn.total_changes
        conn.executemany(
            """
            INSERT OR IGNORE INTO mindfulness_exercises (
                id, name, description, category, duration, difficulty,
                instructions, benefits_json, best_for, is_active, sort_order, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 1, ?, ?)
            """,
            rows,
        )
        added = conn.total_changes - before
    if added:
        log.info("seeded %d mindfulness exercises", added)
    return added
