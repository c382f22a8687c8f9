"""Workout description texts referenced by the day templates."""

from __future__ import annotations

from triplan.models.enums import TrainingPhase

SWIM_TECHNIQUE = """\
Warm-up: 300m easy swim
Drill Set: 4 x 50m (catch-up drill, fingertip drag)
Main Set: 6 x 75m build (easy-moderate-fast by 25m)
Cool-down: 200m easy

Focus: Technique refinement and stroke efficiency."""

SWIM_ENDURANCE = """\
Warm-up: 400m easy swim
Main Set: 8 x 100m at steady pace (15s rest)
Cool-down: 200m easy

Focus: Hold a consistent stroke rate and breathing pattern through the main set."""

BIKE_ENDURANCE = """\
Warm-up: 15 min easy spinning
Main Set: 3 x 15 min at threshold (5 min easy recovery)
Cool-down: 15 min easy

Focus: Sustainable power at race effort. Stay in the aero position during intervals."""

RECOVERY_RUN = (
    "Easy-paced recovery run focusing on form and relaxation. "
    "Keep heart rate in Zone 1-2."
)

LONG_RIDE = """\
Duration: 2-3 hours at aerobic pace (Zone 2)
Include: 3 x 10 min at race pace every hour
Nutrition: Practice race-day fueling every 20-30 minutes

Focus: Endurance and testing nutrition/hydration strategy."""

BRICK = """\
Bike: 60 min at race pace (last 10 min build to slightly above race effort)
Transition: Practice the T2 setup, under 2 minutes
Run: 20 min off the bike at target race pace

Focus: Race-day transitions and running efficiently off the bike."""

RUN_BY_PHASE: dict[TrainingPhase, str] = {
    TrainingPhase.BASE: """\
Warm-up: 15 min easy
Main Set: 4 x 5 min at tempo pace (2 min easy recovery)
Cool-down: 10 min easy

Focus: Aerobic base and tempo endurance.""",
    TrainingPhase.BUILD: """\
Warm-up: 20 min easy with 4 x 100m strides
Main Set: 6 x 800m at 5K pace (90s walking recovery)
Cool-down: 15 min easy

Focus: Speed development and lactate threshold.""",
    TrainingPhase.TAPER: """\
Warm-up: 15 min easy
Main Set: 4 x 200m at race pace (full recovery)
Cool-down: 10 min easy

Focus: Keep speed sharp on reduced volume.""",
    TrainingPhase.RECOVERY: """\
Easy continuous run at conversational pace.

Focus: Active recovery and movement quality.""",
}
RUN_BY_PHASE[TrainingPhase.PEAK] = RUN_BY_PHASE[TrainingPhase.BUILD]
