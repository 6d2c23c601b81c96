"""Shared constants for the city pop generator.

Values fall into four groups:

- MIDI note and velocity ranges
- The fixed progression grid (length, root note, step and note timing)
- Register bounds used by the spreader
- Recognised era and style names
"""

# MIDI standard ranges
MIN_PITCH = 0
MAX_PITCH = 127
MAX_VELOCITY = 127

# Progression grid
PROGRESSION_LENGTH = 8
BASE_ROOT = 60					# Middle C
STEP_SECONDS = 2.0				# Chords land on a fixed 2 second grid, independent of tempo
NOTE_DURATION = 1.95
NOTE_DURATION_JITTER = 0.05
NOTE_START_JITTER = 0.005

# Register bounds for the final clamp pass
REGISTER_LOW = 36
REGISTER_HIGH = 84

OCTAVE = 12

# Eras
ERA_70S = "70s"
ERA_EARLY_80S = "early80s"
ERA_MID_80S = "mid80s"
ERA_LATE_80S = "late80s"

ERAS = (ERA_70S, ERA_EARLY_80S, ERA_MID_80S, ERA_LATE_80S)

# Styles
STYLE_BALLAD = "ballad"
STYLE_UPTEMPO = "uptempo"
STYLE_FUSION = "fusion"

STYLES = (STYLE_BALLAD, STYLE_UPTEMPO, STYLE_FUSION)
DEFAULT_STYLE = STYLE_UPTEMPO

# Artist influences with a dedicated transformation
TATSURO_YAMASHITA = "Tatsuro Yamashita"
MARIYA_TAKEUCHI = "Mariya Takeuchi"
TOSHIKI_KADOMATSU = "Toshiki Kadomatsu"
