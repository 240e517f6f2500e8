"""Global constants for Scale Tuner."""

# Octave-0 frequencies in standard pitch (A4 = 440 Hz), C0 through B0
REFERENCE_FREQUENCIES = (
    16.352,  # C0
    17.324,  # C#0 / Db0
    18.354,  # D0
    19.445,  # D#0 / Eb0
    20.602,  # E0
    21.827,  # F0
    23.125,  # F#0 / Gb0
    24.5,  # G0
    25.957,  # G#0 / Ab0
    27.5,  # A0
    29.135,  # A#0 / Bb0
    30.868,  # B0
)

# Display spellings, sharp first
NOTE_NAMES = (
    ("C",),
    ("C♯", "D♭"),
    ("D",),
    ("D♯", "E♭"),
    ("E",),
    ("F",),
    ("F♯", "G♭"),
    ("G",),
    ("G♯", "A♭"),
    ("A",),
    ("A♯", "B♭"),
    ("B",),
)

CENTS_PER_OCTAVE = 1200.0

# Humans can distinguish pitch differences of roughly 5-6 cents
TOLERANCE_CENTS = 5.0
