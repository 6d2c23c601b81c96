"""
citypop - procedural city pop chord progressions as standard MIDI files.

Each call builds an eight-chord progression in the harmonic idiom of late 70s
and 80s Japanese city pop: lush major sevenths and ninths, minor elevenths,
altered dominants and a deep bass note, spread across a warm piano register
and voice-led from chord to chord.

What shapes a progression:

- **Progression templates.** Root movements tagged by style (ballad,
  uptempo, fusion), each with its own complexity.
- **Tension arc.** A per-step density curve that peaks at the golden section
  of the progression and relaxes toward the end.
- **Voicing catalog.** Named voicing shapes with tensions, alterations and
  optional era and artist tags.
- **Era and artist colour.** 70s voicings sit compact, mid-80s voicings
  open out; Tatsuro Yamashita, Mariya Takeuchi and Toshiki Kadomatsu
  influences each add their own signature notes.
- **Humanisation.** Swing, per-note timing and duration jitter, and
  style-dependent velocity.

Deterministic seeding (``random.Random(42)``) makes every decision
repeatable and produces byte-identical MIDI output.

Minimal example:

    ```python
    import random

    import citypop

    options = citypop.GenerationOptions(era="mid80s", artist_influence="Tatsuro Yamashita")

    with citypop.generate_and_download(options, rng=random.Random(42)) as download:
        download.save("out")
    ```

Or from the command line::

    python -m citypop --era 70s --style ballad --seed 7 --output out

Package-level exports: ``CityPopGenerator``, ``GenerationOptions``,
``GenerationError``, ``MidiDownload``, ``generate``, ``generate_and_download``.
"""

import citypop.composition
import citypop.download
import citypop.options


CityPopGenerator = citypop.composition.CityPopGenerator
GenerationOptions = citypop.options.GenerationOptions
GenerationError = citypop.download.GenerationError
MidiDownload = citypop.download.MidiDownload
generate = citypop.download.generate
generate_and_download = citypop.download.generate_and_download
