"""Standard MIDI file encoding via mido.

Notes are timed in seconds. They are converted to ticks at the given tempo so
the rendered file plays them at the same wall-clock positions, and the tempo is
written as a ``set_tempo`` meta event at the start of the track.
"""

import io
import logging
import typing

import mido

import citypop.constants
import citypop.pattern


logger = logging.getLogger(__name__)


TICKS_PER_BEAT = 480


def velocity_to_midi (velocity: float) -> int:

	"""Convert a 0.0-1.0 velocity to a MIDI velocity of at least 1.

	Velocity 0 would turn a ``note_on`` into a note-off, so the floor is 1.
	"""

	return max(1, min(citypop.constants.MAX_VELOCITY, int(round(velocity * citypop.constants.MAX_VELOCITY))))


def _seconds_to_ticks (seconds: float, tempo: int) -> int:

	return max(0, int(round(mido.second2tick(seconds, TICKS_PER_BEAT, tempo))))


def encode (bpm: float, notes: typing.Iterable[citypop.pattern.Note], track_name: typing.Optional[str] = None) -> bytes:

	"""Encode notes into a single-track Type 1 MIDI file.

	Overlapping notes of the same pitch each get a ``note_on`` but share one
	``note_off``, written when the last of them ends.

	Parameters:
		bpm: Tempo written to the file header.
		notes: Notes timed in seconds. Pitches must already be in 0-127.
		track_name: Optional name stored as a ``track_name`` meta event.

	Returns:
		The MIDI file as bytes.
	"""

	if bpm <= 0:
		raise ValueError("Tempo must be positive")

	tempo = mido.bpm2tempo(bpm)

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT
	track = mido.MidiTrack()
	mid.tracks.append(track)

	if track_name:
		track.append(mido.MetaMessage("track_name", name=track_name, time=0))

	track.append(mido.MetaMessage("set_tempo", tempo=tempo, time=0))

	# (tick, order, message) - note_off sorts ahead of note_on at the same tick
	# so a repeated pitch is released before it is struck again.
	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for note in notes:

		if not citypop.constants.MIN_PITCH <= note.pitch <= citypop.constants.MAX_PITCH:
			raise ValueError(f"Pitch out of MIDI range: {note.pitch}")

		on_tick = _seconds_to_ticks(note.start, tempo)
		off_tick = max(on_tick + 1, _seconds_to_ticks(note.start + note.duration, tempo))
		velocity = velocity_to_midi(note.velocity)

		events.append((on_tick, 1, mido.Message("note_on", note=note.pitch, velocity=velocity)))
		events.append((off_tick, 0, mido.Message("note_off", note=note.pitch, velocity=0)))

	events.sort(key=lambda event: (event[0], event[1]))

	# Strikes still sounding per pitch. A note_off is only written once the
	# last overlapping strike of its pitch ends, so an earlier note never cuts
	# a newer one short.
	sounding: typing.Dict[int, int] = {}
	last_tick = 0

	for tick, _, message in events:

		if message.type == "note_on":
			sounding[message.note] = sounding.get(message.note, 0) + 1

		else:
			sounding[message.note] -= 1

			if sounding[message.note] > 0:
				continue

		message.time = tick - last_tick
		track.append(message)
		last_tick = tick

	buffer = io.BytesIO()
	mid.save(file=buffer)

	logger.debug(f"Encoded {len(events) // 2} notes at {bpm:.2f} BPM ({buffer.tell()} bytes)")

	return buffer.getvalue()
