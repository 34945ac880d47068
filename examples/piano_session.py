import logging

import samplenames
import samplenames.export
import samplenames.range_generator
import samplenames.round_robin
import samplenames.session

logging.basicConfig(level=logging.INFO)

# A full 88-key piano, sampled every minor third: leave out the other eight classes.
settings = samplenames.GeneratorSettings()

for note_class in ["C#", "D", "E", "F", "G", "G#", "A#", "B"]:
	settings = samplenames.session.toggle_note_class(settings, note_class)

result = samplenames.generate_range("A0-C8-Grand", settings)

print(samplenames.range_generator.describe_range(result))
print(samplenames.export.join_filenames(result.filenames))

# Same range an octave down, spelled with flats.
settings = samplenames.session.transpose_down(settings)
settings = samplenames.session.set_use_flats(settings, True)

print(f"Transpose {samplenames.session.format_transpose(settings.transpose)}")
print(samplenames.export.join_filenames(samplenames.generate_range("A0-C8-Grand", settings).filenames))

# Recorded takes come back with random IDs; renumber them as round robins.
takes = [
	"Grand-A0-K7Q.wav",
	"Grand-A0-B2X.wav",
	"Grand-C1-ZZ9.wav",
	"Grand-C1-A11.wav",
	"Grand-D#1-QQ4.wav",
]

names = samplenames.normalize_filenames(takes, add_midi_prefix=True)

print(samplenames.round_robin.describe_conversion(names))
print(samplenames.export.join_filenames(names))
