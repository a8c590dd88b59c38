#!/usr/bin/env python3
"""
Example: Spell chords and engrave them as SVG.

Usage:
    python examples/render_chords.py
    # Creates: examples/output/*.svg

The SVG files use SMuFL code points, so open them in a browser with the
Bravura font installed to see the clefs, accidentals and noteheads.
"""

from pathlib import Path

from chord_quiz import Clef, PitchOctave, Quality, build_chord

CHORDS = [
    ("C4", Quality.MAJ),
    ("F4", Quality.DIM),
    ("Bb3", Quality.DOM7),
    ("D#4", Quality.MAJ),
    ("G2", Quality.MIN7B5),
    ("E5", Quality.AUG),
]


def main() -> None:
    """Spell a handful of chords and write each one to an SVG file."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Chord Quiz Engraver")
    print("=" * 40)

    for root, quality in CHORDS:
        chord = build_chord(PitchOctave.parse(root), quality)
        if chord is None:
            print(f"  {root} {quality.value}: cannot be spelled")
            continue

        pitches = ", ".join(str(p) for p in chord.pitches)
        clef = chord.clef()
        print(f"  {chord.display_name():<8} {pitches}")
        print(f"           clef {clef.value}, positions {chord.staff_positions(clef)}")

        path = output_dir / f"{chord.display_name(plain=True)}.svg"
        path.write_text(chord.to_svg())
    print()

    # The same chord read in every clef
    print("F diminished in each clef:")
    chord = build_chord(PitchOctave.parse("F4"), Quality.DIM)
    for clef in Clef:
        primitives, viewport = chord.drawing_commands(clef)
        print(f"  {clef.value}: {len(primitives)} primitives, viewBox {viewport.view_box}")
    print()

    # Root ranges show where double accidentals start
    print("Roots without double accidentals:")
    for quality in Quality:
        low = quality.flattest_root(False)
        high = quality.sharpest_root(False)
        print(f"  {quality.value:<18} {low} .. {high}")
    print()

    print(f"SVG files written to {output_dir}")


if __name__ == "__main__":
    main()
