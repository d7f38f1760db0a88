"""
Songmap - level choreography for a rhythm bullet-hell game, written in Python.

A level is a list of timed commands (bullets, lasers, bombs, group
rotations, fades) that the game plays back in sync with the music.  Instead
of writing that list by hand, Songmap builds it from two ingredients:

- **Marked beats** - moments in the song, each with a beat time and a
  progress value (``percent``).  Split a range evenly with
  ``marked_beat.generate()`` (or the ``every4()``/``every2()``/``every1()``
  presets), or import the notes of a MIDI clip with
  ``midi_import.import_notes()``, which also carries pitch.
- **Spawners** - small parameterised objects that turn one marked beat into
  one or more commands: sweeping bullet lines, rotating laser diamonds,
  pitch-lane attacks, multi-arm barrages timed to a chord.

A :class:`Session` compiles beats through a spawner into the songmap and
keeps track of the current enemy group, so later fades, rotations and clears
can act on everything spawned into it.

Minimal example:

    ```python
    import songmap
    import songmap.constants as pos
    import songmap.marked_beat
    import songmap.spawners

    def build (session):

        session.make_actions(
            songmap.marked_beat.every4(16.0),
            songmap.spawners.BulletLerp(pos.BOTLEFT, pos.ORIGIN, pos.BOTRIGHT, pos.ORIGIN)
        )

        songmap.fadeout_clear(session, 32.0, group=0, fade_duration=1.0)
    ```

Save that as ``level.py`` and run ``python -m songmap level.py`` to write
``songmap.json``.

Package-level exports: ``Session``, ``Songmap``, ``MarkedBeat``, ``One``,
``Many``, ``fadeout_clear``.
"""

import songmap.compiler
import songmap.macros
import songmap.marked_beat
import songmap.spawners


Session = songmap.compiler.Session
Songmap = songmap.compiler.Songmap
MarkedBeat = songmap.marked_beat.MarkedBeat
One = songmap.spawners.One
Many = songmap.spawners.Many
fadeout_clear = songmap.macros.fadeout_clear
