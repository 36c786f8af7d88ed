"""Parse files written by mido and compare against the messages it wrote."""

from __future__ import annotations

import io
from pathlib import Path
import sys

import mido
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from smf import Meta, Midi, Sysex, decode_vlq, parse  # noqa: E402


def _to_bytes(mid: mido.MidiFile) -> bytes:
    buf = io.BytesIO()
    mid.save(file=buf)
    return buf.getvalue()


def _song() -> mido.MidiFile:
    mid = mido.MidiFile(type=1, ticks_per_beat=480)

    conductor = mido.MidiTrack()
    conductor.append(mido.MetaMessage("track_name", name="conductor", time=0))
    conductor.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(96), time=0))
    conductor.append(
        mido.MetaMessage("time_signature", numerator=3, denominator=4, time=0)
    )
    conductor.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(120), time=1440))
    conductor.append(mido.MetaMessage("end_of_track", time=0))
    mid.tracks.append(conductor)

    lead = mido.MidiTrack()
    lead.append(mido.Message("program_change", channel=2, program=33, time=0))
    lead.append(mido.Message("control_change", channel=2, control=7, value=100, time=0))
    lead.append(mido.Message("sysex", data=[0x7E, 0x7F, 0x09, 0x01], time=0))
    for i, pitch in enumerate((60, 64, 67, 72)):
        lead.append(mido.Message("note_on", channel=2, note=pitch, velocity=90, time=0 if i == 0 else 120))
        lead.append(mido.Message("note_on", channel=2, note=pitch, velocity=0, time=240))
    lead.append(mido.Message("pitchwheel", channel=2, pitch=-2048, time=10))
    lead.append(mido.Message("aftertouch", channel=2, value=64, time=10))
    lead.append(mido.Message("polytouch", channel=2, note=72, value=30, time=10))
    lead.append(mido.Message("note_off", channel=2, note=72, velocity=0, time=20000))
    lead.append(mido.MetaMessage("end_of_track", time=0))
    mid.tracks.append(lead)
    return mid


def _assert_matches(track: mido.MidiTrack, events) -> None:
    assert len(events) == len(track)
    for msg, event in zip(track, events):
        assert event.delta == msg.time
        raw = bytes(msg.bytes())
        if msg.is_meta:
            assert isinstance(event, Meta)
            assert event.event.kind == raw[1]
            _, consumed = decode_vlq(raw, 2)
            assert event.event.data == raw[2 + consumed :]
        elif msg.type == "sysex":
            assert isinstance(event, Sysex)
            assert event.event.start and event.event.end
            assert event.event.data == bytes(msg.data) + b"\xF7"
        else:
            assert isinstance(event, Midi)
            assert bytes([event.event.status]) + bytes(event.event.data) == raw


def test_header_matches_mido() -> None:
    mid = _song()
    doc = parse(_to_bytes(mid))
    assert doc.header.format == 1
    assert doc.header.track_count == 2
    assert doc.header.ticks_per_quarter == 480


@pytest.mark.parametrize("track_index", [0, 1])
def test_events_match_mido(track_index: int) -> None:
    mid = _song()
    doc = parse(_to_bytes(mid))
    _assert_matches(mid.tracks[track_index], doc.tracks[track_index].events)


def test_mido_running_status_output() -> None:
    mid = mido.MidiFile(type=0, ticks_per_beat=480)
    track = mido.MidiTrack()
    track.append(mido.Message("note_on", note=60, velocity=100, time=0))
    track.append(mido.Message("note_on", note=60, velocity=0, time=240))
    mid.tracks.append(track)
    data = _to_bytes(mid)

    # mido omits the repeated status byte.
    assert data.count(b"\x90") == 1

    events = parse(data).tracks[0].events
    assert [e.event.status for e in events if isinstance(e, Midi)] == [0x90, 0x90]
    assert events[1].event.data == b"\x3C\x00"
    assert isinstance(events[-1], Meta) and events[-1].event.kind == 0x2F


def test_mido_reads_same_file() -> None:
    data = _to_bytes(_song())
    reread = mido.MidiFile(file=io.BytesIO(data))
    doc = parse(data)
    for mido_track, track in zip(reread.tracks, doc.tracks):
        _assert_matches(mido_track, track.events)
