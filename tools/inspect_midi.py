#!/usr/bin/env python3
"""Summarize the header and tracks of Standard MIDI Files.

Examples
--------
    python tools/inspect_midi.py song.mid
    python tools/inspect_midi.py "corpus/**/*.mid" --events -v
"""

from __future__ import annotations

import argparse
import glob
import logging
import sys
from pathlib import Path
from typing import Iterable, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from smf import Document, Meta, MetaKind, Midi, ParseError, Sysex, parse  # noqa: E402

CHANNEL_MESSAGE_NAMES = {
    0x80: "note_off",
    0x90: "note_on",
    0xA0: "poly_pressure",
    0xB0: "control_change",
    0xC0: "program_change",
    0xD0: "channel_pressure",
    0xE0: "pitch_bend",
}


def collect_paths(patterns: Iterable[str]) -> List[Path]:
    paths: List[Path] = []
    for pattern in patterns:
        matches = sorted(Path(p) for p in glob.glob(pattern, recursive=True))
        if matches:
            paths.extend(matches)
        else:
            # Treat literal path when glob finds nothing.
            candidate = Path(pattern)
            if candidate.exists():
                paths.append(candidate)
    seen: set[Path] = set()
    unique_paths: List[Path] = []
    for path in paths:
        resolved = path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique_paths.append(path)
    return unique_paths


def fmt_division(doc: Document) -> str:
    header = doc.header
    if header.uses_smpte:
        return f"{header.smpte_frames}fps/{header.ticks_per_frame}"
    return f"{header.ticks_per_quarter}tpq"


def describe_event(event) -> str:
    if isinstance(event, Midi):
        msg = event.event
        name = CHANNEL_MESSAGE_NAMES[msg.message_type]
        return f"{name:<16} ch={msg.channel:<2} data={bytes(msg.data).hex(' ')}"
    if isinstance(event, Meta):
        meta = event.event
        try:
            name = MetaKind(meta.kind).name.lower()
        except ValueError:
            name = f"meta_0x{meta.kind:02X}"
        return f"{name:<16} len={len(meta.data):<3} data={bytes(meta.data).hex(' ')}"
    if isinstance(event, Sysex):
        sysex = event.event
        intro = "F0" if sysex.start else "F7"
        return (
            f"sysex_{intro:<10} len={len(sysex.data):<3} end={sysex.end} "
            f"data={bytes(sysex.data).hex(' ')}"
        )
    raise TypeError(f"unexpected event {event!r}")


def print_events(doc: Document) -> None:
    for index, track in enumerate(doc.tracks):
        print(f"  track {index}: {len(track.events)} events")
        for event in track.events:
            print(f"    +{event.delta:<8} {describe_event(event)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show header fields and track contents of Standard MIDI Files."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="File paths or glob patterns (quotes recommended for wildcards).",
    )
    parser.add_argument(
        "--events", action="store_true", help="List every event of every track."
    )
    parser.add_argument(
        "--strict-tags",
        action="store_true",
        help="Reject chunk tags that are not printable ASCII.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log skipped chunks."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    targets = collect_paths(args.paths)
    if not targets:
        parser.error("No files matched the provided paths/patterns.")

    rows = []
    parsed = []
    failures = 0
    for path in targets:
        try:
            doc = parse(path.read_bytes(), strict_tags=args.strict_tags)
        except ParseError as err:
            failures += 1
            rows.append([str(path), "ERR", str(err), "", "", ""])
            continue

        parsed.append((path, doc))
        rows.append(
            [
                str(path),
                str(doc.header.format),
                str(doc.header.track_count),
                str(len(doc.tracks)),
                fmt_division(doc),
                str(sum(len(track.events) for track in doc.tracks)),
            ]
        )

    header = ["File", "Format", "Declared", "Tracks", "Division", "Events"]

    widths = [
        max(len(row[i]) for row in ([header] + rows))
        for i in range(len(header))
    ]

    def fmt_row(row: list[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row))

    print(fmt_row(header))
    print("  ".join("-" * w for w in widths))
    for row in rows:
        print(fmt_row(row))

    if args.events:
        for path, doc in parsed:
            print()
            print(f"{path}:")
            print_events(doc)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
