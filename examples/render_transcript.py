"""
Render a JSONL transcript to the terminal.

Each line of the file is one raw transcript entry. Entries are normalized,
grouped by speaker and printed with their text, reasoning and tool cards.

Run with:
    python render_transcript.py session.jsonl [profile]

Render options come from chatshape.yaml in the working directory, if present.
"""

import json
import logging
import sys

from chatshape import (
    SerializationError,
    group_messages,
    normalize_messages,
    render_message,
)
from chatshape.config import load_render_options

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("chatshape").setLevel(
    logging.DEBUG if "-v" in sys.argv else logging.INFO
)
logger = logging.getLogger("chatshape.examples.render_transcript")


def read_entries(path: str) -> list[dict]:
    entries = []
    with open(path, "r") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError:
                logger.warning(f"Skipping unparseable line {line_no}")
    return entries


def main():
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    if not args:
        raise SystemExit("usage: render_transcript.py FILE [PROFILE] [-v]")

    entries = read_entries(args[0])
    options = load_render_options(args[1] if len(args) > 1 else "default")

    groups = group_messages(normalize_messages(entries))
    logger.info(f"{len(entries)} entries in {len(groups)} speaker groups")

    for entry in entries:
        try:
            rendered = render_message(entry, options=options)
        except SerializationError as e:
            logger.warning(f"Cannot render entry: {e} ({e.reason})")
            continue

        print(f"--- {rendered.label}")
        if rendered.reasoning_html:
            print(rendered.reasoning_html)
        if rendered.text_html:
            print(rendered.text_html)
        for view in rendered.tool_cards:
            state = "+" if view.expanded else "-"
            print(f"  [{state}] {view.card.kind} {view.card.name} ({view.identity})")


if __name__ == "__main__":
    main()
