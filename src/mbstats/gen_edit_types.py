#!/usr/bin/env python3
"""
gen_edit_types.py -- regenerate mbstats/edit_types.py

Reads:
  - lib/MusicBrainz/Server/Constants.pm from musicbrainz-server (or a local copy via --in)
Writes:
  - src/mbstats/edit_types.py
"""

import argparse
import logging
import re
from pathlib import Path
from typing import Dict

import requests

from . import config

logger = logging.getLogger(__name__)

EDIT_CONSTANT_RE = re.compile(r"^\s*Readonly\s+our\s+\$EDIT_([A-Z0-9_]+)\s*=>\s*([0-9]+)\s*;", re.MULTILINE)
DEFAULT_OUT_PATH = Path(__file__).resolve().parent / "edit_types.py"

MODULE_HEADER = '''\
# Code generated by gen_edit_types.py from musicbrainz-server's Constants.pm. DO NOT EDIT.

"""Names of MusicBrainz edit types."""

from typing import Dict


class UnknownEditTypeError(LookupError):
    """The supplied edit type name does not match any known type."""


EDIT_TYPES: Dict[int, str] = {
'''

MODULE_FOOTER = '''\
}

_NAMED_EDIT_TYPES = {name: code for code, name in EDIT_TYPES.items()}


def edit_type_name(code: int) -> str:
    """Return the name for code, or a synthetic UNKNOWN_<code> label."""
    name = EDIT_TYPES.get(code)
    if name is None:
        return f"UNKNOWN_{code}"
    return name


def named_edit_type(name: str) -> int:
    """Return the code for name (e.g. 'ARTIST_CREATE'), ignoring case."""
    code = _NAMED_EDIT_TYPES.get(name.strip().upper())
    if code is None:
        raise UnknownEditTypeError(f"unknown edit type {name!r}")
    return code
'''


def parse_constants(text: str) -> Dict[int, str]:
    """Return {code: NAME} for every $EDIT_* constant in a Constants.pm source."""
    types: Dict[int, str] = {}
    for name, code in EDIT_CONSTANT_RE.findall(text):
        code = int(code)
        if code in types:
            logger.warning("[!] Edit type %s reuses code %d (already %s); keeping the first", name, code, types[code])
            continue
        types[code] = name
    return types


def render_module(types: Dict[int, str]) -> str:
    lines = [MODULE_HEADER]
    for code in sorted(types):
        lines.append(f'    {code}: "{types[code]}",\n')
    lines.append(MODULE_FOOTER)
    return "".join(lines)


def fetch_constants(url: str = config.CONSTANTS_URL) -> str:
    response = requests.get(url, headers=config.HEADERS, timeout=config.API_TIMEOUT)
    response.raise_for_status()
    return response.text


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ap = argparse.ArgumentParser(description="Regenerate the MusicBrainz edit type table.")
    ap.add_argument("--in", dest="input_path", default=None, help="Local Constants.pm instead of downloading it.")
    ap.add_argument("--out", dest="output_path", default=str(DEFAULT_OUT_PATH), help="Output module path.")
    args = ap.parse_args(argv)

    if args.input_path:
        with open(args.input_path, "r", encoding="utf-8") as fh:
            text = fh.read()
    else:
        logger.info("[*] Fetching %s", config.CONSTANTS_URL)
        try:
            text = fetch_constants()
        except requests.RequestException as exc:
            logger.error("[!] Failed fetching Constants.pm: %s", exc)
            return 1

    types = parse_constants(text)
    if not types:
        logger.error("[!] No edit types found in input")
        return 1

    with open(args.output_path, "w", encoding="utf-8") as fh:
        fh.write(render_module(types))
    logger.info("[+] Wrote %d edit types to %s", len(types), args.output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
