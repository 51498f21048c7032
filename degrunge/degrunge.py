#!/usr/bin/env python3

import logging
import os
import re
import click
from tqdm import tqdm

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s: %(message)s'
)
logger = logging.getLogger('degrunge')
logger.setLevel(logging.WARNING)  # Default to warnings only

# ========== CONFIGURATION ==========
INPUT_FILE = "Logo_optimized.svg"
OUTPUT_FILE = "Logo_clean.svg"
GRUNGE_FILL = "#EFECE1"
CANVAS_SIZE = 1024
TEXTURE_MIN_LENGTH = 2000   # segments longer than this are the texture
SHORT_SEGMENT_LENGTH = 1000  # segments shorter than this are always kept
NOISE_MAX_LENGTH = 100
NOISE_OPACITIES = ('opacity="0.1"', 'opacity="0.2"')
# ====================================

PATH_TAG = "<path"
RECT = f'<rect fill="{GRUNGE_FILL}" width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" />'
GRUNGE_PATTERN = re.compile(
    r'<path fill="' + re.escape(GRUNGE_FILL) + r'"[^>]+d="[^"]+"[^>]*>'
)

TEXTURE, KEEP, AMBIGUOUS, NOISE = 'texture', 'keep', 'ambiguous', 'noise'
STRATEGIES = ('regex', 'segments')


def read_svg(path):
    # no newline translation: unmatched input is written back byte-identical
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_svg(path, content):
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    return os.path.getsize(path)


def strip_with_regex(content):
    """Replace the first grunge path element with a plain rectangle.

    Returns the new text and the number of replacements (0 or 1).
    """
    return GRUNGE_PATTERN.subn(RECT, content, count=1)


def split_segments(content):
    """Split the document on every `<path`. The first segment is the preamble."""
    return content.split(PATH_TAG)


def classify_segment(segment, drop_noise=False):
    """
    Decide what to do with a single segment (text following a `<path`).

    Returns one of:
        'texture'   - long and carries the grunge fill, replace with the rectangle
        'noise'     - tiny low-opacity path, dropped when drop_noise is set
        'keep'      - short, or without the grunge fill
        'ambiguous' - carries the fill but is neither short nor long enough
    """
    has_fill = GRUNGE_FILL.lower() in segment.lower()
    length = len(segment)

    if has_fill and length > TEXTURE_MIN_LENGTH:
        return TEXTURE
    if drop_noise and length < NOISE_MAX_LENGTH and any(o in segment for o in NOISE_OPACITIES):
        return NOISE
    if length < SHORT_SEGMENT_LENGTH or not has_fill:
        return KEEP
    return AMBIGUOUS


def strip_with_segments(content, drop_noise=False, progress=False):
    """
    Filter path segments by length and fill color.

    Ambiguous segments (grunge fill, between the short and texture thresholds)
    are kept unchanged and reported with a warning instead of being dropped.

    Returns the new text, the number of removed paths and the number of
    flagged ambiguous paths.
    """
    segments = split_segments(content)
    logger.info(f"Total path elements found: {len(segments) - 1}")

    kept = [segments[0]]
    removed = 0
    flagged = 0
    for index, segment in enumerate(tqdm(segments[1:], desc="Scanning paths",
                                         unit="path", disable=not progress), start=1):
        verdict = classify_segment(segment, drop_noise)
        if verdict == TEXTURE:
            logger.info(f"Replacing texture path #{index} ({len(segment)} chars) with rect")
            kept.append(' ' + RECT)
            removed += 1
        elif verdict == NOISE:
            logger.info(f"Dropping noise path #{index} ({len(segment)} chars)")
            removed += 1
        else:
            if verdict == AMBIGUOUS:
                logger.warning(
                    f"Path #{index} has fill {GRUNGE_FILL} but only {len(segment)} chars "
                    f"(texture needs more than {TEXTURE_MIN_LENGTH}); keeping it unchanged"
                )
                flagged += 1
            kept.append(PATH_TAG + segment)

    logger.info(f"Removed {removed} path(s), flagged {flagged}")
    return ''.join(kept), removed, flagged


def clean_file(source, destination, strategy='regex', drop_noise=False, progress=False):
    """Strip the grunge texture from source and write the result to destination.

    Returns (original_size, clean_size) in bytes, both measured on disk.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy}")

    content = read_svg(source)
    original_size = os.path.getsize(source)
    logger.info(f"Loaded {source} ({original_size} bytes)")

    if strategy == 'regex':
        if drop_noise:
            logger.warning("--drop-noise only applies to the segments strategy, ignoring")
        cleaned, changed = strip_with_regex(content)
    else:
        cleaned, changed, _ = strip_with_segments(content, drop_noise, progress)

    if not changed:
        logger.info("No grunge texture found, output is unchanged")

    clean_size = write_svg(destination, cleaned)
    logger.info(f"Wrote {destination}")
    return original_size, clean_size


@click.command()
@click.option('--input', '-i', 'source', default=INPUT_FILE, show_default=True,
              type=click.Path(exists=True, dir_okay=False, readable=True),
              help="SVG file to clean")
@click.option('--output', '-o', 'destination', default=OUTPUT_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="Where to write the cleaned SVG (overwritten)")
@click.option('--strategy', '-s', type=click.Choice(STRATEGIES), default='regex', show_default=True,
              help="regex: replace the first matching path; segments: filter paths by length")
@click.option('--drop-noise', is_flag=True, help="Also drop tiny low-opacity paths (segments only)")
@click.option('--progress', '-p', is_flag=True, help="Show a progress bar while scanning paths")
@click.option('--verbose', '-v', is_flag=True, help="Enable verbose logging")
@click.option('--quiet', '-q', is_flag=True, help="Output only the clean size")
def degrunge(source, destination, strategy, drop_noise, progress, verbose, quiet):
    """Replace the grunge texture of an SVG logo with a plain rectangle."""
    if verbose:
        logger.setLevel(logging.INFO)

    original_size, clean_size = clean_file(source, destination, strategy, drop_noise, progress)

    if quiet:
        click.echo(clean_size)
    else:
        click.echo(f"Original size: {original_size}")
        click.echo(f"Clean size: {clean_size}")


if __name__ == "__main__":
    degrunge()
