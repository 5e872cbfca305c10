"""Command-line front end.

Usage:
    python -m tweet_md tweet.json [more.json | fixtures_dir ...]
    python -m tweet_md --listing examples/
    python -m tweet_md --readme README.md examples/
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
import json
import logging
import os
from pathlib import Path
import sys

from pydantic import ValidationError

from tweet_md.config import RenderConfig, Tweet
from tweet_md.renderer import render
from tweet_md.settings import Settings

LOGGER = logging.getLogger(__name__)

# Everything after this marker in the README is generated
README_SPLITTER = '<!-- CUT -->'


def iter_tweet_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into their JSON files, sorted by name."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob('*.json')))
        else:
            files.append(path)
    return files


def load_tweet(path: Path) -> Tweet:
    with path.open(encoding='utf-8') as f:
        return json.load(f)


def listing_row(path: Path, tweet: Tweet, config: RenderConfig, relative_to: Path) -> str:
    """README row: file link, link to the tweet on the site, rendered tweet."""
    relative_path = Path(os.path.relpath(path, relative_to)).as_posix()
    screen_name = (tweet.get('user') or {}).get('screen_name', '')
    status_url = f'{config.base_url}/{screen_name}/status/{tweet.get("id_str", "")}'
    return f'[{path.name}]({relative_path}) [#]({status_url}) |\n{render(tweet, config)} |\n'


def update_readme(readme: Path, listing: str) -> None:
    """Replace the generated part of the README with `listing`."""
    heading = readme.read_text(encoding='utf-8').split(README_SPLITTER)[0]
    readme.write_text(f'{heading}{README_SPLITTER}\n\n{listing}\n', encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tweet-md', description='Render tweet JSON files as Markdown.'
    )
    parser.add_argument(
        'paths', nargs='+', type=Path, help='Tweet JSON files or directories of them'
    )
    parser.add_argument(
        '--listing', action='store_true', help='Print README listing rows instead of plain output'
    )
    parser.add_argument(
        '--readme', type=Path, help=f'Rewrite the listing after {README_SPLITTER} in this file'
    )
    parser.add_argument('--base-url', help='Override the site root used for links')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f'Invalid settings: {e}', file=sys.stderr)
        return 2

    logging.basicConfig(level=getattr(logging, settings.logging_level), stream=sys.stderr)

    if args.base_url:
        settings = settings.model_copy(update={'base_url': args.base_url.rstrip('/')})
    config = settings.render_config()

    relative_to = args.readme.resolve().parent if args.readme else Path.cwd()
    status = 0
    outputs: list[str] = []

    for path in iter_tweet_files(args.paths):
        try:
            tweet = load_tweet(path)
        except (OSError, json.JSONDecodeError) as e:
            LOGGER.error('Failed to load %s: %s', path, e)
            status = 1
            continue

        LOGGER.debug('Rendering %s', path)
        if args.listing or args.readme:
            outputs.append(listing_row(path.resolve(), tweet, config, relative_to))
        else:
            outputs.append(render(tweet, config))

    if args.readme:
        try:
            update_readme(args.readme, '\n'.join(outputs))
        except OSError as e:
            LOGGER.error('Failed to update %s: %s', args.readme, e)
            return 1
        LOGGER.info('Updated %s with %d tweets', args.readme, len(outputs))
    elif args.listing:
        print('\n'.join(outputs))
    else:
        print('\n\n'.join(outputs))

    return status
