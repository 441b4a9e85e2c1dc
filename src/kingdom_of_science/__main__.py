# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import os
import sys
import asyncio
import logging
import discord

from ._constants import DATA_DIR, LOG_LEVEL
from ._data import ensure_data_files, load_quotes, load_facts
from ._regions import load_regions
from ._bot import create_client, handle_message
from ._weather import describe_embed

logger = logging.getLogger(__name__)


class _ConsoleAuthor:
    bot = False

    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name


class _ConsoleChannel:
    async def send(self, content=None, embed=None):
        if content is not None:
            print(f"\n{content}\n")
        if embed is not None:
            print(f"\n{describe_embed(embed)}\n")


class _ConsoleMessage:
    """Just enough of discord.Message for handle_message."""

    def __init__(self, author, content):
        self.author = author
        self.content = content
        self.channel = _ConsoleChannel()

    async def reply(self, content=None, embed=None):
        await self.channel.send(content=content, embed=embed)


def run_console(quotes, facts, regions):
    author = _ConsoleAuthor(os.environ.get("USER", "console"))
    while True:
        request = input(f"{author}: ").strip()
        if len(request) == 0:
            continue
        if request == "quit" or request == "exit":
            break
        asyncio.run(handle_message(_ConsoleMessage(author, request), quotes, facts, regions))


def _log_level(name):
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logger.warning("Unknown LOG_LEVEL %r, using INFO", name)
        return logging.INFO
    return level


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    discord.utils.setup_logging(level=_log_level(LOG_LEVEL))

    ensure_data_files(DATA_DIR)
    quotes = load_quotes(DATA_DIR)
    facts = load_facts(DATA_DIR)
    regions = load_regions()

    if len(argv) > 0 and argv[0] == "console":
        run_console(quotes, facts, regions)
        return

    token = os.environ.get("DISCORD_TOKEN")
    if not token:
        sys.exit("DISCORD_TOKEN is not set. Add it to the environment or a .env file.")

    client = create_client(quotes, facts, regions)
    client.run(token, log_handler=None)


if __name__ == "__main__":
    main()
