# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import re
import asyncio
import logging
import discord

from ._constants import PREFIX, CHUNK_SIZE, LONG_REPLY_THRESHOLD
from ._data import random_choice
from ._gpt import ask_ai
from ._regions import find_region
from ._weather import fetch_forecasts, build_weather_embed, WeatherUnavailable

logger = logging.getLogger(__name__)

HELP_TEXT = f"""🧪 **Kingdom of Science commands**
`{PREFIX}ping` — check that the bot is alive
`{PREFIX}weather <city>` — BMKG forecast for a city, e.g. `{PREFIX}weather Jakarta`
`{PREFIX}askai <prompt>` — ask the AI a question
`{PREFIX}fact` — a random science fact
`{PREFIX}drstone` — a Dr. Stone quote
`{PREFIX}help` — this message"""


def parse_command(content, prefix=PREFIX):
    """Split `!cmd arg1 arg2` into ("cmd", ["arg1", "arg2"]), or None if not a command."""
    if not content.startswith(prefix):
        return None

    parts = re.split(r"\s+", content.strip()[len(prefix) :])
    parts = [p for p in parts if p != ""]
    if len(parts) == 0:
        return ("", [])
    return (parts[0].lower(), parts[1:])


def split_message(text, size=CHUNK_SIZE):
    return [text[i : i + size] for i in range(0, len(text), size)]


async def handle_message(message, quotes, facts, regions):
    if message.author.bot:
        return

    parsed = parse_command(message.content)
    if parsed is None:
        return

    cmd, args = parsed
    logger.info("%s: %s %s", message.author, cmd, " ".join(args))

    if cmd == "ping":
        await message.reply("🏓 Pong! Kingdom of Science is online!")
    elif cmd == "weather":
        await _weather(message, args, regions)
    elif cmd == "askai":
        await _askai(message, args)
    elif cmd == "fact":
        fact = random_choice(facts)
        if fact is None:
            await message.reply("⚙️ No facts available yet.")
        else:
            await message.channel.send(f"📘 **Science Fact:** {fact}")
    elif cmd == "drstone":
        quote = random_choice(quotes)
        if quote is None:
            await message.reply("⚙️ No quotes available yet.")
        else:
            await message.channel.send(f"🎌 {quote}")
    elif cmd == "help":
        await message.reply(HELP_TEXT)
    else:
        await message.reply(f"⚙️ Unknown command. Try `{PREFIX}help`.")


async def _weather(message, args, regions):
    if len(args) == 0:
        await message.reply(
            f"🌦 Please provide a city name, e.g. `{PREFIX}weather Jakarta`"
        )
        return

    city = " ".join(args)
    region = find_region(city, regions)
    if region is None:
        await message.reply(f'❌ Sorry, I can\'t find "{city}" in my region database.')
        return

    try:
        forecasts = await asyncio.to_thread(fetch_forecasts, region.kode)
    except WeatherUnavailable as e:
        logger.error("Weather fetch error for %s: %s", region.kode, e)
        await message.reply("⚠️ Failed to fetch weather data from BMKG.")
        return

    if len(forecasts) == 0:
        await message.reply(f"⚠️ No weather data found for {city}.")
        return

    await message.channel.send(embed=build_weather_embed(region, forecasts))


async def _askai(message, args):
    if len(args) == 0:
        await message.reply(
            f"💬 Please ask me something, e.g. `{PREFIX}askai Why does Jakarta flood often?`"
        )
        return

    prompt = " ".join(args)
    await message.channel.send("🤖 Thinking with science...")
    reply = await asyncio.to_thread(ask_ai, prompt)
    logger.debug("AI reply: %s", reply)

    if len(reply) > LONG_REPLY_THRESHOLD:
        for chunk in split_message(f"💬 **AI (truncated to fit Discord limits):** {reply}"):
            await message.channel.send(chunk)
    else:
        await message.channel.send(f"💬 **AI:** {reply}")


def create_client(quotes, facts, regions):
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True

    # User text and AI output are echoed back; never let them ping anyone
    client = discord.Client(intents=intents, allowed_mentions=discord.AllowedMentions.none())

    @client.event
    async def on_ready():
        logger.info("🤖 Kingdom of Science logged in as %s", client.user)
        logger.info(
            "Loaded %d quotes, %d facts, %d regions", len(quotes), len(facts), len(regions)
        )

    @client.event
    async def on_message(message):
        await handle_message(message, quotes, facts, regions)

    return client
