# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import logging
import datetime
import requests
import discord
from typing import NamedTuple

from ._constants import BMKG_URL, BMKG_ICON_URL, HTTP_TIMEOUT, UPCOMING_FORECASTS

logger = logging.getLogger(__name__)

EMBED_COLOR = 0x00BFFF
DEFAULT_VISIBILITY = "> 10 km"


class WeatherUnavailable(Exception):
    """The BMKG forecast could not be fetched or understood."""


class Forecast(NamedTuple):
    local_datetime: datetime.datetime
    analysis_date: datetime.datetime | None
    weather_desc: str
    weather_desc_en: str
    t: float
    hu: float
    ws: float
    wd: str
    vs_text: str | None
    image: str


def fetch_forecasts(adm4):
    """Fetch the forecast slots for a BMKG adm4 code, oldest first.

    BMKG groups slots into one list per day under data[0].cuaca; the groups are
    flattened here. Raises WeatherUnavailable on any transport or payload problem.
    """
    try:
        response = requests.get(
            BMKG_URL, params={"adm4": adm4}, timeout=HTTP_TIMEOUT
        )
        response.raise_for_status()
        results = response.json()
        days = results["data"][0]["cuaca"]
    except requests.RequestException as e:
        raise WeatherUnavailable(f"BMKG request failed: {e}") from e
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise WeatherUnavailable(f"Unexpected BMKG payload: {e!r}") from e

    forecasts = []
    for slot in _flatten(days or []):
        forecast = _parse_forecast(slot)
        if forecast is not None:
            forecasts.append(forecast)

    forecasts.sort(key=lambda f: f.local_datetime)
    return forecasts


def _flatten(items):
    for item in items:
        if isinstance(item, list):
            yield from _flatten(item)
        else:
            yield item


def _parse_forecast(slot):
    try:
        analysis_date = None
        if slot.get("analysis_date"):
            analysis_date = datetime.datetime.fromisoformat(slot["analysis_date"])

        return Forecast(
            # Naive local time, so slots with and without an offset still sort
            local_datetime=datetime.datetime.fromisoformat(slot["local_datetime"]).replace(
                tzinfo=None
            ),
            analysis_date=analysis_date,
            weather_desc=slot.get("weather_desc", ""),
            weather_desc_en=slot.get("weather_desc_en", ""),
            t=slot.get("t"),
            hu=slot.get("hu"),
            ws=slot.get("ws"),
            wd=slot.get("wd", ""),
            vs_text=slot.get("vs_text"),
            image=slot.get("image", ""),
        )
    except (AttributeError, KeyError, TypeError, ValueError):
        logger.warning("Skipping malformed forecast slot: %r", slot)
        return None


# Indonesian locale style, e.g. 19/10/2026, 14.00.00
def _format_datetime(dt):
    if dt is None:
        return "-"
    return dt.strftime("%d/%m/%Y, %H.%M.%S")


def _format_time(dt):
    return dt.strftime("%H.%M")


def _format_upcoming(forecasts):
    return "\n".join(
        f"🕒 **{_format_time(f.local_datetime)}** — {f.weather_desc} ({f.t}°C, 💧{f.hu}%)"
        for f in forecasts
    )


def build_weather_embed(region, forecasts):
    current = forecasts[0]
    upcoming = forecasts[1 : 1 + UPCOMING_FORECASTS]

    embed = discord.Embed(
        title=f"🌤 Weather for {region.kelurahan}, {region.provinsi}",
        description=f"**{current.weather_desc_en} ({current.weather_desc})**",
        colour=discord.Colour(EMBED_COLOR),
        timestamp=discord.utils.utcnow(),
    )
    if current.image:
        embed.set_thumbnail(url=current.image.replace(" ", "%20"))

    embed.add_field(name="🌡️ Temperature", value=f"{current.t}°C", inline=True)
    embed.add_field(name="💧 Humidity", value=f"{current.hu}%", inline=True)
    embed.add_field(name="🌬️ Wind", value=f"{current.ws} m/s ({current.wd})", inline=True)
    embed.add_field(
        name="🕒 Forecast Time",
        value=_format_datetime(current.local_datetime),
        inline=False,
    )
    embed.add_field(
        name="📈 Visibility", value=current.vs_text or DEFAULT_VISIBILITY, inline=True
    )
    embed.add_field(
        name="📅 Data Updated", value=_format_datetime(current.analysis_date), inline=True
    )

    # Discord rejects empty field values
    if len(upcoming) > 0:
        embed.add_field(
            name=f"🔮 Next {len(upcoming)} Forecasts",
            value=_format_upcoming(upcoming),
            inline=False,
        )

    embed.set_footer(text="Data source: BMKG | Kingdom of Science", icon_url=BMKG_ICON_URL)
    return embed


def describe_embed(embed):
    """Render an embed as plain text, for places that cannot show embeds."""
    res = f"## {embed.title}\n"
    if embed.description:
        res += embed.description + "\n"
    for field in embed.fields:
        res += f"{field.name}: {field.value}\n"
    if embed.footer.text:
        res += f"\n{embed.footer.text}"
    return res.rstrip()
