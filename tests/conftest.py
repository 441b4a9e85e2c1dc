"""
Pytest fixtures shared by the bot tests
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from kingdom_of_science._regions import Region


def make_message(content, bot=False):
    message = MagicMock()
    message.content = content
    message.author.bot = bot
    message.reply = AsyncMock()
    message.channel.send = AsyncMock()
    return message


@pytest.fixture
def regions():
    return [
        Region(
            nama="Kemayoran, Jakarta Pusat",
            kode="31.71.03.1001",
            kelurahan="Kemayoran",
            kecamatan="Kemayoran",
            kota="Kota Adm. Jakarta Pusat",
            provinsi="DKI Jakarta",
        ),
        Region(
            nama="Citarum, Bandung",
            kode="32.73.01.1001",
            kelurahan="Citarum",
            kecamatan="Bandung Wetan",
            kota="Kota Bandung",
            provinsi="Jawa Barat",
        ),
    ]


@pytest.fixture
def bmkg_payload():
    """A trimmed BMKG response: two days of slots, deliberately out of order"""
    def slot(local, desc, desc_en, t, hu):
        return {
            "local_datetime": local,
            "analysis_date": "2026-10-19T00:00:00",
            "weather_desc": desc,
            "weather_desc_en": desc_en,
            "t": t,
            "hu": hu,
            "ws": 5.2,
            "wd": "SE",
            "vs_text": "< 9 km",
            "image": "https://api-apps.bmkg.go.id/storage/icon/cuaca/berawan am.svg",
        }

    return {
        "lokasi": {"adm4": "31.71.03.1001"},
        "data": [
            {
                "cuaca": [
                    [
                        slot("2026-10-19 17:00:00", "Hujan Ringan", "Light Rain", 29, 80),
                        slot("2026-10-19 14:00:00", "Berawan", "Mostly Cloudy", 32, 65),
                    ],
                    [
                        slot("2026-10-20 02:00:00", "Cerah", "Sunny", 26, 90),
                        slot("2026-10-19 20:00:00", "Berawan", "Mostly Cloudy", 27, 85),
                        slot("2026-10-20 05:00:00", "Cerah", "Sunny", 25, 92),
                    ],
                ]
            }
        ],
    }
