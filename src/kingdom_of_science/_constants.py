# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import os
from dotenv import load_dotenv

load_dotenv()

PREFIX = "!"

# Data files
DATA_DIR = os.environ.get("DATA_DIR", "./data")
SUBSCRIBERS_FILE = "subscribers.json"
FACTS_FILE = "facts.json"
QUOTES_FILE = "quotes.json"
KODE_WILAYAH_FILE = "kode_wilayah.json"
BUNDLED_KODE_WILAYAH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", KODE_WILAYAH_FILE
)

DEFAULT_QUOTES = [
    "Get excited! This is the power of science! — Senku Ishigami",
    "Nothing is impossible with science! — Senku",
    "Science is just a name for the pursuit of knowledge! — Senku",
    "If you don't give up, you can't fail! — Chrome",
]

# Weather
BMKG_URL = os.environ.get("BMKG_URL", "https://api.bmkg.go.id/publik/prakiraan-cuaca")
BMKG_ICON_URL = "https://api-apps.bmkg.go.id/storage/icon/cuaca/cerah-pm.svg"
HTTP_TIMEOUT = 15
UPCOMING_FORECASTS = 3

# Inference
HF_BASE_URL = os.environ.get("HF_BASE_URL", "https://router.huggingface.co/v1")
HF_MODEL = os.environ.get("HF_MODEL", "meta-llama/Llama-3.1-8B-Instruct")
HUGGING_API_LIST = [
    os.environ.get("HUGGING_API"),
    os.environ.get("HUGGING_API2"),
    os.environ.get("HUGGING_API3"),
]
MAX_TOKENS = 512

# Discord limits
DISCORD_MESSAGE_LIMIT = 2000
CHUNK_SIZE = DISCORD_MESSAGE_LIMIT - 1
LONG_REPLY_THRESHOLD = 1800

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
