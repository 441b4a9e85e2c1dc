# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import os
import json
import random
import logging

from ._constants import (
    DATA_DIR,
    SUBSCRIBERS_FILE,
    FACTS_FILE,
    QUOTES_FILE,
    DEFAULT_QUOTES,
)

logger = logging.getLogger(__name__)


def ensure_data_files(data_dir=DATA_DIR):
    """Create the data directory and seed any missing default files.

    Existing files are never overwritten.
    """
    os.makedirs(data_dir, exist_ok=True)

    defaults = [
        (SUBSCRIBERS_FILE, []),
        (FACTS_FILE, []),
        (QUOTES_FILE, DEFAULT_QUOTES),
    ]
    for fname, default in defaults:
        path = os.path.join(data_dir, fname)
        if not os.path.isfile(path):
            logger.info("Seeding %s", path)
            write_json(path, default)


def read_json(path):
    with open(path, "rt", encoding="utf-8") as fh:
        return json.loads(fh.read())


def write_json(path, obj):
    with open(path, "wt", encoding="utf-8") as fh:
        fh.write(json.dumps(obj, indent=2, ensure_ascii=False))


def load_quotes(data_dir=DATA_DIR):
    return read_json(os.path.join(data_dir, QUOTES_FILE))


def load_facts(data_dir=DATA_DIR):
    return read_json(os.path.join(data_dir, FACTS_FILE))


def random_choice(items):
    if len(items) == 0:
        return None
    return random.choice(items)
