# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import os
import json
import logging
from typing import NamedTuple

from ._constants import DATA_DIR, KODE_WILAYAH_FILE, BUNDLED_KODE_WILAYAH

logger = logging.getLogger(__name__)


class Region(NamedTuple):
    nama: str
    kode: str  # BMKG adm4 code, e.g. 31.71.03.1001
    kelurahan: str
    kecamatan: str
    kota: str
    provinsi: str


def load_regions(path=None):
    # A table dropped into the data directory wins over the bundled one
    if path is None:
        path = os.path.join(DATA_DIR, KODE_WILAYAH_FILE)
        if not os.path.isfile(path):
            path = BUNDLED_KODE_WILAYAH

    if not os.path.isfile(path):
        logger.warning("No region table found at %s", path)
        return []

    with open(path, "rt", encoding="utf-8") as fh:
        rows = json.loads(fh.read())

    regions = []
    for row in rows:
        regions.append(
            Region(
                nama=row["nama"],
                kode=row["kode"],
                kelurahan=row.get("kelurahan", row["nama"]),
                kecamatan=row.get("kecamatan", ""),
                kota=row.get("kota", ""),
                provinsi=row.get("provinsi", ""),
            )
        )
    return regions


def find_region(city, regions):
    """Return the first region whose name contains `city` (case-insensitive), or None."""
    needle = city.strip().lower()
    if needle == "":
        return None

    for region in regions:
        if needle in region.nama.lower():
            return region
    return None
