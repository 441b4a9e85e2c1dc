# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
__version__ = "0.1.0"
