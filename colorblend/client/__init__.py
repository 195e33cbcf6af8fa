#
# Copyright (C) 2026 colorblend Developers — LGPL-3.0-or-later
#
