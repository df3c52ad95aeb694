# SPDX-License-Identifier: MIT

from taskgate.initialize import initialize  # noqa: F401
