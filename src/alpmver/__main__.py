# SPDX-License-Identifier: MIT
"""Allow ``python -m alpmver``."""

from .cli import main

main()
