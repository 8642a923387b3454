#!/usr/bin/env python3
# lunartab/__main__.py
from __future__ import annotations

import sys

from lunartab.cli import main

sys.exit(main())
