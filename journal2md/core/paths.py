#!/usr/bin/env python3
"""
paths.py
-------------------
Default locations used by the CLI.

All defaults are relative, so they resolve against the directory the
command is run from:

    ./
    ├── logs/             # Operation and error logs
    ├── exports/          # Default output directory
    └── journal2md.yaml   # Optional extraction settings

Every CLI option that takes a path defaults to one of these.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ---- Outputs ----
OUTPUT_DIR = Path("exports")

# ---- Logs ----
LOG_DIR = Path("logs")

# ---- Configuration ----
CONFIG_PATH = Path("journal2md.yaml")
