#!/usr/bin/env python3
"""
gha-bump - Main Entry Point
"""

import sys
from gha_bump.cli import main

if __name__ == "__main__":
    sys.exit(main())
