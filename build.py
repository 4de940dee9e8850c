#!/usr/bin/env python3
"""Build script for the Riftmaker summoner emote pipeline."""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / 'src'
sys.path.insert(0, str(src_path))

# Import and run the main pipeline
from riftmaker.main import main

if __name__ == '__main__':
    main()
