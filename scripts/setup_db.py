#!/usr/bin/env python3
"""
Initialize the EcoStock database: create the users table and seed the test user.
Reads DATABASE_URL from the environment or .env.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ecostock.setup_db import main

if __name__ == "__main__":
    sys.exit(main())
