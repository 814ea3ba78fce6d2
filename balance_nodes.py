#!/usr/bin/env python3

"""
Node Load Balancer runner script.
Allows direct execution without installation.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from node_balancer.cli import main

if __name__ == "__main__":
    sys.exit(main())
