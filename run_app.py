"""Application launcher - Run this file to start State Object Demo"""

import sys
import os

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from state_object_demo.main import main

if __name__ == "__main__":
    main()
