"""Test configuration for pytest.

Adds the project root directory to Python path so that
rime_modifiers can be imported without installing the package.
"""

import sys
from pathlib import Path

# Add project root to Python path
ROOT_DIR = Path(__file__).parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
