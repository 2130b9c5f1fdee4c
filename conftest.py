"""Global pytest configuration."""

import os
import tempfile
from pathlib import Path

# Keep the app's default document out of the working tree during tests
os.environ.setdefault(
    "DATA_PATH", str(Path(tempfile.mkdtemp(prefix="foxtrail-")) / "itineraries.json")
)
