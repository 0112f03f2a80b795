import os
import tempfile
from pathlib import Path

# Importing wavgen configures file logging; keep it out of the home directory.
os.environ.setdefault("WAVGEN_LOG_DIR", str(Path(tempfile.gettempdir()) / "wavgen-test-logs"))
