"""Global pytest configuration."""

import os
import tempfile

# Point settings at a throwaway database before any app imports
_DB_DIR = tempfile.mkdtemp(prefix="tripplanner-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}")
os.environ.setdefault("OPENAI_API_KEY", "test-key")
