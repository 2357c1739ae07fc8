"""Plugin that fails at import time."""

raise RuntimeError("disabled plugin")
