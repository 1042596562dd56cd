import os

# Keep the module-level engine off any real server during tests.
os.environ.setdefault("DATABASE_URL", "sqlite://")
