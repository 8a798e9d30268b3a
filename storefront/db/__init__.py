"""Database Package — declarative Base shared by models, migrations and tests."""
