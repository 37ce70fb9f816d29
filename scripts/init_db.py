"""Create the SiteOps schema (projects, site logs, documents, termin, meetings).

Uses the same bootstrap the API runs on startup, against settings.DATABASE_URL.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from siteops.config import settings
from siteops.database import Base
from siteops.main import ensure_schema


def init_db():
    print(f"Creating SiteOps tables on {settings.DATABASE_URL} ...")
    ensure_schema()
    print(f"Database initialized: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    init_db()
