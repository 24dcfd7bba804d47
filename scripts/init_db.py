#!/usr/bin/env python3
"""Create the tables directly (no Alembic), e.g. for a local SQLite dev database."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('SCHEDULER_ENABLED', 'false')

from factboard import create_app
from factboard.extensions import db
from factboard import models  # noqa: F401  (registers tables)

if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Tables created on {app.config['SQLALCHEMY_DATABASE_URI']}")
