#!/usr/bin/env python3
"""Run one fact ingestion for testing/debugging."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('SCHEDULER_ENABLED', 'false')

from factboard import create_app
from factboard.pipeline.ingest import run

if __name__ == '__main__':
    app = create_app()
    request_uri = sys.argv[1] if len(sys.argv) > 1 else None

    with app.app_context():
        uri = request_uri or app.config['FACTS_API_URL']
        print(f"Ingesting facts from {uri}...")
        result = run(request_uri=uri)
        print(f"Run complete. Status: {result['status']}")
        print(
            f"Fetched {result['fetched']}, inserted {result['inserted']}, "
            f"incremented {result['incremented']}, conflicts {result['conflicts']}"
        )
        if result['error']:
            print(f"Error: {result['error']}")
