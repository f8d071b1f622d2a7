#!/usr/bin/env python
"""
Insert a handful of demo films.

Usage:
    python scripts/seed_demo.py [--db-path data/filmtrack.db]
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from filmtrack.api.config import get_database_path
from filmtrack.database import get_db_manager, crud

DEMO_FILMS = [
    {"title": "Alien", "genre": "Horror", "year": 1979, "watched": True},
    {"title": "Arrival", "genre": "Sci-Fi", "year": 2016, "watchlist": True},
    {"title": "Dune", "genre": "Sci-Fi", "year": 2021},
    {"title": "In the Mood for Love", "genre": "Romance", "year": 2000, "watched": True, "watchlist": True},
]


def main():
    parser = argparse.ArgumentParser(description="Seed FilmTrack with demo films")
    parser.add_argument('--db-path', type=str, default=get_database_path())
    args = parser.parse_args()

    db_manager = get_db_manager(db_path=args.db_path)
    with db_manager.session_scope() as session:
        for fields in DEMO_FILMS:
            film = crud.create_film(session, **fields)
            print(f"  + {film.title} ({film.year})")
        print(f"\n{crud.count_films(session)} films in database")


if __name__ == "__main__":
    main()
