#!/usr/bin/env python3
"""
Database Reset Script
Reset the concert ticket SQLite database

Features:
1. Drop all tables - wipes tickets and the id counter
2. Recreate tables - empty schema, next ticket id starts at 1 again

Notes:
- Only meaningful for STORAGE_BACKEND=sqlite
- To seed test data, run `python script/seed_data.py`
"""

import sys

from sqlalchemy import inspect

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database


def _count_tables(database: Database) -> int:
    return len(inspect(database.engine).get_table_names())


def drop_and_recreate_database(database: Database) -> None:
    print(f'Database URL: {settings.DATABASE_URL}')

    print('🗑️ Dropping tables...')
    database.drop_db_and_tables()

    table_count = _count_tables(database)
    print(f'   📊 Found {table_count} remaining tables')

    print('🏗️ Creating tables...')
    database.create_db_and_tables()
    print('Database recreation completed!')


def main() -> None:
    if settings.STORAGE_BACKEND != 'sqlite':
        print(f'⚠️  STORAGE_BACKEND={settings.STORAGE_BACKEND}, nothing to reset')
        return

    print('🔄 Starting database reset...')
    print('=' * 50)

    database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    try:
        drop_and_recreate_database(database)
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python script/seed_data.py')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        sys.exit(1)
    finally:
        database.dispose()


if __name__ == '__main__':
    main()
