#!/usr/bin/env python3
"""
Initialize the database schema
Creates the organizador, evento, participante and registro tables
"""
import asyncio
import sys
from pathlib import Path

# Add the app directory to the path
sys.path.append(str(Path(__file__).parent.parent))

import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def init_database(drop_existing: bool = False) -> bool:
    """Create all tables from the SQLAlchemy models"""
    from app.core.database import create_database_engine
    from app.models import Base

    engine = create_database_engine()
    try:
        async with engine.begin() as conn:
            if drop_existing:
                await conn.run_sync(Base.metadata.drop_all)
                logger.info("🗑️ Existing tables dropped")
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"✅ Tables created: {', '.join(sorted(Base.metadata.tables))}")
        return True
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}")
        return False
    finally:
        await engine.dispose()


if __name__ == "__main__":
    ok = asyncio.run(init_database(drop_existing="--drop" in sys.argv))
    sys.exit(0 if ok else 1)
