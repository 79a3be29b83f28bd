import logging
from app.core.database import SessionLocal, create_database_tables
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Ani Lestari", "class_label": "XII IPA 1", "age": 17},
    {"name": "Budi Santoso", "class_label": "XI IPS 2", "age": 16},
    {"name": "Citra Dewi", "class_label": "X IPA 3", "age": 15},
]


def seed_data(session_factory=SessionLocal) -> int:
    """
    Seed sample students into an empty table.

    Returns the number of rows inserted.
    """
    db = session_factory()
    try:
        # Skip if data already exists to avoid duplication
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")

        db.add_all([Student(**fields) for fields in SAMPLE_STUDENTS])
        db.commit()

        logger.info("✅ Data seeded successfully!")
        return len(SAMPLE_STUDENTS)

    except Exception as e:
        logger.error(f"❌ Error seeding data: {e}")
        db.rollback() # Rollback if error occurs
        raise
    finally:
        db.close() # Always close the connection


if __name__ == "__main__":
    create_database_tables()
    seed_data()
