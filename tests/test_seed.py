from app.models.student import Student
from seed import SAMPLE_STUDENTS, seed_data


def test_seed_inserts_samples(session_factory, db):
    assert seed_data(session_factory) == len(SAMPLE_STUDENTS)
    assert db.query(Student).count() == len(SAMPLE_STUDENTS)


def test_seed_skips_when_table_has_rows(session_factory, ani, db):
    assert seed_data(session_factory) == 0
    assert db.query(Student).count() == 1
