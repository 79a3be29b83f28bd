from sqlalchemy.orm import Session
from app.models.student import Student
from typing import List, Optional


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Fetch one student by ID"""
    return db.get(Student, student_id)


def get_students(db: Session) -> List[Student]:
    """Fetch every student in primary key order"""
    return db.query(Student).order_by(Student.id).all()


def create_student(db: Session, fields: dict) -> Student:
    """Insert a new student; the database assigns the id"""
    db_student = Student(
        name=fields["name"],
        class_label=fields["class_label"],
        age=fields["age"]
    )
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    return db_student


def update_student(db: Session, db_student: Student, changes: dict) -> Student:
    """Apply only the supplied fields to an existing student"""
    for field, value in changes.items():
        setattr(db_student, field, value)
    db.commit()
    db.refresh(db_student)
    return db_student


def delete_student(db: Session, db_student: Student) -> None:
    """Hard-delete a student row"""
    db.delete(db_student)
    db.commit()
