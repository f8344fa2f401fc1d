"""Tests for the university registry."""
from src.domain.student.decorators import TutoringSupportDecorator
from src.domain.student.student import BasicStudent
from src.infrastructure.patterns.singleton_registry import SingletonRegistry
from src.infrastructure.registry import University, get_university


class TestUniversity:
    """Test student registration."""

    def setup_method(self):
        """Set up test fixtures."""
        self.university = University()

    def test_starts_empty(self):
        assert self.university.get_students() == []
        assert self.university.student_count() == 0

    def test_preserves_insertion_order(self):
        students = [BasicStudent(categories=[f"Course {i}"]) for i in range(5)]

        for student in students:
            self.university.add_student(student)

        listed = self.university.get_students()
        assert len(listed) == 5
        assert all(a is b for a, b in zip(listed, students))

    def test_no_deduplication(self):
        student = BasicStudent(categories=["Math"])

        self.university.add_student(student)
        self.university.add_student(student)

        assert self.university.student_count() == 2

    def test_listing_is_a_snapshot(self):
        self.university.add_student(BasicStudent(categories=["Math"]))
        snapshot = self.university.get_students()

        self.university.add_student(BasicStudent(categories=["Physics"]))
        snapshot.clear()

        assert self.university.student_count() == 2
        assert len(self.university.get_students()) == 2

    def test_holds_shared_references(self):
        student = BasicStudent(categories=["Math"])
        tutored = TutoringSupportDecorator(student)

        self.university.add_student(tutored)

        assert self.university.get_students()[0] is tutored
        assert self.university.get_students()[0].wrapped is student


class TestGetUniversity:
    """Test the process-wide accessor."""

    def test_lazily_created(self):
        assert not SingletonRegistry.get_instance().has(University)

        university = get_university()

        assert isinstance(university, University)
        assert SingletonRegistry.get_instance().has(University)

    def test_same_instance_every_time(self):
        assert get_university() is get_university()

    def test_state_is_shared_across_accesses(self):
        get_university().add_student(BasicStudent(categories=["Math"]))

        assert get_university().student_count() == 1
