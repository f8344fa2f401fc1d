import logging
from logging.handlers import RotatingFileHandler
import pytest
from unittest.mock import Mock
from src.domain.student.factory import BasicStudentFactory, StudentFactory
from src.domain.student.student import BasicStudent
from src.infrastructure.patterns.singleton_registry import SingletonRegistry
from src.infrastructure.registry.university_registry import University

@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh process-wide university."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    # pytest's own capture handlers are subclasses and are left alone
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.NullHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)

@pytest.fixture
def valid_student_data():
    return {
        "categories": ["Math", "Physics"],
        "has_skip_level_test": True
    }

@pytest.fixture
def basic_student(valid_student_data):
    return BasicStudent(
        categories=valid_student_data["categories"],
        test_to_skip_levels=valid_student_data["has_skip_level_test"]
    )

@pytest.fixture
def student_factory():
    return BasicStudentFactory()

@pytest.fixture
def mock_student_factory():
    return Mock(spec=StudentFactory)

@pytest.fixture
def university():
    return University()
