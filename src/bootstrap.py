"""Application bootstrap - wires configuration, logging and services."""

from __future__ import annotations

from typing import Callable, Optional

from src.application.student.service import StudentApplicationService
from src.cli.formatters import format_bool
from src.config import AppConfig, ConfigurationManager, LoggingConfig
from src.domain.student.factory import BasicStudentFactory, StudentFactory
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.registry.university_registry import University, get_university


class Application:
    """Application context: owns configuration and the wired services."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        student_factory: Optional[StudentFactory] = None,
        university: Optional[University] = None,
    ) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._initialized = False

        # Defer initialization until first use
        self._config_manager: Optional[ConfigurationManager] = None
        self._student_factory = student_factory
        self._university = university
        self._student_service: Optional[StudentApplicationService] = None

        self.logger = get_logger(__name__)

    def initialize(self) -> None:
        """
        Load configuration, configure logging and wire the services.

        Raises:
            ConfigurationError: If the configuration file cannot be loaded
        """
        if self._initialized:
            return

        self._config_manager = ConfigurationManager(self.config_path)
        setup_logging(self._config_manager.get_typed(LoggingConfig))

        if self._student_factory is None:
            self._student_factory = BasicStudentFactory()
        if self._university is None:
            # Resolved once here and handed to the services explicitly
            self._university = get_university()

        self._student_service = StudentApplicationService(
            self._student_factory, self._university
        )

        self._initialized = True
        self.logger.info("Application initialized", config_path=self.config_path)

    @property
    def config(self) -> AppConfig:
        if self._config_manager is None:
            raise RuntimeError("Application not initialized")
        return self._config_manager.app_config

    @property
    def university(self) -> University:
        if self._university is None:
            raise RuntimeError("Application not initialized")
        return self._university

    @property
    def student_service(self) -> StudentApplicationService:
        if self._student_service is None:
            raise RuntimeError("Application not initialized")
        return self._student_service

    def run(self, write: Callable[[str], None] = print) -> bool:
        """
        Walk through the factory, decorator and singleton patterns.

        Each step writes one line of the console transcript.

        Args:
            write: Sink for transcript lines

        Returns:
            Whether the tutored student can take the configured course
        """
        self.initialize()
        demo = self.config.demo
        service = self.student_service
        factory_name = type(self._student_factory).__name__

        write(f"Factory Pattern: Created a BasicStudent using {factory_name}.")
        student = service.create_student(demo.categories, demo.has_skip_level_test)

        write("Decorator Pattern: Enhancing BasicStudent with TutoringSupportDecorator.")
        tutored_student = service.enhance_with_tutoring(student)

        write("Singleton Pattern: Adding student to the University (Singleton).")
        service.enroll(tutored_student)

        write(f"University now has {service.student_count()} students.")

        can_take = service.can_take_course(tutored_student, demo.course_name)
        write(
            "Checking enhanced capabilities due to Decorator: "
            f"Can tutored student take '{demo.course_name}'? {format_bool(can_take)}"
        )
        return can_take


def create_application(config_path: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path)
    app.initialize()
    return app
