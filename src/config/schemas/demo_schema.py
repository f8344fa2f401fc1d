"""Entry sequence configuration schema."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DemoConfig(BaseModel):
    """Inputs of the pattern walkthrough printed by the entry sequence."""
    model_config = ConfigDict(extra="forbid")

    categories: List[str] = Field(
        default_factory=lambda: ["Math", "Physics"],
        description="Categories of the student created by the factory"
    )
    has_skip_level_test: bool = Field(True, description="Skip-level test flag of that student")
    course_name: str = Field(
        "Advanced Quantum Mechanics",
        description="Course checked against the tutored student"
    )
